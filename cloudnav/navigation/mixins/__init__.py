"""Handler mixins composed by ``ActionDispatcher``."""

from cloudnav.navigation.mixins.filters import FilterMixin
from cloudnav.navigation.mixins.modals import ModalMixin
from cloudnav.navigation.mixins.navigation import NavigationMixin
from cloudnav.navigation.mixins.pickers import PickerMixin

__all__ = ["FilterMixin", "ModalMixin", "NavigationMixin", "PickerMixin"]
