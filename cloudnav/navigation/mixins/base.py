"""Attributes and helpers the dispatcher mixins share."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cloudnav.constants.enums import EffectKind, Mode, ResourceKind
    from cloudnav.keyboard.actions import ActionEvent
    from cloudnav.models.core.resources import ResourceItem
    from cloudnav.models.state.app_state import AppState
    from cloudnav.models.state.focus_ring import FocusRing
    from cloudnav.navigation.dispatcher import ViewTarget
    from cloudnav.navigation.effects import FetchRequest
    from cloudnav.navigation.presenter import ViewPresenter
    from cloudnav.navigation.resource_view import ResourceView, ViewLevel, ViewSlot
    from cloudnav.navigation.tabs import Tab
    from cloudnav.navigation.views import ViewRegistry
    from cloudnav.utils.session_store import SessionStore


class DispatcherMixinBase:
    """Declares what every mixin may use from ``ActionDispatcher``."""

    state: AppState
    registry: ViewRegistry
    presenter: ViewPresenter
    session_store: SessionStore | None

    if TYPE_CHECKING:

        def target(self) -> ViewTarget | None: ...

        def target_for(self, request: FetchRequest) -> ViewTarget | None: ...

        def row_count(self, target: ViewTarget) -> int: ...

        def roots(self, target: ViewTarget) -> list[ResourceItem]: ...

        def ring(self, target: ViewTarget) -> FocusRing: ...

        def _emit(
            self,
            kind: EffectKind,
            request: FetchRequest | None = None,
            payload: Any = None,
        ) -> None: ...

        def _buffer_page_digit(self, char: str) -> None: ...

        def request_children(
            self, tab: Tab, view: ResourceView, level: ViewLevel, slot: ViewSlot, path: str
        ) -> None: ...

        def reload_target(self, target: ViewTarget) -> None: ...

        def ensure_loaded(self) -> None: ...

        def refresh_breadcrumb(self, tab: Tab, view: ResourceView) -> None: ...

        def open_service(self, kind: ResourceKind) -> Tab: ...

        def close_active_tab(self) -> None: ...

        def change_context(
            self,
            profile: str | None = None,
            region: str | None = None,
            role_arn: str | None = None,
        ) -> None: ...

        def restore_session(self, session: Any) -> None: ...

        def open_service_picker(self) -> None: ...

        def refresh_region_items(self) -> None: ...

        def picker_rows(self, mode: Mode) -> list[Any]: ...

        def _start_filter(self, event: ActionEvent) -> None: ...

        def _start_event_filter(self, event: ActionEvent) -> None: ...

        def _open_column_selector(self, event: ActionEvent) -> None: ...

        def _open_space_menu(self, event: ActionEvent) -> None: ...

        def _open_service_picker(self, event: ActionEvent) -> None: ...

        def _open_tab_picker(self, event: ActionEvent) -> None: ...

        def _open_session_picker(self, event: ActionEvent) -> None: ...

        def _open_region_picker(self, event: ActionEvent) -> None: ...

        def _open_profile_picker(self, event: ActionEvent) -> None: ...

        def _open_alarms(self, event: ActionEvent) -> None: ...

        def _show_help(self, event: ActionEvent) -> None: ...

        def _open_calendar(self, event: ActionEvent) -> None: ...

        def _next_item(self, event: ActionEvent) -> None: ...

        def _prev_item(self, event: ActionEvent) -> None: ...

        def _page_down(self, event: ActionEvent) -> None: ...

        def _page_up(self, event: ActionEvent) -> None: ...

        def _quit(self, event: ActionEvent) -> None: ...

        def _close_tab(self, event: ActionEvent) -> None: ...

        def _refresh(self, event: ActionEvent) -> None: ...


__all__ = ["DispatcherMixinBase"]
