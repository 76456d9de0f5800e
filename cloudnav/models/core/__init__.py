"""Resource, connection and catalog models."""

from cloudnav.models.core.resources import (
    ConnectionContext,
    ProfileInfo,
    RegionInfo,
    ResourceItem,
)

__all__ = ["ConnectionContext", "ProfileInfo", "RegionInfo", "ResourceItem"]
