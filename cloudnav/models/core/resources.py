"""Resource, connection and catalog models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from cloudnav.constants.values import NOT_AVAILABLE, PREFIX_DELIMITER


class ResourceItem(BaseModel):
    """One row of any resource list.

    Prefix-style hierarchies use the full path as ``key`` (``"logs/2024/"``)
    and mark containers with ``is_branch``.
    """

    key: str
    name: str = ""
    is_branch: bool = False
    status: str = ""
    attributes: dict[str, str] = Field(default_factory=dict)
    document: str | None = None

    @property
    def label(self) -> str:
        """Display label: the name, or the last path segment of the key."""
        if self.name:
            return self.name
        trimmed = self.key.rstrip(PREFIX_DELIMITER)
        segment = trimmed.rsplit(PREFIX_DELIMITER, 1)[-1]
        return segment + PREFIX_DELIMITER if self.is_branch else segment

    def column(self, name: str) -> str:
        """Cell value for a column name."""
        if name == "name":
            return self.label
        if name == "status":
            return self.status or NOT_AVAILABLE
        return self.attributes.get(name, NOT_AVAILABLE)


class ConnectionContext(BaseModel):
    """Profile, region and identity every fetch is issued under."""

    profile: str
    region: str
    account_id: str = ""
    role_arn: str = ""

    @property
    def key(self) -> str:
        return f"{self.profile}@{self.region}"


class ProfileInfo(BaseModel):
    """A named credential profile from the shared config files."""

    name: str
    region: str | None = None
    role_arn: str | None = None
    source_profile: str | None = None
    sso_session: str | None = None

    @property
    def label(self) -> str:
        parts = [self.name]
        if self.region:
            parts.append(self.region)
        if self.role_arn:
            parts.append(self.role_arn)
        return " ".join(parts)


class RegionInfo(BaseModel):
    """Region catalog entry with its last measured latency."""

    name: str
    code: str
    group: str
    opt_in: bool = False
    latency_ms: float | None = None

    @property
    def label(self) -> str:
        latency = f"({self.latency_ms:.0f}ms)" if self.latency_ms is not None else "(>1s)"
        opt_in = "[opt-in] " if self.opt_in else ""
        return f"{self.group} > {self.name} > {self.code} {opt_in}{latency}"


__all__ = ["ConnectionContext", "ProfileInfo", "RegionInfo", "ResourceItem"]
