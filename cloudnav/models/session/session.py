"""Persisted browsing session models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from cloudnav.constants.values import SESSION_ID_FORMAT


def new_session_id(now: datetime | None = None) -> str:
    """Mint a sortable session id from a timestamp."""
    return (now or datetime.now()).strftime(SESSION_ID_FORMAT)


class SessionTab(BaseModel):
    """One saved tab."""

    kind: str
    title: str
    breadcrumb: str
    filter: str | None = None


class Session(BaseModel):
    """Saved tabs of one connection context."""

    id: str
    timestamp: datetime = Field(default_factory=datetime.now)
    profile: str
    region: str
    account_id: str = ""
    role_arn: str = ""
    tabs: list[SessionTab] = Field(default_factory=list)

    @property
    def label(self) -> str:
        stamp = self.timestamp.strftime("%Y-%m-%d %H:%M:%S")
        return f"{stamp} {self.profile} {self.region} ({len(self.tabs)} tabs)"


__all__ = ["Session", "SessionTab", "new_session_id"]
