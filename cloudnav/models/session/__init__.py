"""Persisted session models."""

from cloudnav.models.session.session import Session, SessionTab, new_session_id

__all__ = ["Session", "SessionTab", "new_session_id"]
