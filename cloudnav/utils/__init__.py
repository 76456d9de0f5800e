"""Utility functions and classes for CloudNav."""

from cloudnav.utils.session_store import (
    FileSessionBackend,
    SessionStore,
    SessionStoreError,
)

__all__ = [
    # Sessions
    "FileSessionBackend",
    "SessionStore",
    "SessionStoreError",
]
