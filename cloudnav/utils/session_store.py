"""Session persistence.

Sessions are stored one JSON file per session id. ``SessionStore`` sits in
front of the backend and never lets a persistence failure escape: errors are
logged and turned into empty or no-op results.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from cloudnav.constants.values import SESSION_FILE_SUFFIX
from cloudnav.models.core.resources import ConnectionContext
from cloudnav.models.session.session import Session, SessionTab, new_session_id

if TYPE_CHECKING:
    from cloudnav.navigation.resource_view import ResourceView
    from cloudnav.navigation.tabs import Tab

logger = logging.getLogger(__name__)


class SessionStoreError(Exception):
    """Raised by session backends on read or write failures."""


class FileSessionBackend:
    """Flat-file backend: ``<directory>/<id>.json``."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def _path(self, session_id: str) -> Path:
        return self.directory / f"{session_id}{SESSION_FILE_SUFFIX}"

    def save(self, session: Session) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            self._path(session.id).write_text(
                session.model_dump_json(indent=2), encoding="utf-8"
            )
        except OSError as e:
            raise SessionStoreError(f"Cannot write session {session.id}: {e}") from e

    def load(self, session_id: str) -> Session:
        path = self._path(session_id)
        try:
            return Session.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            raise SessionStoreError(f"Cannot read session {session_id}: {e}") from e

    def list_all(self) -> list[Session]:
        """Every readable session; unreadable files are skipped."""
        if not self.directory.is_dir():
            return []
        sessions: list[Session] = []
        try:
            paths = sorted(self.directory.glob(f"*{SESSION_FILE_SUFFIX}"))
        except OSError as e:
            raise SessionStoreError(f"Cannot list sessions in {self.directory}: {e}") from e
        for path in paths:
            try:
                sessions.append(Session.model_validate_json(path.read_text(encoding="utf-8")))
            except (OSError, ValidationError) as e:
                logger.debug("Skipping unreadable session file %s: %s", path, e)
        return sessions

    def delete(self, session_id: str) -> None:
        try:
            self._path(session_id).unlink(missing_ok=True)
        except OSError as e:
            raise SessionStoreError(f"Cannot delete session {session_id}: {e}") from e


def serialize_tabs(tabs: list[Tab], views: dict[int, ResourceView]) -> list[SessionTab]:
    """Saved form of the open tabs.

    The filter text is kept only for tabs sitting on their root list view.
    """
    saved: list[SessionTab] = []
    for tab in tabs:
        view = views.get(tab.tab_id)
        text_filter = None
        if view is not None and view.depth == 0 and view.root_slot.list_state.filter:
            text_filter = view.root_slot.list_state.filter
        saved.append(
            SessionTab(
                kind=tab.kind.value,
                title=tab.title,
                breadcrumb=tab.breadcrumb,
                filter=text_filter,
            )
        )
    return saved


class SessionStore:
    """Upserts one session per connection context."""

    def __init__(self, backend: FileSessionBackend) -> None:
        self.backend = backend
        self._tracked: dict[str, str] = {}

    def tracked_id(self, context: ConnectionContext) -> str | None:
        return self._tracked.get(context.key)

    def track(self, session: Session) -> None:
        """Make later saves for the session's context update it in place."""
        key = ConnectionContext(profile=session.profile, region=session.region).key
        self._tracked[key] = session.id

    def save(
        self,
        tabs: list[Tab],
        views: dict[int, ResourceView],
        context: ConnectionContext,
    ) -> bool:
        """Upsert the session for ``context``, or delete it when no tab is open.

        Returns:
            True when the backend accepted the write or delete.
        """
        session_id = self._tracked.get(context.key)
        if not tabs:
            if session_id is None:
                return True
            self._tracked.pop(context.key, None)
            return self.delete(session_id)

        if session_id is None:
            session_id = new_session_id()
            self._tracked[context.key] = session_id
        session = Session(
            id=session_id,
            timestamp=datetime.now(),
            profile=context.profile,
            region=context.region,
            account_id=context.account_id,
            role_arn=context.role_arn,
            tabs=serialize_tabs(tabs, views),
        )
        try:
            self.backend.save(session)
        except SessionStoreError as e:
            logger.warning("Failed to save session %s: %s", session_id, e)
            return False
        logger.debug("Saved session %s with %d tabs", session_id, len(session.tabs))
        return True

    def load(self, session_id: str) -> Session | None:
        try:
            session = self.backend.load(session_id)
        except SessionStoreError as e:
            logger.warning("Failed to load session %s: %s", session_id, e)
            return None
        self.track(session)
        return session

    def list_all(self) -> list[Session]:
        """Saved sessions, newest first."""
        try:
            sessions = self.backend.list_all()
        except SessionStoreError as e:
            logger.warning("Failed to list sessions: %s", e)
            return []
        return sorted(sessions, key=lambda session: session.timestamp, reverse=True)

    def latest(self) -> Session | None:
        sessions = self.list_all()
        return sessions[0] if sessions else None

    def delete(self, session_id: str) -> bool:
        try:
            self.backend.delete(session_id)
        except SessionStoreError as e:
            logger.warning("Failed to delete session %s: %s", session_id, e)
            return False
        logger.debug("Deleted session %s", session_id)
        return True


__all__ = [
    "FileSessionBackend",
    "SessionStore",
    "SessionStoreError",
    "serialize_tabs",
]
