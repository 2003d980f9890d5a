"""Session manager: tracks active game sessions."""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Optional

from minichess.api.session import GameSession

logger = logging.getLogger("minichess.api")


class SessionLimitError(Exception):
    """Raised when creating a session would exceed max_sessions."""


class SessionManager:
    """Creates and tracks GameSession instances."""

    def __init__(self, max_sessions: int = 100):
        self.max_sessions = max_sessions
        self._sessions: dict[str, GameSession] = {}
        self._lock = threading.Lock()

    def create_session(self) -> GameSession:
        """Create a new game session in the starting position.

        Raises:
            SessionLimitError: If max_sessions sessions are already active.
        """
        session_id = uuid.uuid4().hex[:12]
        session = GameSession(session_id)

        with self._lock:
            if len(self._sessions) >= self.max_sessions:
                raise SessionLimitError(
                    f"Session limit reached ({self.max_sessions} active)"
                )
            self._sessions[session_id] = session

        logger.info(f"Created session {session_id}")
        return session

    def get_session(self, session_id: str) -> Optional[GameSession]:
        """Look up a session by ID. Returns None if not found."""
        return self._sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        """Remove a session. Returns True if found and deleted."""
        with self._lock:
            if session_id in self._sessions:
                del self._sessions[session_id]
                logger.info(f"Deleted session {session_id}")
                return True
        return False

    @property
    def active_session_count(self) -> int:
        return len(self._sessions)
