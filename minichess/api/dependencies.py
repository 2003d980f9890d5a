"""FastAPI dependency injection setup."""

from __future__ import annotations

import logging

from minichess.api.session_manager import SessionManager

logger = logging.getLogger("minichess.api")

DEFAULT_MAX_SESSIONS = 100


def init_app(app, config: dict) -> None:
    """Initialize FastAPI app with shared resources from config.

    Creates a SessionManager and stores it on app.state.

    Args:
        app: FastAPI application instance.
        config: Configuration dict with keys:
            - sessions.max_sessions: cap on concurrently active games
    """
    sessions_cfg = config.get("sessions") or {}
    max_sessions = int(sessions_cfg.get("max_sessions", DEFAULT_MAX_SESSIONS))

    app.state.session_manager = SessionManager(max_sessions=max_sessions)
    logger.info(f"MiniChess API initialized (max_sessions={max_sessions})")


def get_session_manager(app) -> SessionManager:
    """Get SessionManager from app state."""
    return app.state.session_manager
