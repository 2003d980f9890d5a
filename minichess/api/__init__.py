"""MiniChess REST API: one GameSession per client game."""

from minichess.api.session import GameSession
from minichess.api.session_manager import SessionManager, SessionLimitError

__all__ = [
    "GameSession",
    "SessionManager",
    "SessionLimitError",
]
