"""MiniChess: a deterministic chess rule engine with a session-based HTTP API."""

__version__ = "0.1.0"
