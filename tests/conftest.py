"""Shared test fixtures."""

import pytest

from minichess.api.dependencies import init_app
from minichess.api.server import app as _shared_app
from minichess.game.board import Board
from minichess.game.state import GameState


@pytest.fixture
def state():
    """A fresh game in the starting position."""
    return GameState.new()


@pytest.fixture
def empty_board():
    return Board.empty()


@pytest.fixture
def api_app():
    """The shared FastAPI app, re-initialized with a small session cap."""
    init_app(_shared_app, {"sessions": {"max_sessions": 5}})
    return _shared_app
