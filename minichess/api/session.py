"""Game session: one game behind a lock.

GameSession is the pure-Python core with no HTTP dependency. All access
to the underlying GameState goes through the lock, because legal-move
generation temporarily mutates the board while testing each candidate.
"""

from __future__ import annotations

import logging
import threading

from minichess.game.board import Board, render_board
from minichess.game.notation import move_to_notation
from minichess.game.pieces import Color, Piece, PieceType, Square
from minichess.game.state import GameState

logger = logging.getLogger("minichess.api")


class GameSession:
    """A single game owned by one client."""

    def __init__(self, session_id: str):
        self.session_id = session_id
        self._state = GameState.new()
        self._lock = threading.Lock()

    def get_board(self) -> Board:
        """The live board. Callers must not mutate it directly."""
        return self._state.board

    def get_side_to_move(self) -> Color:
        return self._state.side_to_move

    def get_moves(self) -> list[str]:
        with self._lock:
            return self._state.moves()

    def legal_moves_from(self, square: Square) -> list[Square]:
        with self._lock:
            return self._state.legal_moves_from(square)

    def make_move(self, from_sq: Square, to_sq: Square) -> None:
        """Play a move. Raises IllegalMoveError and leaves state unchanged if illegal."""
        with self._lock:
            move = self._state.make_move(from_sq, to_sq)
        logger.info(f"Session {self.session_id}: {move_to_notation(move)}")

    def reset(self) -> None:
        """Start over from the initial position with a fresh GameState."""
        fresh = GameState.new()
        with self._lock:
            self._state = fresh
        logger.info(f"Session {self.session_id}: reset")

    def in_check(self, color: Color) -> bool:
        with self._lock:
            return self._state.in_check(color)

    def is_square_attacked(self, square: Square, by_color: Color) -> bool:
        with self._lock:
            return self._state.is_square_attacked(square, by_color)

    def place_piece(self, square: Square, piece: Piece | None) -> None:
        """Put a piece directly on the board, bypassing move rules.

        Used to set up test positions. Side to move and the move log are
        not touched.
        """
        with self._lock:
            self._state.board.put(square, piece)

    def setup_check_position(self) -> None:
        """Place a Black queen on e2, giving check to White's king on e1."""
        self.place_piece(Square(4, 1), Piece(PieceType.QUEEN, Color.BLACK))
        logger.info(f"Session {self.session_id}: test check position set up")

    def board_snapshot(self) -> dict:
        with self._lock:
            return self._state.to_dict()

    def render(self) -> str:
        with self._lock:
            return render_board(self._state.board, self._state.side_to_move,
                                len(self._state.move_history))
