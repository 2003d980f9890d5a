"""Game state for MiniChess: board, side to move, and the move log."""

from __future__ import annotations

import logging
from typing import Optional

from minichess.game.board import BOARD_SIZE, Board
from minichess.game.pieces import Color, Move, Square
from minichess.game.rules import is_in_check, is_square_attacked, legal_moves
from minichess.game.notation import move_to_notation

logger = logging.getLogger("minichess.game")


class IllegalMoveError(ValueError):
    """Raised when a move is not legal for the side to move."""

    def __init__(self, move: Move, side_to_move: Color):
        self.move = move
        self.side_to_move = side_to_move
        super().__init__(
            f"Illegal move {move.notation} for {side_to_move.name}"
        )


class GameState:
    """Complete state of one game.

    The board is owned by this instance. Starting over is done by
    building a new GameState rather than clearing this one.
    """

    def __init__(self, board: Optional[Board] = None,
                 side_to_move: Color = Color.WHITE):
        self.board: Board = board if board is not None else Board.initial()
        self.side_to_move: Color = side_to_move
        self.move_history: list[Move] = []

    @classmethod
    def new(cls) -> GameState:
        """Standard starting position, White to move, empty log."""
        return cls()

    def legal_moves_from(self, square: Square) -> list[Square]:
        """Legal destinations for the piece on square, or [] if none."""
        return legal_moves(self.board, square, self.side_to_move)

    def make_move(self, from_sq: Square, to_sq: Square) -> Move:
        """Validate and play a move, then pass the turn.

        Any occupant of to_sq is replaced. On failure nothing changes.

        Raises:
            IllegalMoveError: If to_sq is not a legal destination from
                from_sq for the side to move.
        """
        move = Move(from_sq, to_sq)
        if to_sq not in self.legal_moves_from(from_sq):
            raise IllegalMoveError(move, self.side_to_move)

        piece = self.board.at(from_sq)
        self.board.put(to_sq, piece)
        self.board.put(from_sq, None)
        self.move_history.append(move)
        self.side_to_move = self.side_to_move.opponent
        logger.debug(f"Played {move.notation} ({len(self.move_history)} moves)")
        return move

    def moves(self) -> list[str]:
        """Move log as notation strings. A new list on every call."""
        return [move_to_notation(m) for m in self.move_history]

    def in_check(self, color: Color) -> bool:
        return is_in_check(self.board, color)

    def is_square_attacked(self, square: Square, by_color: Color) -> bool:
        return is_square_attacked(self.board, square, by_color)

    def to_dict(self) -> dict:
        """JSON-ready snapshot of the board and check status."""
        cells = []
        for rank in range(BOARD_SIZE):
            row = []
            for file in range(BOARD_SIZE):
                piece = self.board.piece_at(rank, file)
                if piece is None:
                    row.append(None)
                else:
                    row.append({"type": piece.piece_type.name,
                                "color": piece.color.name})
            cells.append(row)

        return {
            "side_to_move": self.side_to_move.name,
            "in_check": self.in_check(self.side_to_move),
            "white_in_check": self.in_check(Color.WHITE),
            "black_in_check": self.in_check(Color.BLACK),
            "cells": cells,
        }
