"""MiniChess game engine: pieces, board, rules, state, notation."""

from minichess.game.pieces import Color, PieceType, Piece, Square, Move
from minichess.game.board import Board, CoordinateError, parse_square, square_to_notation, render_board
from minichess.game.rules import (
    is_square_attacked, is_in_check, pseudo_legal_moves, legal_moves,
    generate_all_legal_moves, trial_move,
)
from minichess.game.state import GameState, IllegalMoveError
from minichess.game.notation import move_to_notation, notation_to_move, game_to_text, text_to_game

__all__ = [
    "Color", "PieceType", "Piece", "Square", "Move",
    "Board", "CoordinateError", "parse_square", "square_to_notation", "render_board",
    "is_square_attacked", "is_in_check", "pseudo_legal_moves", "legal_moves",
    "generate_all_legal_moves", "trial_move",
    "GameState", "IllegalMoveError",
    "move_to_notation", "notation_to_move", "game_to_text", "text_to_game",
]
