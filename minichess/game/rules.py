"""Attack detection, pseudo-legal move generation and legality filtering.

Standard chess piece movement without castling, en passant or promotion.
Checkmate and stalemate are not detected: a side can be left with no
legal moves and nothing is flagged.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from minichess.game.board import Board
from minichess.game.pieces import Color, Move, Piece, PieceType, Square

# Orthogonal directions (file delta, rank delta)
ORTHOGONAL = [(0, 1), (0, -1), (1, 0), (-1, 0)]
DIAGONAL_DIRS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
# All 8 directions
ALL_DIRS = ORTHOGONAL + DIAGONAL_DIRS
KNIGHT_OFFSETS = [(1, 2), (2, 1), (2, -1), (1, -2),
                  (-1, -2), (-2, -1), (-2, 1), (-1, 2)]

# Initial rank from which a pawn may advance two squares
PAWN_START_RANK = {Color.WHITE: 1, Color.BLACK: 6}


# ---------------------------------------------------------------------------
# Attack geometry
# ---------------------------------------------------------------------------

def _path_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """True if every square strictly between from_sq and to_sq is empty.

    Assumes the two squares share a rank, file or diagonal.
    """
    df = (to_sq.file > from_sq.file) - (to_sq.file < from_sq.file)
    dr = (to_sq.rank > from_sq.rank) - (to_sq.rank < from_sq.rank)
    sq = from_sq.offset(df, dr)
    while sq != to_sq:
        if board.at(sq) is not None:
            return False
        sq = sq.offset(df, dr)
    return True


def _pawn_attacks(board: Board, from_sq: Square, piece: Piece, target: Square) -> bool:
    # Straight ahead is never an attack
    return (target.rank - from_sq.rank == piece.color.forward
            and abs(target.file - from_sq.file) == 1)


def _knight_attacks(board: Board, from_sq: Square, piece: Piece, target: Square) -> bool:
    df, dr = abs(target.file - from_sq.file), abs(target.rank - from_sq.rank)
    return (df, dr) in ((1, 2), (2, 1))


def _king_attacks(board: Board, from_sq: Square, piece: Piece, target: Square) -> bool:
    df, dr = abs(target.file - from_sq.file), abs(target.rank - from_sq.rank)
    return max(df, dr) == 1


def _rook_attacks(board: Board, from_sq: Square, piece: Piece, target: Square) -> bool:
    if from_sq == target:
        return False
    if from_sq.file != target.file and from_sq.rank != target.rank:
        return False
    return _path_clear(board, from_sq, target)


def _bishop_attacks(board: Board, from_sq: Square, piece: Piece, target: Square) -> bool:
    if from_sq == target:
        return False
    if abs(target.file - from_sq.file) != abs(target.rank - from_sq.rank):
        return False
    return _path_clear(board, from_sq, target)


def _queen_attacks(board: Board, from_sq: Square, piece: Piece, target: Square) -> bool:
    return (_rook_attacks(board, from_sq, piece, target)
            or _bishop_attacks(board, from_sq, piece, target))


AttackFn = Callable[[Board, Square, Piece, Square], bool]

_ATTACKS: dict[PieceType, AttackFn] = {
    PieceType.PAWN: _pawn_attacks,
    PieceType.ROOK: _rook_attacks,
    PieceType.BISHOP: _bishop_attacks,
    PieceType.KNIGHT: _knight_attacks,
    PieceType.QUEEN: _queen_attacks,
    PieceType.KING: _king_attacks,
}


def is_square_attacked(board: Board, target: Square, by_color: Color) -> bool:
    """Check if any piece of by_color can reach the target square.

    Occupancy of the target itself is ignored: this answers "can reach",
    not "can legally move to".
    """
    for from_sq, piece in board.squares(by_color):
        if _ATTACKS[piece.piece_type](board, from_sq, piece, target):
            return True
    return False


def find_king(board: Board, color: Color) -> Optional[Square]:
    """Find the first king of color, scanning rank-major then file."""
    for sq, piece in board.squares(color):
        if piece.piece_type == PieceType.KING:
            return sq
    return None


def is_in_check(board: Board, color: Color) -> bool:
    """Check if the given color's king is under attack."""
    king_sq = find_king(board, color)
    if king_sq is None:
        return False  # No king on the board
    return is_square_attacked(board, king_sq, color.opponent)


# ---------------------------------------------------------------------------
# Pseudo-legal move generation
# ---------------------------------------------------------------------------

def _gen_pawn_moves(board: Board, from_sq: Square, piece: Piece) -> list[Square]:
    moves: list[Square] = []
    fwd = piece.color.forward

    one = from_sq.offset(0, fwd)
    if one.in_bounds() and board.at(one) is None:
        moves.append(one)
        two = from_sq.offset(0, 2 * fwd)
        if from_sq.rank == PAWN_START_RANK[piece.color] and board.at(two) is None:
            moves.append(two)

    # Captures diagonally forward, only onto an enemy piece
    for df in (-1, 1):
        diag = from_sq.offset(df, fwd)
        if not diag.in_bounds():
            continue
        target = board.at(diag)
        if target is not None and target.color != piece.color:
            moves.append(diag)

    return moves


def _gen_offset_moves(board: Board, from_sq: Square, piece: Piece,
                      offsets: list[tuple[int, int]]) -> list[Square]:
    moves: list[Square] = []
    for df, dr in offsets:
        to_sq = from_sq.offset(df, dr)
        if not to_sq.in_bounds():
            continue
        target = board.at(to_sq)
        if target is None or target.color != piece.color:
            moves.append(to_sq)
    return moves


def _gen_ray_moves(board: Board, from_sq: Square, piece: Piece,
                   directions: list[tuple[int, int]]) -> list[Square]:
    moves: list[Square] = []
    for df, dr in directions:
        to_sq = from_sq.offset(df, dr)
        while to_sq.in_bounds():
            target = board.at(to_sq)
            if target is None:
                moves.append(to_sq)
            else:
                if target.color != piece.color:
                    moves.append(to_sq)
                break
            to_sq = to_sq.offset(df, dr)
    return moves


def _gen_knight_moves(board: Board, from_sq: Square, piece: Piece) -> list[Square]:
    return _gen_offset_moves(board, from_sq, piece, KNIGHT_OFFSETS)


def _gen_king_moves(board: Board, from_sq: Square, piece: Piece) -> list[Square]:
    return _gen_offset_moves(board, from_sq, piece, ALL_DIRS)


def _gen_rook_moves(board: Board, from_sq: Square, piece: Piece) -> list[Square]:
    return _gen_ray_moves(board, from_sq, piece, ORTHOGONAL)


def _gen_bishop_moves(board: Board, from_sq: Square, piece: Piece) -> list[Square]:
    return _gen_ray_moves(board, from_sq, piece, DIAGONAL_DIRS)


def _gen_queen_moves(board: Board, from_sq: Square, piece: Piece) -> list[Square]:
    return _gen_ray_moves(board, from_sq, piece, ALL_DIRS)


GeneratorFn = Callable[[Board, Square, Piece], list[Square]]

_GENERATORS: dict[PieceType, GeneratorFn] = {
    PieceType.PAWN: _gen_pawn_moves,
    PieceType.ROOK: _gen_rook_moves,
    PieceType.BISHOP: _gen_bishop_moves,
    PieceType.KNIGHT: _gen_knight_moves,
    PieceType.QUEEN: _gen_queen_moves,
    PieceType.KING: _gen_king_moves,
}


def pseudo_legal_moves(board: Board, from_sq: Square, piece: Piece) -> list[Square]:
    """Destinations respecting geometry, board edges and occupancy, ignoring check."""
    return _GENERATORS[piece.piece_type](board, from_sq, piece)


# ---------------------------------------------------------------------------
# Legality filtering
# ---------------------------------------------------------------------------

@contextmanager
def trial_move(board: Board, from_sq: Square, to_sq: Square) -> Iterator[Board]:
    """Temporarily play from_sq -> to_sq on board.

    Both squares are restored to their previous occupants on exit, including
    when the body raises.
    """
    moving = board.at(from_sq)
    captured = board.at(to_sq)
    board.put(from_sq, None)
    board.put(to_sq, moving)
    try:
        yield board
    finally:
        board.put(to_sq, captured)
        board.put(from_sq, moving)


def legal_moves(board: Board, from_sq: Square, side_to_move: Color) -> list[Square]:
    """Destinations from from_sq that do not leave side_to_move in check.

    Returns an empty list if from_sq is empty or holds an opposing piece.
    """
    piece = board.at(from_sq)
    if piece is None or piece.color != side_to_move:
        return []

    legal = []
    for to_sq in pseudo_legal_moves(board, from_sq, piece):
        with trial_move(board, from_sq, to_sq):
            leaves_check = is_in_check(board, side_to_move)
        if not leaves_check:
            legal.append(to_sq)
    return legal


def generate_all_legal_moves(board: Board, side_to_move: Color) -> list[Move]:
    """Generate all legal moves for side_to_move, origins in board order."""
    moves = []
    for from_sq, _ in list(board.squares(side_to_move)):
        for to_sq in legal_moves(board, from_sq, side_to_move):
            moves.append(Move(from_sq, to_sq))
    return moves
