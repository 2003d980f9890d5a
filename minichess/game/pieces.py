"""Value types for MiniChess: colors, piece kinds, pieces, squares and moves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    @property
    def opponent(self) -> Color:
        return Color(1 - self)

    @property
    def forward(self) -> int:
        """Rank direction this color's pawns advance in."""
        return 1 if self == Color.WHITE else -1


class PieceType(IntEnum):
    PAWN = 0
    ROOK = 1
    BISHOP = 2
    KNIGHT = 3
    QUEEN = 4
    KING = 5


# Map character codes to PieceType
PIECE_CHARS = {
    "P": PieceType.PAWN,
    "R": PieceType.ROOK,
    "B": PieceType.BISHOP,
    "N": PieceType.KNIGHT,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}
PIECE_NAMES = {v: k for k, v in PIECE_CHARS.items()}

FILE_LABELS = "abcdefgh"
RANK_LABELS = "12345678"


@dataclass(frozen=True)
class Piece:
    piece_type: PieceType
    color: Color

    @property
    def char(self) -> str:
        """One-letter code, uppercase for White and lowercase for Black."""
        c = PIECE_NAMES[self.piece_type]
        return c if self.color == Color.WHITE else c.lower()


@dataclass(frozen=True)
class Square:
    """A board square. file 0..7 is 'a'..'h', rank 0..7 is '1'..'8'."""
    file: int
    rank: int

    def in_bounds(self) -> bool:
        return 0 <= self.file < 8 and 0 <= self.rank < 8

    def offset(self, df: int, dr: int) -> Square:
        return Square(self.file + df, self.rank + dr)

    def __str__(self) -> str:
        return FILE_LABELS[self.file] + RANK_LABELS[self.rank]


@dataclass(frozen=True)
class Move:
    """A piece moving from one square to another."""
    from_sq: Square
    to_sq: Square

    @property
    def notation(self) -> str:
        return f"{self.from_sq}-{self.to_sq}"

    def __str__(self) -> str:
        return self.notation
