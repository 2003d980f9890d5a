"""Board storage, starting layout, coordinate conversion and text rendering."""

from __future__ import annotations

from typing import Iterator, Optional

from minichess.game.pieces import (
    FILE_LABELS, PIECE_CHARS, RANK_LABELS, Color, Piece, Square,
)

BOARD_SIZE = 8

# Back rank, files a..h
BACK_RANK = "RNBQKBNR"

# Starting positions: dict mapping (rank, file) -> (piece_type_char, color)
# White on ranks 0-1 (bottom), Black on ranks 6-7 (top)
STARTING_POSITIONS: dict[tuple[int, int], tuple[str, int]] = {}
for _file, _char in enumerate(BACK_RANK):
    STARTING_POSITIONS[(0, _file)] = (_char, 0)
    STARTING_POSITIONS[(1, _file)] = ("P", 0)
    STARTING_POSITIONS[(6, _file)] = ("P", 1)
    STARTING_POSITIONS[(7, _file)] = (_char, 1)
del _file, _char


class CoordinateError(ValueError):
    """Raised when a square string is not a valid 'a1'..'h8' coordinate."""


def _in_bounds(rank: int, file: int) -> bool:
    return 0 <= rank < BOARD_SIZE and 0 <= file < BOARD_SIZE


class Board:
    """8x8 grid of optional pieces indexed by (rank, file). Owns no rules."""

    def __init__(self):
        self.cells: list[list[Optional[Piece]]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard chess starting layout."""
        board = cls()
        for (rank, file), (char, color) in STARTING_POSITIONS.items():
            board.cells[rank][file] = Piece(PIECE_CHARS[char], Color(color))
        return board

    def piece_at(self, rank: int, file: int) -> Optional[Piece]:
        """Get piece at position, or None (also None when off the board)."""
        if _in_bounds(rank, file):
            return self.cells[rank][file]
        return None

    def set_piece(self, rank: int, file: int, piece: Optional[Piece]) -> None:
        if not _in_bounds(rank, file):
            raise ValueError(f"Square out of range: rank={rank}, file={file}")
        self.cells[rank][file] = piece

    def at(self, square: Square) -> Optional[Piece]:
        return self.piece_at(square.rank, square.file)

    def put(self, square: Square, piece: Optional[Piece]) -> None:
        self.set_piece(square.rank, square.file, piece)

    def squares(self, color: Optional[Color] = None) -> Iterator[tuple[Square, Piece]]:
        """Yield occupied squares in rank-major, file-minor order.

        If color is given, only that color's pieces are yielded.
        """
        for rank in range(BOARD_SIZE):
            for file in range(BOARD_SIZE):
                piece = self.cells[rank][file]
                if piece is None:
                    continue
                if color is not None and piece.color != color:
                    continue
                yield Square(file, rank), piece

    def copy(self) -> Board:
        new = Board.__new__(Board)
        new.cells = [row.copy() for row in self.cells]
        return new

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board({sum(1 for _ in self.squares())} pieces)"


def square_to_notation(square: Square) -> str:
    """Convert a Square to algebraic notation like 'e2'."""
    return FILE_LABELS[square.file] + RANK_LABELS[square.rank]


def parse_square(text: str) -> Square:
    """Convert algebraic notation like 'e2' to a Square.

    Raises:
        CoordinateError: If the text is not exactly a file letter a-h
            followed by a rank digit 1-8.
    """
    if len(text) != 2:
        raise CoordinateError("Square must be exactly 2 characters")
    file_char, rank_char = text[0], text[1]
    if file_char not in FILE_LABELS:
        raise CoordinateError("File must be between 'a' and 'h'")
    if rank_char not in RANK_LABELS:
        raise CoordinateError("Rank must be between '1' and '8'")
    return Square(FILE_LABELS.index(file_char), RANK_LABELS.index(rank_char))


def render_board(board: Board, side_to_move: Color | None = None,
                 move_count: int | None = None) -> str:
    """Render the board as a text string.

    Args:
        board: Board to draw. White pieces uppercase, Black lowercase.
        side_to_move: Optional color to announce above the diagram.
        move_count: Optional number of moves played so far.
    """
    lines = []

    if side_to_move is not None:
        player_name = "White" if side_to_move == Color.WHITE else "Black"
        header = f"{player_name} to move"
        if move_count is not None:
            header = f"Move {move_count // 2 + 1} - {header}"
        lines.append(header)
        lines.append("")

    lines.append("    a   b   c   d   e   f   g   h")
    lines.append("  +---+---+---+---+---+---+---+---+")

    for rank in range(BOARD_SIZE - 1, -1, -1):
        row_str = f"{rank + 1} |"
        for file in range(BOARD_SIZE):
            piece = board.cells[rank][file]
            if piece is not None:
                row_str += f" {piece.char} |"
            else:
                row_str += "   |"
        row_str += f" {rank + 1}"
        lines.append(row_str)
        lines.append("  +---+---+---+---+---+---+---+---+")

    lines.append("    a   b   c   d   e   f   g   h")

    return "\n".join(lines)
