"""Move notation parser and emitter, plus a simple game record format.

Move format:
  e2-e4      Move the piece on e2 to e4 (captures are written the same way)

Game format (similar to PGN):
  [White "alice"]
  [Black "bob"]

  1. e2-e4 e7-e5
  2. g1-f3 b8-c6
  ...
"""

from __future__ import annotations

import re
from typing import Optional

from minichess.game.board import parse_square
from minichess.game.pieces import Move

_MOVE_RE = re.compile(r"^([a-h][1-8])[- ]([a-h][1-8])$")
_HEADER_RE = re.compile(r'(\w+)\s+"([^"]*)"')


def move_to_notation(move: Move) -> str:
    """Convert a move to 'e2-e4' form."""
    return move.notation


def notation_to_move(text: str) -> Move:
    """Parse 'e2-e4' (or 'e2 e4') into a Move.

    Raises:
        ValueError: If the notation is invalid.
    """
    m = _MOVE_RE.match(text.strip())
    if not m:
        raise ValueError(f"Invalid move notation: {text!r}")
    return Move(parse_square(m.group(1)), parse_square(m.group(2)))


def game_to_text(moves: list[Move], headers: Optional[dict[str, str]] = None) -> str:
    """Convert a move list to a numbered game record.

    Args:
        moves: Moves in the order they were played, White first.
        headers: Optional dict of header key-value pairs.
    """
    lines = []

    if headers:
        for key, value in headers.items():
            lines.append(f'[{key} "{value}"]')
        lines.append("")

    # Format as numbered move pairs
    for i in range(0, len(moves), 2):
        pair = " ".join(move_to_notation(m) for m in moves[i:i + 2])
        lines.append(f"{i // 2 + 1}. {pair}")

    return "\n".join(lines)


def text_to_game(text: str) -> tuple[dict[str, str], list[Move]]:
    """Parse a game record.

    Returns:
        (headers, moves)

    Raises:
        ValueError: If a move token cannot be parsed.
    """
    headers: dict[str, str] = {}
    moves: list[Move] = []

    for line in text.strip().split("\n"):
        line = line.strip()
        if not line:
            continue

        # Header
        if line.startswith("[") and line.endswith("]"):
            m = _HEADER_RE.match(line[1:-1])
            if m:
                headers[m.group(1)] = m.group(2)
            continue

        # Strip move number prefix: "1. e2-e4 e7-e5"
        line = re.sub(r"^\d+\.\s*", "", line)
        for token in line.split():
            moves.append(notation_to_move(token))

    return headers, moves
