"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class MoveRequest(BaseModel):
    """Play a move given as two squares, e.g. {"from": "e2", "to": "e4"}."""
    model_config = ConfigDict(populate_by_name=True)

    from_square: str = Field(..., alias="from", description="Origin square, e.g. 'e2'")
    to_square: str = Field(..., alias="to", description="Destination square, e.g. 'e4'")


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class PieceInfo(BaseModel):
    type: str
    color: str


class BoardResponse(BaseModel):
    """Board snapshot plus check status."""
    side_to_move: str
    in_check: bool
    white_in_check: bool
    black_in_check: bool
    # cells[rank][file], rank 0 is White's back rank
    cells: list[list[Optional[PieceInfo]]]


class CreateSessionResponse(BaseModel):
    """Response from session creation."""
    session_id: str
    board: BoardResponse


class LegalMovesResponse(BaseModel):
    """Legal destinations from one square."""
    model_config = ConfigDict(populate_by_name=True)

    from_square: str = Field(..., alias="from")
    moves: list[str]


class RenderResponse(BaseModel):
    """Text diagram of the board."""
    diagram: str
