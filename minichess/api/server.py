"""FastAPI server for the MiniChess API."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query, Request, Response

from minichess.api.dependencies import get_session_manager
from minichess.api.models import (
    BoardResponse,
    CreateSessionResponse,
    LegalMovesResponse,
    MoveRequest,
    RenderResponse,
)
from minichess.api.session import GameSession
from minichess.api.session_manager import SessionLimitError
from minichess.game.board import CoordinateError, parse_square
from minichess.game.state import IllegalMoveError

app = FastAPI(
    title="MiniChess API",
    description="Session-based chess rule engine",
    version="0.1.0",
)


def _get_session(request: Request, session_id: str) -> GameSession:
    """Look up session or raise 404."""
    session = get_session_manager(request.app).get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")
    return session


def _bad_request(e: Exception) -> HTTPException:
    return HTTPException(status_code=400, detail={"error": str(e)})


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.post("/sessions", response_model=CreateSessionResponse, status_code=201)
def create_session(request: Request):
    """Start a new game in the initial position."""
    try:
        session = get_session_manager(request.app).create_session()
    except SessionLimitError as e:
        raise HTTPException(status_code=429, detail=str(e))

    return CreateSessionResponse(
        session_id=session.session_id,
        board=BoardResponse(**session.board_snapshot()),
    )


@app.get("/sessions/{session_id}/board", response_model=BoardResponse)
def get_board(session_id: str, request: Request):
    """Get the board, side to move and check status."""
    session = _get_session(request, session_id)
    return BoardResponse(**session.board_snapshot())


@app.get("/sessions/{session_id}/moves", response_model=LegalMovesResponse,
         response_model_by_alias=True)
def get_legal_moves(session_id: str, request: Request,
                    from_square: str = Query(..., alias="from")):
    """List legal destinations for the piece on a square."""
    session = _get_session(request, session_id)
    try:
        square = parse_square(from_square)
    except CoordinateError as e:
        raise _bad_request(e)

    moves = session.legal_moves_from(square)
    return LegalMovesResponse(from_square=from_square, moves=[str(sq) for sq in moves])


@app.post("/sessions/{session_id}/move", response_model=BoardResponse)
def make_move(session_id: str, body: MoveRequest, request: Request):
    """Play a move and return the new board."""
    session = _get_session(request, session_id)
    try:
        from_sq = parse_square(body.from_square)
        to_sq = parse_square(body.to_square)
        session.make_move(from_sq, to_sq)
    except (CoordinateError, IllegalMoveError) as e:
        raise _bad_request(e)

    return BoardResponse(**session.board_snapshot())


@app.get("/sessions/{session_id}/move-list", response_model=list[str])
def get_move_list(session_id: str, request: Request):
    """Moves played so far, e.g. ["e2-e4", "e7-e5"]."""
    session = _get_session(request, session_id)
    return session.get_moves()


@app.post("/sessions/{session_id}/reset", status_code=204)
def reset(session_id: str, request: Request):
    """Return the game to the initial position."""
    session = _get_session(request, session_id)
    session.reset()
    return Response(status_code=204)


@app.post("/sessions/{session_id}/test-check", response_model=BoardResponse)
def create_test_check_position(session_id: str, request: Request):
    """Drop a Black queen on e2 to put White in check."""
    session = _get_session(request, session_id)
    session.setup_check_position()
    return BoardResponse(**session.board_snapshot())


@app.get("/sessions/{session_id}/render", response_model=RenderResponse)
def render(session_id: str, request: Request):
    """Text diagram of the board."""
    session = _get_session(request, session_id)
    return RenderResponse(diagram=session.render())


@app.delete("/sessions/{session_id}")
def delete_session(session_id: str, request: Request):
    """Clean up a session."""
    if not get_session_manager(request.app).delete_session(session_id):
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")
    return {"deleted": True, "session_id": session_id}
