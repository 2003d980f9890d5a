"""Tests for GameSession and SessionManager (pure Python, no HTTP)."""

import threading

import pytest

from minichess.api.session import GameSession
from minichess.api.session_manager import SessionLimitError, SessionManager
from minichess.game.board import Board, parse_square
from minichess.game import rules
from minichess.game.pieces import Color, Piece, PieceType
from minichess.game.state import IllegalMoveError

sq = parse_square


# ---------------------------------------------------------------------------
# GameSession
# ---------------------------------------------------------------------------

class TestGameSession:
    def test_initial(self):
        session = GameSession("s1")
        assert session.get_side_to_move() == Color.WHITE
        assert session.get_moves() == []
        assert session.get_board() == Board.initial()

    def test_play_and_log(self):
        session = GameSession("s1")
        session.make_move(sq("e2"), sq("e4"))
        session.make_move(sq("e7"), sq("e5"))
        assert session.get_side_to_move() == Color.WHITE
        assert session.get_moves() == ["e2-e4", "e7-e5"]
        assert session.get_board().at(sq("e4")) == Piece(PieceType.PAWN, Color.WHITE)

    def test_illegal_move(self):
        session = GameSession("s1")
        with pytest.raises(IllegalMoveError):
            session.make_move(sq("e2"), sq("e6"))
        assert session.get_side_to_move() == Color.WHITE
        assert session.get_moves() == []
        assert session.get_board() == Board.initial()

    def test_reset_replaces_state(self):
        session = GameSession("s1")
        session.make_move(sq("e2"), sq("e4"))
        old_board = session.get_board()
        session.reset()
        assert session.get_board() is not old_board
        assert session.get_board() == Board.initial()
        assert session.get_side_to_move() == Color.WHITE
        assert session.get_moves() == []
        # The previous board is not touched by the reset
        assert old_board.at(sq("e4")) is not None

    def test_check_position(self):
        session = GameSession("s1")
        session.make_move(sq("e2"), sq("e4"))
        session.make_move(sq("e7"), sq("e5"))
        session.setup_check_position()
        assert session.in_check(Color.WHITE)
        assert not session.in_check(Color.BLACK)
        assert len(session.legal_moves_from(sq("e1"))) > 0
        snapshot = session.board_snapshot()
        assert snapshot["in_check"] is True
        assert snapshot["white_in_check"] is True
        assert snapshot["black_in_check"] is False

    def test_place_piece_keeps_turn_and_log(self):
        session = GameSession("s1")
        session.place_piece(sq("e4"), Piece(PieceType.KNIGHT, Color.BLACK))
        assert session.get_side_to_move() == Color.WHITE
        assert session.get_moves() == []
        assert session.is_square_attacked(sq("d2"), Color.BLACK)

    def test_render(self):
        session = GameSession("s1")
        session.make_move(sq("e2"), sq("e4"))
        text = session.render()
        assert "Black to move" in text
        assert "4 |   |   |   |   | P |" in text

    def test_reader_waits_for_simulated_move(self, monkeypatch):
        session = GameSession("s1")
        session.make_move(sq("e2"), sq("e4"))
        expected = session.board_snapshot()

        mid_simulation = threading.Event()
        release = threading.Event()
        real_is_in_check = rules.is_in_check

        def paused_is_in_check(board, color):
            # Runs with the trial move still on the board
            if not mid_simulation.is_set():
                mid_simulation.set()
                release.wait(timeout=5)
            return real_is_in_check(board, color)

        monkeypatch.setattr(rules, "is_in_check", paused_is_in_check)

        generator = threading.Thread(
            target=session.legal_moves_from, args=(sq("g8"),))
        generator.start()
        assert mid_simulation.wait(timeout=5)

        seen = {}

        def read():
            seen["snapshot"] = session.board_snapshot()
            seen["attacked"] = session.is_square_attacked(sq("f6"), Color.BLACK)

        reader = threading.Thread(target=read)
        reader.start()
        reader.join(timeout=0.2)
        # The knight is lifted off g8 right now; the reader must not see that
        assert reader.is_alive()
        assert "snapshot" not in seen

        release.set()
        generator.join(timeout=5)
        reader.join(timeout=5)

        assert seen["snapshot"] == expected
        assert seen["attacked"] is True
        assert session.get_board().at(sq("g8")) == Piece(PieceType.KNIGHT, Color.BLACK)


# ---------------------------------------------------------------------------
# SessionManager
# ---------------------------------------------------------------------------

class TestSessionManager:
    def test_create_and_get(self):
        manager = SessionManager()
        session = manager.create_session()
        assert manager.get_session(session.session_id) is session
        assert manager.active_session_count == 1

    def test_sessions_are_independent(self):
        manager = SessionManager()
        a = manager.create_session()
        b = manager.create_session()
        assert a.session_id != b.session_id
        a.make_move(sq("e2"), sq("e4"))
        assert b.get_moves() == []
        assert b.get_side_to_move() == Color.WHITE

    def test_get_unknown(self):
        assert SessionManager().get_session("nope") is None

    def test_delete(self):
        manager = SessionManager()
        session = manager.create_session()
        assert manager.delete_session(session.session_id)
        assert manager.get_session(session.session_id) is None
        assert not manager.delete_session(session.session_id)

    def test_limit(self):
        manager = SessionManager(max_sessions=2)
        manager.create_session()
        manager.create_session()
        with pytest.raises(SessionLimitError):
            manager.create_session()
        assert manager.active_session_count == 2
