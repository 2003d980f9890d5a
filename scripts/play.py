#!/usr/bin/env python3
"""Interactive CLI for playing MiniChess, two humans at one terminal.

Usage:
    python scripts/play.py

Enter moves as 'e2-e4' or 'e2 e4', 'm e2' to list moves from a square,
or 'q' to quit.
"""

import argparse
import logging
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from minichess.game.board import CoordinateError, parse_square, render_board
from minichess.game.notation import notation_to_move, game_to_text
from minichess.game.pieces import Color
from minichess.game.rules import generate_all_legal_moves
from minichess.game.state import GameState, IllegalMoveError


def display_state(state: GameState):
    """Print the current board state."""
    print(render_board(state.board, state.side_to_move, len(state.move_history)))
    if state.in_check(state.side_to_move):
        print("Check!")
    print()


def human_turn(state: GameState) -> bool:
    """Read and play one move. Returns False if the player quits."""
    player_name = "White" if state.side_to_move == Color.WHITE else "Black"
    print(f"{player_name}'s turn. Enter a move (e.g. e2-e4), 'm <square>' or 'q':")

    while True:
        inp = input("> ").strip()
        if inp.lower() == "q":
            return False

        if inp.lower().startswith("m "):
            try:
                square = parse_square(inp[2:].strip())
            except CoordinateError as e:
                print(e)
                continue
            dests = state.legal_moves_from(square)
            print("  " + (" ".join(str(sq) for sq in dests) or "(no legal moves)"))
            continue

        try:
            move = notation_to_move(inp)
        except ValueError:
            print("Invalid input. Enter a move like e2-e4.")
            continue

        try:
            state.make_move(move.from_sq, move.to_sq)
        except IllegalMoveError:
            print("That move is not legal in this position.")
            continue
        return True


def play_game():
    """Play a full game until a side has no moves or a player quits."""
    state = GameState.new()

    print("=" * 60)
    print("  MiniChess")
    print("=" * 60)

    while True:
        display_state(state)

        if not generate_all_legal_moves(state.board, state.side_to_move):
            print("No legal moves - game over!")
            break

        if not human_turn(state):
            print("Game aborted.")
            break

    if state.move_history:
        print()
        print(game_to_text(state.move_history))


def main():
    parser = argparse.ArgumentParser(description="Play MiniChess in the terminal")
    parser.add_argument("--verbose", action="store_true", help="Log every move")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    play_game()


if __name__ == "__main__":
    main()
