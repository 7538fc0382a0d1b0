"""
Tests for the UI helpers that don't need a display.
"""

import random

import pytest

pytest.importorskip("tkinter")

from logic.board import Mark, board_from_string
from logic.game_state import GameState, GameMode, Difficulty
from ui import TicTacToeUI, build_parser, new_ai


class FakeRoot:
    """Runs root.after callbacks straight away."""

    def after(self, delay, callback):
        callback()


class FakeUI:
    """Just enough of TicTacToeUI for the background move handoff."""

    def __init__(self):
        self.root = FakeRoot()
        self.applied = []

    def _apply_ai_move(self, move, board, game_id):
        self.applied.append((move, board, game_id))


def test_new_ai_follows_game_settings():
    game = GameState(game_mode=GameMode.AI, difficulty=Difficulty.EASY, ai_mark=Mark.X)

    ai = new_ai(game, verbose=False)

    assert ai.mark == Mark.X
    assert ai.difficulty == Difficulty.EASY
    assert not ai.verbose


def test_each_game_gets_its_own_ai():
    game = GameState(game_mode=GameMode.AI)
    base = random.Random(11)

    first = new_ai(game, base, verbose=False)
    game.set_difficulty(Difficulty.HARD)
    second = new_ai(game, base, verbose=False)

    assert first is not second
    assert first.rng is not second.rng
    assert base not in (first.rng, second.rng)
    # The old player keeps the settings of its own game
    assert first.difficulty == Difficulty.MEDIUM
    assert second.difficulty == Difficulty.HARD


def test_seeded_sessions_repeat():
    game = GameState(game_mode=GameMode.AI, difficulty=Difficulty.EASY)
    board = board_from_string("X--------")

    def session(seed):
        base = random.Random(seed)
        return [new_ai(game, base, verbose=False).select_move(board) for _ in range(5)]

    assert session(4) == session(4)


def test_background_move_uses_given_ai():
    ui = FakeUI()
    board = board_from_string("XX-OO----")
    ai = new_ai(GameState(game_mode=GameMode.AI, difficulty=Difficulty.HARD), verbose=False)

    TicTacToeUI._ai_move(ui, ai, board, 3)

    assert ui.applied == [(5, board, 3)]
    assert ai.moves_evaluated > 0


def test_parser_quiet_flag():
    parser = build_parser()

    assert parser.parse_args(["--quiet"]).quiet
    assert not parser.parse_args([]).quiet
    args = parser.parse_args(["--mode", "ai", "--difficulty", "hard", "--seed", "2"])
    assert (args.mode, args.difficulty, args.seed) == ("ai", "hard", 2)
