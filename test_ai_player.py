"""
Tests for the AI player.
Checks each difficulty's rules and that HARD never loses.
"""

import random

import pytest

from logic.ai_player import AIPlayer, NO_MOVE, select_move
from logic.board import Mark, board_from_string, empty_board, empty_cells, place
from logic.game_state import Difficulty
from logic.win_checker import evaluate


class FakeRandom:
    """Records what it was asked to choose from and picks the last option."""

    def __init__(self):
        self.choices = []

    def choice(self, seq):
        self.choices.append(list(seq))
        return seq[-1]


def _ai(difficulty, mark=Mark.O, rng=None):
    return AIPlayer(mark, difficulty, rng=rng or FakeRandom(), verbose=False)


# ==================== ALL DIFFICULTIES ====================

@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_full_board_returns_no_move(difficulty):
    board = board_from_string("XOXXOOOXX")

    assert select_move(board, difficulty, Mark.O) == NO_MOVE
    assert select_move(board, difficulty, Mark.X) == NO_MOVE


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_never_plays_occupied_cell(difficulty):
    rng = random.Random(7)
    for _ in range(30):
        board = empty_board()
        mark = Mark.X
        while not evaluate(board).is_over:
            move = select_move(board, difficulty, mark, rng=rng)
            assert move != NO_MOVE
            assert board[move] is None
            board = place(board, move, mark)
            mark = mark.opposite()


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_board_is_not_modified(difficulty):
    board = list(board_from_string("X---O--X-"))
    before = list(board)

    select_move(board, difficulty, Mark.O, rng=random.Random(1))

    assert board == before


# ==================== EASY ====================

def test_easy_picks_from_empty_cells():
    rng = FakeRandom()
    board = board_from_string("XO-XO----")

    move = _ai(Difficulty.EASY, rng=rng).select_move(board)

    assert rng.choices == [[2, 5, 6, 7, 8]]
    assert move == 8


def test_easy_covers_every_empty_cell():
    rng = random.Random(3)
    board = board_from_string("XO-XO----")
    seen = {select_move(board, Difficulty.EASY, Mark.X, rng=rng) for _ in range(200)}

    assert seen == {2, 5, 6, 7, 8}


# ==================== MEDIUM ====================

def test_medium_takes_win():
    # O O -
    # X X -
    # - - -
    board = board_from_string("OO-XX----")

    assert _ai(Difficulty.MEDIUM).select_move(board) == 2


def test_medium_blocks():
    # X - -
    # X - O
    # - - -
    board = board_from_string("X--X-O---")

    assert _ai(Difficulty.MEDIUM).select_move(board) == 6


def test_medium_win_beats_block():
    # X X -
    # O O -
    # - - -
    # X threatens cell 2 but O can finish its own row at cell 5
    board = board_from_string("XX-OO----")

    assert _ai(Difficulty.MEDIUM).select_move(board) == 5


def test_medium_takes_center():
    board = board_from_string("X--------")

    assert _ai(Difficulty.MEDIUM).select_move(board) == 4


def test_medium_takes_random_corner():
    rng = FakeRandom()
    board = board_from_string("----X----")

    # No win or block for anyone, center taken
    move = _ai(Difficulty.MEDIUM, rng=rng).select_move(board)

    assert rng.choices == [[0, 2, 6, 8]]
    assert move == 8


def test_medium_falls_back_to_random_cell():
    # X O X
    # - O -
    # O X O
    rng = FakeRandom()
    board = board_from_string("XOX-O-OXO")

    move = _ai(Difficulty.MEDIUM, rng=rng).select_move(board)

    assert rng.choices == [[3, 5]]
    assert move == 5


# ==================== HARD ====================

def test_hard_opening_takes_center():
    assert _ai(Difficulty.HARD, mark=Mark.X).select_move(empty_board()) == 4
    assert _ai(Difficulty.HARD).select_move(board_from_string("X--------")) == 4


def test_hard_takes_corner_when_center_taken():
    rng = FakeRandom()
    board = board_from_string("----X----")

    move = _ai(Difficulty.HARD, rng=rng).select_move(board)

    assert rng.choices == [[0, 2, 6, 8]]
    assert move in (0, 2, 6, 8)


def test_hard_corner_reply_with_real_random():
    board = board_from_string("----X----")
    for seed in range(10):
        assert select_move(board, Difficulty.HARD, Mark.O, rng=random.Random(seed)) in (0, 2, 6, 8)


def test_hard_takes_win():
    board = board_from_string("XX-OO----")

    assert _ai(Difficulty.HARD).select_move(board) == 5


def test_hard_blocks():
    # X - -
    # X - O
    # - - -
    # X to win at 6, O must block
    board = board_from_string("X--X-O---")

    assert _ai(Difficulty.HARD).select_move(board) == 6


def test_hard_prefers_faster_win():
    # O - -
    # X O X
    # X - -
    # O wins now at 8; other moves only win later or not at all
    board = board_from_string("O--XOXX--")

    assert _ai(Difficulty.HARD).select_move(board) == 8


def _full_tree_size(board, to_move):
    """Positions plain minimax would visit from here, without pruning."""
    if evaluate(board).is_over:
        return 1
    size = 1
    for index in empty_cells(board):
        size += _full_tree_size(place(board, index, to_move), to_move.opposite())
    return size


def test_hard_pruning_cuts_positions():
    board = board_from_string("X---O---X")
    ai = _ai(Difficulty.HARD)
    ai.select_move(board)

    unpruned = sum(_full_tree_size(place(board, index, Mark.O), Mark.X) for index in empty_cells(board))

    assert ai.moves_evaluated == 497
    assert ai.moves_evaluated < unpruned


def test_hard_depth_guard_stops_search():
    ai = _ai(Difficulty.HARD)

    score = ai._minimax(list(board_from_string("X--------")), 10, True, float('-inf'), float('inf'))

    assert score == 0
    # Only the guarded position itself, no children
    assert ai.moves_evaluated == 1


def test_hard_uses_edge_against_opposite_corners():
    # X - -
    # - O -
    # - - X
    # A corner reply loses to a fork; O must take an edge
    board = board_from_string("X---O---X")

    assert _ai(Difficulty.HARD).select_move(board) in (1, 3, 5, 7)


def test_hard_search_score_bounds():
    ai = _ai(Difficulty.HARD)

    # O just completed a line: score 10 at depth 0
    assert ai._minimax(list(board_from_string("OOOXX----")), 0, False, float('-inf'), float('inf')) == 10
    # X has won: score depth - 10
    assert ai._minimax(list(board_from_string("XXXOO----")), 2, True, float('-inf'), float('inf')) == -8
    # Full drawn board
    assert ai._minimax(list(board_from_string("XOXXOOOXX")), 0, True, float('-inf'), float('inf')) == 0


def _never_loses(board, ai, to_move):
    """Play every possible opponent reply against the AI. Returns games played."""
    outcome = evaluate(board)
    if outcome.is_over:
        assert outcome.winner != ai.opponent, f"AI lost on {board}"
        return 1

    if to_move == ai.mark:
        move = ai.select_move(board)
        assert board[move] is None
        return _never_loses(place(board, move, ai.mark), ai, ai.opponent)

    games = 0
    for index in empty_cells(board):
        games += _never_loses(place(board, index, to_move), ai, ai.mark)
    return games


@pytest.mark.parametrize("ai_mark", [Mark.X, Mark.O])
def test_hard_never_loses(ai_mark):
    ai = AIPlayer(ai_mark, Difficulty.HARD, rng=random.Random(0), verbose=False)

    games = _never_loses(empty_board(), ai, Mark.X)

    assert games > 0


def test_hard_self_play_is_draw():
    board = empty_board()
    mark = Mark.X
    rng = random.Random(42)
    while not evaluate(board).is_over:
        board = place(board, select_move(board, Difficulty.HARD, mark, rng=rng), mark)
        mark = mark.opposite()

    assert evaluate(board).is_draw


def test_hard_beats_random_player_or_draws():
    rng = random.Random(5)
    for _ in range(20):
        board = empty_board()
        mark = Mark.X
        while not evaluate(board).is_over:
            difficulty = Difficulty.EASY if mark == Mark.X else Difficulty.HARD
            board = place(board, select_move(board, difficulty, mark, rng=rng), mark)
            mark = mark.opposite()

        assert evaluate(board).winner != Mark.X


def test_verbose_prints_summary(capsys):
    ai = AIPlayer(Mark.O, Difficulty.HARD, verbose=True)
    ai.select_move(board_from_string("XX-OO----"))

    out = capsys.readouterr().out
    assert "plays cell 5" in out
