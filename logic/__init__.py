"""
Logic module for TicTacToe.
Handles the board, game state, rules, and the AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .board import (
    Mark, Board, empty_board, empty_cells, place, board_from_string, board_to_string,
)
from .game_state import GameState, GameMode, Difficulty
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, GameOutcome, OutcomeStatus, evaluate
from .ai_player import AIPlayer, NO_MOVE, select_move
