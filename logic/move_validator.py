"""
Move validator for TicTacToe.
Validates boards and moves before they are used.
"""

from typing import TYPE_CHECKING, Optional, List, Sequence
from dataclasses import dataclass

from .config import GameConfig
from .board import Mark, Cell, empty_cells
from .win_checker import evaluate

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe boards and moves.

    Rules:
    1. A board has exactly 9 cells, each empty, X or O
    2. Can only place on empty cells
    3. Game must not be over
    """

    def validate_board(self, board: Sequence[Cell]) -> ValidationResult:
        """
        Check that a board is well formed.

        Turn alternation is not checked; the AI copes with any
        well formed board.
        """
        if len(board) != GameConfig.NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Board must have {GameConfig.NUM_CELLS} cells, got {len(board)}"
            )

        for index, cell in enumerate(board):
            if cell is not None and not isinstance(cell, Mark):
                return ValidationResult(
                    is_valid=False,
                    error_message=f"Cell {index} holds {cell!r}. Must be None, X or O."
                )

        return ValidationResult(is_valid=True)

    def validate_move(self, game_state: "GameState", index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to play (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not 0 <= index < GameConfig.NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{GameConfig.NUM_CELLS - 1}."
            )

        occupant = game_state.current_board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Sequence[Cell]) -> List[int]:
        """
        Get all valid moves on a board.

        Returns:
            Empty cell indices, or an empty list once the game is decided.
        """
        if evaluate(board).is_over:
            return []
        return empty_cells(board)
