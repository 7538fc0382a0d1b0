"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Tuple, Sequence
from dataclasses import dataclass

from .board import Mark, Cell


Line = Tuple[int, int, int]


class OutcomeStatus(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameOutcome:
    """
    Result of evaluating a board.

    winner and line are only set when status is WIN.
    """
    status: OutcomeStatus
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @property
    def is_win(self) -> bool:
        return self.status == OutcomeStatus.WIN

    @property
    def is_draw(self) -> bool:
        return self.status == OutcomeStatus.DRAW

    @property
    def is_over(self) -> bool:
        return self.status != OutcomeStatus.IN_PROGRESS


IN_PROGRESS = GameOutcome(OutcomeStatus.IN_PROGRESS)
DRAW = GameOutcome(OutcomeStatus.DRAW)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, as cell indices.
    # The order matters: on a board with several complete lines
    # the first one listed here is reported.
    WINNING_LINES: Tuple[Line, ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def evaluate(self, board: Sequence[Cell]) -> GameOutcome:
        """
        Evaluate a board.

        Args:
            board: The 9 cells, row by row.

        Returns:
            WIN with the mark and line, DRAW if the board is full,
            IN_PROGRESS otherwise.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return GameOutcome(OutcomeStatus.WIN, winner, line)

        if all(cell is not None for cell in board):
            return DRAW

        return IN_PROGRESS

    def _check_line(self, board: Sequence[Cell], line: Line) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Returns:
            The winning Mark if all 3 cells hold it, None otherwise.
        """
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_winner(self, board: Sequence[Cell]) -> Optional[Mark]:
        """Get the winning Mark, or None if no winner yet."""
        return self.evaluate(board).winner

    def get_winning_line(self, board: Sequence[Cell]) -> Optional[Line]:
        """Get the winning line if there is one."""
        return self.evaluate(board).line

    def check_draw(self, board: Sequence[Cell]) -> bool:
        """True if the board is full and nobody has three in a row."""
        return self.evaluate(board).is_draw


_checker = WinChecker()


def evaluate(board: Sequence[Cell]) -> GameOutcome:
    """Evaluate a board. See WinChecker.evaluate."""
    return _checker.evaluate(board)
