"""
Board primitives for TicTacToe.
Marks, the 9-cell board, and helpers that build new boards from old ones.
"""

from enum import Enum
from typing import Optional, List, Tuple, Sequence

from .config import GameConfig


class Mark(Enum):
    """The two marks a player can put in a cell."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


# A board is 9 cells in row-major order: None (empty), Mark.X or Mark.O
Cell = Optional[Mark]
Board = Tuple[Cell, ...]


def empty_board() -> Board:
    """Create a board with every cell empty."""
    return (None,) * GameConfig.NUM_CELLS


def empty_cells(board: Sequence[Cell]) -> List[int]:
    """
    Get all empty cells on the board.

    Returns:
        List of cell indices, ascending.
    """
    return [i for i, cell in enumerate(board) if cell is None]


def place(board: Sequence[Cell], index: int, mark: Mark) -> Board:
    """Return a new board with `mark` placed at `index`."""
    new_board = list(board)
    new_board[index] = mark
    return tuple(new_board)


def board_from_string(text: str) -> Board:
    """
    Parse a board from a 9 character string like "XX-OO----".

    Empty cells may be written as '-', '.' or a space.
    """
    if len(text) != GameConfig.NUM_CELLS:
        raise ValueError(f"Board string must have {GameConfig.NUM_CELLS} characters, got {len(text)}")

    cells = []
    for char in text.upper():
        if char in GameConfig.EMPTY_CHARS:
            cells.append(None)
        else:
            cells.append(Mark(char))
    return tuple(cells)


def board_to_string(board: Sequence[Cell]) -> str:
    """Inverse of board_from_string, using '-' for empty cells."""
    return "".join("-" if cell is None else cell.value for cell in board)


def index_to_row_col(index: int) -> Tuple[int, int]:
    """Convert a cell index to 0-based (row, col)."""
    return divmod(index, GameConfig.BOARD_SIZE)
