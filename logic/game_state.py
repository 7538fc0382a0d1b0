"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and the full move history.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .config import GameConfig
from .board import Mark, Board, empty_board, place, index_to_row_col
from .move_validator import MoveValidator
from .win_checker import GameOutcome, evaluate


class GameMode(Enum):
    """Who plays the O side."""
    TWO_PLAYER = "two-player"
    AI = "ai"


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Win, block, center, corner, random
    HARD = "hard"        # Full minimax with alpha-beta pruning


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - Every board position since the start (move history)
    - Which position is currently shown (you can jump back in time)
    - Game mode, AI difficulty and which mark the AI plays
    - Sort order of the history list

    X always moves first, so whose turn it is follows from the move number.
    """

    history: List[Board] = field(default_factory=lambda: [empty_board()])
    current_move: int = 0

    game_mode: GameMode = GameMode.TWO_PLAYER
    difficulty: Difficulty = Difficulty.MEDIUM
    ai_mark: Mark = Mark.O

    is_ascending: bool = True

    @property
    def x_is_next(self) -> bool:
        return self.current_move % 2 == 0

    @property
    def current_player(self) -> Mark:
        return Mark.X if self.x_is_next else Mark.O

    @property
    def current_board(self) -> Board:
        return self.history[self.current_move]

    @property
    def outcome(self) -> GameOutcome:
        return evaluate(self.current_board)

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.outcome.line

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_over

    @property
    def is_latest_move(self) -> bool:
        return self.current_move == len(self.history) - 1

    @property
    def is_ai_turn(self) -> bool:
        """True when the AI should move next on the board being shown."""
        return (
            self.game_mode == GameMode.AI
            and self.current_player == self.ai_mark
            and self.is_latest_move
            and not self.is_game_over
        )

    def make_move(self, index: int) -> bool:
        """
        Play the current player's mark at the given cell.

        If an earlier move is being shown, the moves after it are discarded.

        Args:
            index: Cell index (0-8).

        Returns:
            True if move was successful, False otherwise.
        """
        result = MoveValidator().validate_move(self, index)
        if not result.is_valid:
            print(result.error_message)
            return False

        next_board = place(self.current_board, index, self.current_player)
        self.history = self.history[:self.current_move + 1] + [next_board]
        self.current_move = len(self.history) - 1
        return True

    def make_ai_move(self, ai) -> int:
        """
        Let the AI play if it is its turn.

        Args:
            ai: An AIPlayer (anything with select_move(board) -> int).

        Returns:
            The cell the AI played, or -1 if it did not move.
        """
        if not self.is_ai_turn:
            return -1

        move = ai.select_move(self.current_board)
        if move == -1 or not self.make_move(move):
            return -1
        return move

    def jump_to(self, move: int):
        """Show the board as it was after `move` moves."""
        if not 0 <= move < len(self.history):
            print(f"No move #{move} in history!")
            return
        self.current_move = move

    def toggle_sort(self):
        self.is_ascending = not self.is_ascending

    def reset(self):
        """Start a new game, keeping mode, difficulty and sort order."""
        self.history = [empty_board()]
        self.current_move = 0

    def set_game_mode(self, mode: GameMode):
        self.game_mode = mode
        self.reset()

    def set_difficulty(self, difficulty: Difficulty):
        self.difficulty = difficulty
        self.reset()

    def get_move_location(self, move: int) -> Optional[Tuple[int, int]]:
        """
        Get the 1-based (row, col) of the cell played on a given move.

        Found by comparing the board with the one before it.

        Returns:
            (row, col), or None for the game start.
        """
        if move <= 0 or move >= len(self.history):
            return None

        previous = self.history[move - 1]
        for index, cell in enumerate(self.history[move]):
            if cell != previous[index]:
                row, col = index_to_row_col(index)
                return row + 1, col + 1
        return None

    def move_descriptions(self) -> List[Tuple[int, str, bool]]:
        """
        Describe every entry in the move history.

        Returns:
            List of (move, text, is_current), in the current sort order.
        """
        entries = []
        for move in range(len(self.history)):
            location = self.get_move_location(move)
            location_text = f" ({location[0]}, {location[1]})" if location else ""

            if move == self.current_move:
                suffix = "(game start)" if move == 0 else location_text.strip()
                text = f"You are at move #{move} {suffix}"
            elif move == 0:
                text = "Go to game start"
            else:
                text = f"Go to move #{move}{location_text}"

            entries.append((move, text, move == self.current_move))

        if not self.is_ascending:
            entries.reverse()
        return entries

    def status_text(self) -> str:
        """One line describing the game status."""
        outcome = self.outcome
        if outcome.is_win:
            return f"Winner: {outcome.winner.value}"
        if outcome.is_draw:
            return "Game ended in a draw!"
        if self.game_mode == GameMode.AI and self.current_player == self.ai_mark:
            return f"AI's turn ({self.ai_mark.value})"
        return f"Next player: {self.current_player.value}"

    def print_board(self):
        """Print the board to console, with cell numbers 1-9 on empty cells."""
        board = self.current_board
        line = self.winning_line or ()

        print("\n┌───┬───┬───┐")
        for row in range(GameConfig.BOARD_SIZE):
            row_str = "│"
            for col in range(GameConfig.BOARD_SIZE):
                index = row * GameConfig.BOARD_SIZE + col
                cell = board[index]
                if cell is None:
                    row_str += f" {index + 1} │"
                elif index in line:
                    row_str += f"[{cell.value}]│"
                else:
                    row_str += f" {cell.value} │"
            print(row_str)

            if row < GameConfig.BOARD_SIZE - 1:
                print("├───┼───┼───┤")

        print("└───┴───┴───┘")
        print(f"\n{self.status_text()}")
