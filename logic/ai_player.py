"""
AI player for TicTacToe.
Chooses moves at three difficulty levels:

- EASY: a random empty cell
- MEDIUM: win, block, center, corner, then random
- HARD: minimax with alpha-beta pruning
"""

import random
from typing import Optional, List, Sequence

from .config import GameConfig
from .board import Mark, Cell, empty_cells, place
from .game_state import Difficulty
from .win_checker import WinChecker


# Returned when there is no empty cell left
NO_MOVE = -1


class AIPlayer:
    """
    An AI that plays TicTacToe.

    On HARD it plays optimally - it wins if possible, blocks the
    opponent if needed, and never loses (at worst, draw).
    """

    def __init__(
        self,
        mark: Mark = Mark.O,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[random.Random] = None,
        verbose: bool = GameConfig.AI_VERBOSE
    ):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: O)
            difficulty: How strong the AI plays.
            rng: Source of random choices. Pass a seeded random.Random
                 to make EASY/MEDIUM and the HARD opening repeatable.
            verbose: Print a summary after every move.
        """
        self.mark = mark
        self.difficulty = difficulty
        self.rng = rng if rng is not None else random.Random()
        self.verbose = verbose
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    @property
    def opponent(self) -> Mark:
        return self.mark.opposite()

    def select_move(self, board: Sequence[Cell]) -> int:
        """
        Choose the cell to play.

        Args:
            board: Current board (not modified).

        Returns:
            Cell index (0-8), or NO_MOVE if the board is full.
        """
        self.moves_evaluated = 0

        valid_moves = empty_cells(board)
        if not valid_moves:
            return NO_MOVE

        if self.difficulty == Difficulty.EASY:
            move = self._get_easy_move(valid_moves)
        elif self.difficulty == Difficulty.MEDIUM:
            move = self._get_medium_move(board, valid_moves)
        else:
            move = self._get_hard_move(board, valid_moves)

        if self.verbose:
            print(f"AI ({self.mark.value}, {self.difficulty.value}) plays cell {move}"
                  f" after evaluating {self.moves_evaluated} positions")

        return move

    def _get_easy_move(self, valid_moves: List[int]) -> int:
        """Get a random valid move (easy difficulty)."""
        return self.rng.choice(valid_moves)

    def _get_medium_move(self, board: Sequence[Cell], valid_moves: List[int]) -> int:
        """Get a rule-based move (medium difficulty)."""
        # Win if we can
        move = self._find_winning_cell(board, valid_moves, self.mark)
        if move is not None:
            return move

        # Block the opponent's win
        move = self._find_winning_cell(board, valid_moves, self.opponent)
        if move is not None:
            return move

        if GameConfig.CENTER in valid_moves:
            return GameConfig.CENTER

        corners = [c for c in GameConfig.CORNERS if c in valid_moves]
        if corners:
            return self.rng.choice(corners)

        return self._get_easy_move(valid_moves)

    def _find_winning_cell(
        self,
        board: Sequence[Cell],
        valid_moves: List[int],
        mark: Mark
    ) -> Optional[int]:
        """First empty cell that would complete a line for `mark`."""
        for index in valid_moves:
            if self.win_checker.check_winner(place(board, index, mark)) == mark:
                return index
        return None

    def _get_hard_move(self, board: Sequence[Cell], valid_moves: List[int]) -> int:
        """Get the best move using minimax (hard difficulty)."""
        # Opening: the search would only confirm center or corner, and the
        # first two moves have the largest trees
        if len(valid_moves) >= GameConfig.OPENING_EMPTY_CELLS:
            if GameConfig.CENTER in valid_moves:
                return GameConfig.CENTER
            corners = [c for c in GameConfig.CORNERS if c in valid_moves]
            if corners:
                return self.rng.choice(corners)

        # Scratch copy, changed in place by the search and always restored
        scratch = list(board)

        best_score = float('-inf')
        best_move = valid_moves[0]

        for index in valid_moves:
            scratch[index] = self.mark
            score = self._minimax(scratch, 0, False, float('-inf'), float('inf'))
            scratch[index] = None

            # Strictly greater: ties keep the lowest index
            if score > best_score:
                best_score = score
                best_move = index

        return best_move

    def _minimax(
        self,
        board: List[Cell],
        depth: int,
        is_maximizing: bool,
        alpha: float,
        beta: float
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Scratch board, modified and restored in place.
            depth: Plies played since the move being scored.
            is_maximizing: True if it's the AI's turn.
            alpha: Best score the AI is assured of so far.
            beta: Best score the opponent is assured of so far.

        Returns:
            The score of the position, from the AI's point of view.
        """
        self.moves_evaluated += 1

        # Check terminal states
        winner = self.win_checker.check_winner(board)

        if winner == self.mark:
            return GameConfig.WIN_SCORE - depth  # Win (prefer faster wins)
        elif winner == self.opponent:
            return depth - GameConfig.WIN_SCORE  # Loss (prefer slower losses)

        valid_moves = empty_cells(board)
        if not valid_moves:
            return 0  # Draw

        if depth > GameConfig.MAX_SEARCH_DEPTH:
            return 0

        if is_maximizing:
            max_score = float('-inf')
            for index in valid_moves:
                board[index] = self.mark
                score = self._minimax(board, depth + 1, False, alpha, beta)
                board[index] = None
                max_score = max(max_score, score)
                alpha = max(alpha, max_score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for index in valid_moves:
                board[index] = self.opponent
                score = self._minimax(board, depth + 1, True, alpha, beta)
                board[index] = None
                min_score = min(min_score, score)
                beta = min(beta, min_score)
                if beta <= alpha:
                    break  # Prune
            return min_score


def select_move(
    board: Sequence[Cell],
    difficulty: Difficulty,
    computer_mark: Mark,
    rng: Optional[random.Random] = None
) -> int:
    """
    Choose the computer's move.

    Args:
        board: Current board.
        difficulty: EASY, MEDIUM or HARD.
        computer_mark: The mark the computer plays.
        rng: Optional random source, see AIPlayer.

    Returns:
        Cell index (0-8), or NO_MOVE if the board is full.
    """
    ai = AIPlayer(computer_mark, difficulty, rng=rng, verbose=False)
    return ai.select_move(board)
