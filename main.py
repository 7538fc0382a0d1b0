"""
Main entry point for TicTacToe.

This script ties together:
- Logic (game state, move validation, win checking, AI)
- The Tkinter UI (default) or a console game (--no-ui)

Run this script to play TicTacToe against a friend or the computer!
"""

import random
from typing import Callable, Optional

from logic.config import GameConfig
from logic.board import Mark
from logic.game_state import GameState, GameMode, Difficulty
from logic.ai_player import AIPlayer, NO_MOVE


HELP_TEXT = """Commands:
  1-9      play in that cell (numbered row by row)
  h        show move history
  j N      jump to move N
  s        toggle history sort order
  r        reset the game
  q        quit"""


class TicTacToeConsole:
    """
    Console version of the game.

    Game flow:
    1. X (always a human) picks a cell
    2. O picks a cell - a second human, or the AI in AI mode
    3. Repeat until someone wins or it's a draw
    Jumping back in the history and playing on discards the later moves.
    """

    def __init__(
        self,
        game_mode: GameMode = GameMode.AI,
        difficulty: Difficulty = Difficulty.HARD,
        ai_mark: Mark = Mark.O,
        rng: Optional[random.Random] = None,
        verbose: bool = GameConfig.AI_VERBOSE,
        input_func: Callable[[str], str] = input
    ):
        """
        Initialize the console game.

        Args:
            game_mode: Two players, or against the AI.
            difficulty: AI difficulty.
            ai_mark: Which mark the AI plays.
            rng: Random source for the AI.
            verbose: Let the AI print what it is doing.
            input_func: Where commands come from (input() by default).
        """
        self.game_state = GameState(
            game_mode=game_mode,
            difficulty=difficulty,
            ai_mark=ai_mark
        )
        self.ai = AIPlayer(ai_mark, difficulty, rng=rng, verbose=verbose)
        self.input_func = input_func
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\nStarting TicTacToe game...")
        print(HELP_TEXT)

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        self.game_state.print_board()

        while self.is_running:
            if self.game_state.is_ai_turn:
                self._ai_move()
                continue

            if self.game_state.is_game_over and self.game_state.is_latest_move:
                self._show_game_result()
                if not self._ask_play_again():
                    break
                continue

            try:
                command = self.input_func(f"{self.game_state.current_player.value} > ").strip().lower()
            except EOFError:
                break
            self._handle_command(command)

    def _handle_command(self, command: str):
        """
        Run one console command.

        Args:
            command: What the player typed.
        """
        if command in ("q", "quit"):
            self.is_running = False
        elif command in ("h", "history"):
            self._show_history()
        elif command in ("s", "sort"):
            self.game_state.toggle_sort()
            self._show_history()
        elif command in ("r", "reset"):
            self._reset_game()
        elif command.startswith("j"):
            arg = command[1:].strip()
            if not arg.isdigit():
                print("Usage: j N")
                return
            self.game_state.jump_to(int(arg))
            self.game_state.print_board()
        elif command.isdigit() and 1 <= int(command) <= GameConfig.NUM_CELLS:
            self._human_move(int(command) - 1)
        else:
            print(f"Unknown command: {command!r}")
            print(HELP_TEXT)

    def _human_move(self, index: int):
        """Play a human move at a 0-based cell index."""
        player = self.game_state.current_player
        if self.game_state.make_move(index):
            print(f"\n>>> {player.value} plays cell {index + 1}")
            self.game_state.print_board()

    def _ai_move(self):
        """Let the AI make its move."""
        print("\n>>> AI is thinking...")
        move = self.game_state.make_ai_move(self.ai)

        if move == NO_MOVE:
            print("ERROR: AI could not find a move!")
            self.is_running = False
            return

        print(f">>> AI plays cell {move + 1}")
        self.game_state.print_board()

    def _show_history(self):
        """Print the move history list."""
        print("\nGame History" + (" (ascending)" if self.game_state.is_ascending else " (descending)"))
        for _, text, is_current in self.game_state.move_descriptions():
            print(("  > " if is_current else "    ") + text)

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*40)
        print("   GAME OVER!")
        print("="*40)

        outcome = self.game_state.outcome
        if outcome.is_win:
            if self.game_state.game_mode == GameMode.AI and outcome.winner == self.game_state.ai_mark:
                print("\nAI wins! Better luck next time!")
            else:
                print(f"\n{outcome.winner.value} wins! Congratulations!")
        else:
            print("\nIt's a draw! Good game!")

        print("="*40)

    def _ask_play_again(self) -> bool:
        try:
            answer = self.input_func("Play again? [y/N] ").strip().lower()
        except EOFError:
            return False

        if answer in ("y", "yes"):
            self._reset_game()
            return True
        # Anything else leaves the finished game on screen, history still browsable
        self.is_running = False
        return False

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.game_state.reset()
        self.game_state.print_board()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=GameConfig.DEFAULT_MODE,
        help="Play against a friend or the AI"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="AI difficulty"
    )
    parser.add_argument(
        "--ai-mark",
        choices=[m.value for m in Mark],
        default=GameConfig.DEFAULT_AI_MARK,
        help="Which mark the AI plays (X always moves first)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the AI's random choices"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print AI diagnostics"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args()

    game_mode = GameMode(args.mode)
    difficulty = Difficulty(args.difficulty)
    ai_mark = Mark(args.ai_mark)
    rng = random.Random(args.seed) if args.seed is not None else None
    verbose = not args.quiet

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(
            game_mode=game_mode,
            difficulty=difficulty,
            ai_mark=ai_mark,
            rng=rng,
            verbose=verbose
        )
        ui.run()
        return

    game = TicTacToeConsole(
        game_mode=game_mode,
        difficulty=difficulty,
        ai_mark=ai_mark,
        rng=rng,
        verbose=verbose
    )

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
