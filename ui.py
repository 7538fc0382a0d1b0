"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (winning line highlighted)
- Game status
- Game mode and difficulty selection
- Move history with jump-to-move buttons and a sort toggle
"""

import random
import threading
import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic.config import GameConfig
from logic.board import Mark
from logic.game_state import GameState, GameMode, Difficulty
from logic.ai_player import AIPlayer, NO_MOVE


def new_ai(game_state: GameState, rng: Optional[random.Random] = None, verbose: bool = GameConfig.AI_VERBOSE) -> AIPlayer:
    """
    Build the AI for one game from the current settings.

    Every game gets its own player and its own random stream, so a search
    still running for an abandoned game shares nothing with the new one.
    A seeded rng only hands out sub-seeds, keeping whole sessions repeatable.
    """
    game_rng = random.Random(rng.getrandbits(64)) if rng is not None else None
    return AIPlayer(game_state.ai_mark, game_state.difficulty, rng=game_rng, verbose=verbose)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The AI thinks on a background thread and hands its move back to the
    Tk thread with root.after(). A move computed for a game that was reset
    in the meantime is dropped.
    """

    def __init__(
        self,
        game_mode: GameMode = GameMode.TWO_PLAYER,
        difficulty: Difficulty = Difficulty.MEDIUM,
        ai_mark: Mark = Mark.O,
        rng: Optional[random.Random] = None,
        verbose: bool = GameConfig.AI_VERBOSE
    ):
        """Initialize the UI."""
        self.game_state = GameState(
            game_mode=game_mode,
            difficulty=difficulty,
            ai_mark=ai_mark
        )
        self._rng = rng
        self._verbose = verbose
        self.ai = new_ai(self.game_state, rng, verbose)

        # Bumped on every reset so late AI answers can be ignored
        self._game_id = 0
        self._ai_thinking = False

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg=GameConfig.BG_COLOR)
        self.root.minsize(720, 480)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BG_COLOR)
        style.configure('TLabel', background=GameConfig.BG_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('TRadiobutton', background=GameConfig.BG_COLOR, foreground='white')
        style.configure('TCheckbutton', background=GameConfig.BG_COLOR, foreground='white')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Left panel - settings and board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        self._create_settings(left_frame)

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=10)

        board_frame = ttk.Frame(left_frame)
        board_frame.pack(pady=5)

        self.board_cells = []
        for index in range(GameConfig.NUM_CELLS):
            row, col = divmod(index, GameConfig.BOARD_SIZE)
            cell = tk.Button(
                board_frame,
                text="",
                font=GameConfig.BOARD_FONT,
                width=3,
                height=1,
                bg=GameConfig.CELL_COLOR,
                activebackground=GameConfig.CELL_COLOR,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        tk.Button(
            left_frame,
            text="🔄 Reset Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=16,
            command=self._reset_game
        ).pack(pady=15)

        # Right panel - move history
        right_frame = ttk.Frame(main_frame, width=300)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        header = ttk.Frame(right_frame)
        header.pack(fill=tk.X)
        ttk.Label(header, text="📜 Game History", style='Title.TLabel').pack(side=tk.LEFT)

        self.sort_var = tk.BooleanVar(value=self.game_state.is_ascending)
        self.sort_check = ttk.Checkbutton(
            header,
            text="Ascending",
            variable=self.sort_var,
            command=self._toggle_sort
        )
        self.sort_check.pack(side=tk.RIGHT)

        self.history_frame = ttk.Frame(right_frame)
        self.history_frame.pack(fill=tk.BOTH, expand=True, pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _create_settings(self, parent):
        """Game mode radio buttons and difficulty buttons."""
        ttk.Label(parent, text="🎮 Game Mode", style='Title.TLabel').pack()

        mode_frame = ttk.Frame(parent)
        mode_frame.pack(pady=5)

        self.mode_var = tk.StringVar(value=self.game_state.game_mode.value)
        for text, mode in (("Two Players", GameMode.TWO_PLAYER), ("vs AI", GameMode.AI)):
            ttk.Radiobutton(
                mode_frame,
                text=text,
                value=mode.value,
                variable=self.mode_var,
                command=self._set_game_mode
            ).pack(side=tk.LEFT, padx=10)

        self.diff_frame = ttk.Frame(parent)
        self.diff_frame.pack(pady=5)

        self.diff_buttons = {}
        for difficulty in Difficulty:
            btn = tk.Button(
                self.diff_frame,
                text=difficulty.value.capitalize(),
                font=('Segoe UI', 10, 'bold'),
                width=8,
                activebackground=GameConfig.DIFFICULTY_COLORS[difficulty.value],
                command=lambda d=difficulty: self._set_difficulty(d)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.diff_buttons[difficulty] = btn

    def _set_game_mode(self):
        """Switch between two players and playing the AI."""
        mode = GameMode(self.mode_var.get())
        print(f"Game mode set to: {mode.value}")
        self.game_state.set_game_mode(mode)
        self._new_game()

    def _set_difficulty(self, difficulty: Difficulty):
        """Set the AI difficulty level."""
        print(f"Difficulty set to: {difficulty.value}")
        self.game_state.set_difficulty(difficulty)
        self._new_game()

    def _toggle_sort(self):
        self.game_state.toggle_sort()
        self._refresh()

    def _on_cell_click(self, index: int):
        """A human clicked a cell."""
        if self._ai_thinking or self.game_state.is_ai_turn:
            return

        if self.game_state.make_move(index):
            self._refresh()
            self._maybe_start_ai()

    def _jump_to(self, move: int):
        self.game_state.jump_to(move)
        self._refresh()
        self._maybe_start_ai()

    def _maybe_start_ai(self):
        """Start the AI on a background thread if it is its turn."""
        if self._ai_thinking or not self.game_state.is_ai_turn:
            return

        self._ai_thinking = True
        self._refresh()

        board = self.game_state.current_board
        game_id = self._game_id
        threading.Thread(target=self._ai_move, args=(self.ai, board, game_id), daemon=True).start()

    def _ai_move(self, ai: AIPlayer, board, game_id: int):
        """Compute the AI's move (runs in background thread)."""
        move = ai.select_move(board)
        self.root.after(0, lambda: self._apply_ai_move(move, board, game_id))

    def _apply_ai_move(self, move: int, board, game_id: int):
        """Apply the AI's move (runs on UI thread)."""
        # The game was reset while thinking, the new game owns the flag
        if game_id != self._game_id:
            return

        self._ai_thinking = False

        # A history jump changed the board while thinking
        if board != self.game_state.current_board:
            self._refresh()
            self._maybe_start_ai()
            return

        if move != NO_MOVE and self.game_state.is_ai_turn:
            self.game_state.make_move(move)
        self._refresh()

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.game_state.reset()
        self._new_game()

    def _new_game(self):
        self._game_id += 1
        self._ai_thinking = False
        self.ai = new_ai(self.game_state, self._rng, self._verbose)
        self._refresh()
        self._maybe_start_ai()

    def _refresh(self):
        """Redraw everything from the game state."""
        self._update_board_display()
        self._update_settings_display()
        self._update_history_display()

        status = self.game_state.status_text()
        if self._ai_thinking:
            status = f"AI is thinking ({self.game_state.ai_mark.value})..."
        self.status_label.configure(text=status)

    def _update_board_display(self):
        """Update the board grid display."""
        board = self.game_state.current_board
        line = self.game_state.winning_line or ()
        locked = self._ai_thinking or self.game_state.is_ai_turn

        for index, cell in enumerate(board):
            button = self.board_cells[index]
            bg = GameConfig.WIN_COLOR if index in line else GameConfig.CELL_COLOR

            if cell is None:
                button.configure(text="", bg=bg, state='disabled' if locked else 'normal')
            else:
                fg = GameConfig.X_COLOR if cell == Mark.X else GameConfig.O_COLOR
                button.configure(text=cell.value, fg=fg, disabledforeground=fg, bg=bg, state='disabled')

    def _update_settings_display(self):
        """Highlight the selected difficulty, disabled in two-player mode."""
        state = 'normal' if self.game_state.game_mode == GameMode.AI else 'disabled'

        for difficulty, btn in self.diff_buttons.items():
            btn.configure(state=state)
            if difficulty == self.game_state.difficulty:
                btn.configure(bg=GameConfig.DIFFICULTY_COLORS[difficulty.value], fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _update_history_display(self):
        """Rebuild the move history list."""
        for child in self.history_frame.winfo_children():
            child.destroy()

        self.sort_check.configure(text="Ascending" if self.game_state.is_ascending else "Descending")

        for move, text, is_current in self.game_state.move_descriptions():
            if is_current:
                ttk.Label(self.history_frame, text=text, style='Status.TLabel').pack(anchor=tk.W, pady=1)
            else:
                tk.Button(
                    self.history_frame,
                    text=text,
                    font=('Segoe UI', 10),
                    bg='#2d3748',
                    fg='white',
                    anchor=tk.W,
                    command=lambda m=move: self._jump_to(m)
                ).pack(fill=tk.X, pady=1)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self._maybe_start_ai()
        self.root.mainloop()


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
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
    return parser


def main():
    """Main entry point."""
    args = build_parser().parse_args()

    print("\n" + "="*40)
    print("   TicTacToe UI")
    print("="*40)
    print(f"   Mode: {args.mode}")
    print("="*40 + "\n")

    ui = TicTacToeUI(
        game_mode=GameMode(args.mode),
        difficulty=Difficulty(args.difficulty),
        ai_mark=Mark(args.ai_mark),
        rng=random.Random(args.seed) if args.seed is not None else None,
        verbose=not args.quiet
    )
    ui.run()


if __name__ == "__main__":
    main()
