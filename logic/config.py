"""
Game configuration for TicTacToe.
All the settings for the board, the AI opponent, and the user interfaces.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the AI or the look of the UI.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells indexed 0-8 row by row
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9

    CENTER = 4
    CORNERS = (0, 2, 6, 8)

    # Characters accepted for an empty cell when parsing a board string
    EMPTY_CHARS = "-. "

    # ==================== AI SETTINGS ====================
    # Score of a win found at depth 0 (faster wins score higher)
    WIN_SCORE = 10

    # Search never goes deeper than the number of cells
    MAX_SEARCH_DEPTH = 9

    # With this many empty cells or more, HARD skips the search
    # and plays center, or a corner if the center is taken
    OPENING_EMPTY_CELLS = 8

    # Print a summary line after every AI move
    AI_VERBOSE = True

    # ==================== GAME DEFAULTS ====================
    DEFAULT_AI_MARK = "O"           # X always moves first
    DEFAULT_DIFFICULTY = "medium"   # easy, medium, hard
    DEFAULT_MODE = "two-player"     # two-player, ai

    # ==================== UI SETTINGS ====================
    BOARD_FONT = ("Segoe UI", 36, "bold")

    BG_COLOR = "#1a1a2e"
    CELL_COLOR = "#16213e"
    WIN_COLOR = "#2f855a"
    X_COLOR = "#00d4ff"
    O_COLOR = "#ffd700"

    DIFFICULTY_COLORS = {
        "easy": "#00ff88",
        "medium": "#ffaa00",
        "hard": "#ff4757",
    }
