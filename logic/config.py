"""
Game configuration for TicTacToe.
All the tunable settings for the board, players, scoring, and the window.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to taste!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # ==================== PLAYER SETTINGS ====================
    # Default names when two humans play
    DEFAULT_X_NAME = "Player X"
    DEFAULT_O_NAME = "Player O"

    # Default names when playing against the computer
    HUMAN_NAME = "You"
    COMPUTER_NAME = "AI"

    # ==================== SCORING ====================
    # Terminal scores from the computer's point of view
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0

    # ==================== UI SETTINGS ====================
    # Small delay so the computer's move is visible (milliseconds)
    AI_MOVE_DELAY_MS = 500

    WINDOW_TITLE = "TicTacToe"
    BG_COLOR = '#1a1a2e'
    CELL_COLOR = '#16213e'
    WIN_CELL_COLOR = '#065f46'
    X_COLOR = '#2563eb'
    O_COLOR = '#dc2626'
    EMPTY_COLOR = '#374151'

    # ==================== DEBUG SETTINGS ====================
    # Print search statistics after every computer move
    DEBUG_MODE = False
