"""
Game configuration for Three Men's Morris.
All the fixed rules and the console/debug settings.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The rules values are part of the game; only the debug and
    display settings are meant to be changed.
    """

    # ==================== BOARD SETTINGS ====================
    # Three Men's Morris is played on a 3x3 grid
    BOARD_SIZE = 3

    # ==================== RULES SETTINGS ====================
    # Each player places this many pieces, then starts moving them
    PIECES_PER_PLAYER = 3

    # X always starts (also after a reset)
    FIRST_PLAYER = "X"

    # Set on the session when a line is completed
    WIN_MESSAGE = "Player {symbol} wins!"

    # ==================== DISPLAY SETTINGS ====================
    EMPTY_CELL_CHAR = "."
    SELECTED_MARKER = "*"

    # ==================== DEBUG SETTINGS ====================
    # Print the reason whenever an input is ignored
    DEBUG_MODE = False
