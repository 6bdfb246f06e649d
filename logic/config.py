"""
Game configuration for TicTacToe.
Fixed board constants and debug switches.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The board is always 3x3; only the debug switches are meant to change.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Cells are indexed 0-8 in row-major order
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9

    # X always moves first
    FIRST_PLAYER = "X"

    # ==================== DEBUG SETTINGS ====================
    # Print rejected moves and history jumps from the game core
    DEBUG_MODE = False
