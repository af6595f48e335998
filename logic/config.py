"""
Game configuration for terminal TicTacToe.
All the settings for the board, pacing and logging.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Command line flags override these per run.
    """

    # ==================== BOARD SETTINGS ====================
    # Classic TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # ==================== PACING ====================
    # Pause between turns so the human can follow the game (seconds)
    TURN_DELAY_SECONDS = 1.5

    # Shorter pause before showing a result
    RESULT_DELAY_SECONDS = 1.0

    # ==================== LOGGING ====================
    # loguru level names
    LOG_LEVEL = "WARNING"
    DEBUG_LOG_LEVEL = "DEBUG"
