"""
Game configuration for console TicTacToe.
All the settings for the board, symbols and prompts.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the console game.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, stored flat in row-major order
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, indices 0-8

    # ==================== SYMBOLS ====================
    HUMAN_SYMBOL = "X"
    CPU_SYMBOL = "O"
    EMPTY_SYMBOL = " "

    # Printed between board rows
    ROW_SEPARATOR = "—+—+—"

    # ==================== TURN ORDER ====================
    # The human always opens a round
    HUMAN_FIRST = True

    # ==================== PROMPTS ====================
    MOVE_PROMPT = f"Choose a number from 0 to {CELL_COUNT - 1} (q to quit): "
    PLAY_AGAIN_PROMPT = "Play again? [y/n]: "
    QUIT_WORDS = ("q", "quit", "exit")
    YES_WORDS = ("y", "yes")

    # ==================== DEBUG SETTINGS ====================
    # Set with --debug on the command line
    DEBUG_MODE = False


def debug(message: str):
    """Print a debug line if debug mode is on."""
    if GameConfig.DEBUG_MODE:
        print(f"[debug] {message}")
