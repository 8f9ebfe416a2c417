"""
Console UI for TicTacToe.

Shows:
- The board, with cell numbers in the empty cells
- Whose turn it is and what the CPU picked
- Round result and running score
"""

from typing import Callable, Optional, Sequence, Tuple

from logic.config import GameConfig
from logic.game_state import Cell, Move, Outcome, Player


def render_board(board: Sequence[Cell]) -> str:
    """
    Render the board as text.

    Empty cells show their index so the user knows what to type:

        X|1|2
        —+—+—
        3|O|5
        —+—+—
        6|7|8
    """
    size = GameConfig.BOARD_SIZE
    rows = []
    for row in range(size):
        cells = []
        for col in range(size):
            index = row * size + col
            cell = board[index]
            cells.append(str(index) if cell == Cell.EMPTY else cell.value)
        rows.append("|".join(cells))
    return f"\n{GameConfig.ROW_SEPARATOR}\n".join(rows)


class ConsoleUI:
    """
    All the text the game prints goes through here.
    """

    RESULT_MESSAGES = {
        Outcome.HUMAN_WINS: "** You win! **",
        Outcome.CPU_WINS: "** CPU wins! **",
        Outcome.TIE: "** Tie! **",
    }

    TURN_MESSAGES = {
        Player.HUMAN: "** Your turn **",
        Player.CPU: "** CPU turn **",
    }

    def __init__(self, output: Callable[[str], None] = print):
        self.output = output

    def show_banner(self):
        self.output("=" * 40)
        self.output("   TicTacToe - You (X) vs CPU (O)")
        self.output("=" * 40)

    def show_board(self, board: Sequence[Cell]):
        self.output("")
        self.output(render_board(board))
        self.output("")

    def show_error(self, message: str):
        self.output(message)

    def show_turn(self, player: Player):
        self.output(self.TURN_MESSAGES[player])

    def show_cpu_move(self, move: Move):
        self.output(f"CPU picks {move.index} (row {move.row}, col {move.col})")

    def show_result(self, outcome: Outcome, line: Optional[Tuple[int, int, int]] = None):
        """Print how the round ended."""
        message = self.RESULT_MESSAGES.get(outcome)
        if message is None:
            return
        if line is not None:
            message += f" (line {'-'.join(str(i) for i in line)})"
        self.output(message)

    def show_score(self, human: int, cpu: int, ties: int):
        self.output(f"You: {human}  CPU: {cpu}  Ties: {ties}")

    def show_goodbye(self):
        self.output("Goodbye!")
