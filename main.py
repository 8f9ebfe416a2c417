"""
Main script for console TicTacToe.

This script ties together:
- Logic (game engine, move validation, random CPU)
- Console UI (board rendering, messages)
- The session score

Run this script to play TicTacToe against the CPU!
"""

import sys
from dataclasses import dataclass
from typing import Callable, List, Optional

from logic.config import GameConfig
from logic.game_state import Outcome, Player
from logic.move_validator import MoveValidator
from logic.ai_player import RandomMoveSelector
from logic.engine import GameEngine

from ui import ConsoleUI


@dataclass
class Score:
    """Running totals for the session."""
    human: int = 0
    cpu: int = 0
    ties: int = 0

    def record(self, outcome: Outcome):
        """Count a finished round."""
        if outcome == Outcome.HUMAN_WINS:
            self.human += 1
        elif outcome == Outcome.CPU_WINS:
            self.cpu += 1
        elif outcome == Outcome.TIE:
            self.ties += 1


class TicTacToeGame:
    """
    Console driver for the game.

    Game flow:
    1. Human (X) types a cell number
    2. Input is validated, bad input is re-prompted
    3. CPU (O) answers with a random empty cell
    4. Repeat until someone wins or it's a tie
    5. Score is updated and the human is asked to play again
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        ui: Optional[ConsoleUI] = None,
        input_func: Optional[Callable[[str], str]] = None
    ):
        self.engine = engine if engine is not None else GameEngine()
        self.ui = ui if ui is not None else ConsoleUI()
        self.input_func = input_func if input_func is not None else input
        self.validator = MoveValidator()
        self.score = Score()

    def start(self) -> Score:
        """Play rounds until the human stops. Returns the final score."""
        self.ui.show_banner()

        while True:
            outcome = self.play_round()
            if outcome is None:
                break

            self.score.record(outcome)
            self.ui.show_score(self.score.human, self.score.cpu, self.score.ties)

            if not self._ask_play_again():
                break

        return self.score

    def play_round(self) -> Optional[Outcome]:
        """
        Play one round from an empty board.

        Returns:
            The terminal Outcome, or None if the human quit mid-round.
        """
        self.engine.reset()

        while True:
            self.ui.show_board(self.engine.board)
            self.ui.show_score(self.score.human, self.score.cpu, self.score.ties)
            self.ui.show_turn(Player.HUMAN)

            index = self._ask_human_move()
            if index is None:
                return None

            self.engine.apply_move(index, Player.HUMAN)
            outcome = self.engine.evaluate()
            if outcome.is_terminal:
                return self._finish_round(outcome)

            self.ui.show_turn(Player.CPU)
            cpu_index = self.engine.pick_random_move()
            cpu_move = self.engine.apply_move(cpu_index, Player.CPU)
            self.ui.show_cpu_move(cpu_move)

            outcome = self.engine.evaluate()
            if outcome.is_terminal:
                return self._finish_round(outcome)

    def _finish_round(self, outcome: Outcome) -> Outcome:
        self.ui.show_board(self.engine.board)
        self.ui.show_result(outcome, self.engine.winning_line())
        return outcome

    def _ask_human_move(self) -> Optional[int]:
        """Prompt until the human gives a legal cell, or None to quit."""
        while True:
            raw = self.input_func(GameConfig.MOVE_PROMPT)
            if raw.strip().lower() in GameConfig.QUIT_WORDS:
                return None

            result = self.validator.validate_input(self.engine.state, raw)
            if result.is_valid:
                return result.index

            self.ui.show_error(result.error_message)

    def _ask_play_again(self) -> bool:
        answer = self.input_func(GameConfig.PLAY_AGAIN_PROMPT)
        return answer.strip().lower() in GameConfig.YES_WORDS


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against a random CPU")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the CPU's random moves (for repeatable games)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print engine debug messages"
    )

    args = parser.parse_args(argv)

    GameConfig.DEBUG_MODE = args.debug

    engine = GameEngine(selector=RandomMoveSelector(seed=args.seed))
    game = TicTacToeGame(engine=engine)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        game.ui.show_goodbye()

    return 0


if __name__ == "__main__":
    sys.exit(main())
