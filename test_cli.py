"""
Tests for the console driver and rendering.
Run with: pytest
"""

import builtins

from logic.config import GameConfig
from logic.game_state import Cell, Outcome
from logic.ai_player import ScriptedMoveSelector
from logic.engine import GameEngine

from main import Score, TicTacToeGame, main
from ui import ConsoleUI, render_board


def make_game(inputs, cpu_moves):
    """Build a game fed by scripted input, collecting everything printed."""
    lines = []
    replies = iter(inputs)
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return next(replies)

    game = TicTacToeGame(
        engine=GameEngine(selector=ScriptedMoveSelector(cpu_moves)),
        ui=ConsoleUI(output=lines.append),
        input_func=fake_input,
    )
    return game, lines, prompts


# ==================== RENDERING ====================

def test_render_empty_board_shows_indices():
    assert render_board([Cell.EMPTY] * 9) == "0|1|2\n—+—+—\n3|4|5\n—+—+—\n6|7|8"


def test_render_board_with_marks():
    board = [Cell.HUMAN, Cell.EMPTY, Cell.CPU] + [Cell.EMPTY] * 6
    assert render_board(board).splitlines()[0] == "X|1|O"


# ==================== SCORE ====================

def test_score_record():
    score = Score()
    for outcome in (Outcome.HUMAN_WINS, Outcome.TIE, Outcome.CPU_WINS,
                    Outcome.TIE, Outcome.IN_PROGRESS):
        score.record(outcome)
    assert (score.human, score.cpu, score.ties) == (1, 1, 2)


# ==================== DRIVER ====================

def test_human_win_after_bad_input_is_reprompted():
    game, lines, prompts = make_game(
        ["abc", "9", "0", "0", "1", "2", "n"],
        cpu_moves=[3, 4],
    )

    score = game.start()

    assert (score.human, score.cpu, score.ties) == (1, 0, 0)
    assert prompts.count(GameConfig.MOVE_PROMPT) == 6
    assert prompts[-1] == GameConfig.PLAY_AGAIN_PROMPT

    text = "\n".join(lines)
    assert "not a number" in text
    assert "Invalid index 9" in text
    assert "Cell 0 is already occupied" in text
    assert "CPU picks 3" in text
    assert "** You win! ** (line 0-1-2)" in text
    assert "You: 1  CPU: 0  Ties: 0" in text


def test_cpu_win():
    game, lines, _ = make_game(["0", "1", "8", "n"], cpu_moves=[3, 4, 5])

    score = game.start()

    assert (score.human, score.cpu, score.ties) == (0, 1, 0)
    assert "** CPU wins! ** (line 3-4-5)" in lines


def test_tie_ends_on_human_fifth_move():
    game, lines, _ = make_game(["0", "1", "5", "6", "8", "n"], cpu_moves=[2, 3, 4, 7])

    score = game.start()

    assert (score.human, score.cpu, score.ties) == (0, 0, 1)
    assert "** Tie! **" in lines
    assert game.engine.evaluate() == Outcome.TIE


def test_play_again_keeps_score_and_resets_board():
    game, lines, _ = make_game(
        ["0", "1", "2", "y", "3", "4", "5", "n"],
        cpu_moves=[3, 4, 0, 1],
    )

    score = game.start()

    assert score.human == 2
    assert "You: 2  CPU: 0  Ties: 0" in lines
    # Both rounds started from an empty board
    assert lines.count("0|1|2\n—+—+—\n3|4|5\n—+—+—\n6|7|8") == 2


def test_quit_mid_round():
    game, lines, _ = make_game(["4", "q"], cpu_moves=[0])

    score = game.start()

    assert (score.human, score.cpu, score.ties) == (0, 0, 0)
    assert lines.count("You: 0  CPU: 0  Ties: 0") == 2


def test_turns_and_running_score_shown_with_board():
    game, lines, _ = make_game(["0", "1", "2", "y", "8", "q"], cpu_moves=[3, 4, 5])

    game.start()

    assert "** Your turn **" in lines
    assert "** CPU turn **" in lines
    assert "CPU picks 4 (row 1, col 1)" in lines
    # Once after the first round, then at both prompts of the second
    assert lines.count("You: 1  CPU: 0  Ties: 0") == 3


def test_default_input_is_looked_up_when_the_game_is_built(monkeypatch):
    replies = iter(["q"])
    monkeypatch.setattr(builtins, "input", lambda prompt: next(replies))

    game = TicTacToeGame(ui=ConsoleUI(output=lambda line: None))

    assert game.start() == Score()


def test_main_handles_end_of_input(monkeypatch, capsys):
    def no_input(prompt):
        raise EOFError

    monkeypatch.setattr(builtins, "input", no_input)

    assert main(["--seed", "3"]) == 0

    out = capsys.readouterr().out
    assert "interrupted" in out
    assert "Goodbye!" in out


def test_main_debug_flag(monkeypatch, capsys):
    replies = iter(["4", "q"])
    monkeypatch.setattr(builtins, "input", lambda prompt: next(replies))
    monkeypatch.setattr(GameConfig, "DEBUG_MODE", False)

    assert main(["--debug", "--seed", "0"]) == 0

    out = capsys.readouterr().out
    assert "[debug] human -> 4" in out
    assert "[debug] cpu candidates" in out
