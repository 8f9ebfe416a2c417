"""
Logic module for console TicTacToe.
Handles game state, rules, and the random CPU opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .errors import (
    TicTacToeError,
    MoveError,
    InvalidIndexError,
    CellOccupiedError,
    RoundOverError,
    InvalidInputError,
)
from .game_state import Cell, GameState, Move, Outcome, Player
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import RandomMoveSelector, ScriptedMoveSelector
from .engine import GameEngine
