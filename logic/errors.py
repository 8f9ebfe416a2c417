"""
Errors raised by the TicTacToe game logic.
"""


class TicTacToeError(Exception):
    """Base class for all game errors."""


class MoveError(TicTacToeError):
    """A move could not be applied to the board."""


class InvalidIndexError(MoveError):
    """The cell index is outside 0-8."""

    def __init__(self, index):
        self.index = index
        super().__init__(f"Invalid index {index!r}. Must be between 0 and 8.")


class CellOccupiedError(MoveError):
    """The cell already holds a mark."""

    def __init__(self, index: int, symbol: str):
        self.index = index
        self.symbol = symbol
        super().__init__(f"Cell {index} is already occupied by {symbol}!")


class RoundOverError(MoveError):
    """The round has already finished, no more moves are accepted."""

    def __init__(self, message: str = "The round is already over!"):
        super().__init__(message)


class InvalidInputError(TicTacToeError):
    """Raw text from the user is not a whole number."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"{raw!r} is not a number. Please enter a number from 0 to 8.")
