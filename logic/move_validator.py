"""
Move validator for console TicTacToe.
Turns what the user typed into a legal cell index.
"""

from typing import Optional, List
from dataclasses import dataclass

from .game_state import GameState
from .errors import TicTacToeError, MoveError, InvalidInputError


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    index: Optional[int] = None
    error: Optional[TicTacToeError] = None
    
    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class MoveValidator:
    """
    Validates TicTacToe moves before they reach the board.
    
    Rules:
    1. Input must be a whole number
    2. The number must be a cell index (0-8)
    3. Can only place on empty cells
    
    Nothing here changes the game state.
    """
    
    def parse_input(self, raw: str) -> ValidationResult:
        """
        Parse raw user text into a cell index.
        
        Only checks that the text is a whole number, the range is
        checked by validate_move.
        """
        text = raw.strip()
        try:
            index = int(text)
        except ValueError:
            return ValidationResult(is_valid=False, error=InvalidInputError(text))
        
        return ValidationResult(is_valid=True, index=index)
    
    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.
        
        Args:
            game_state: Current game state.
            index: Cell to place the mark on.
        
        Returns:
            ValidationResult with is_valid and the error if any.
        """
        try:
            game_state.check_move(index)
        except MoveError as e:
            return ValidationResult(is_valid=False, index=index, error=e)
        
        return ValidationResult(is_valid=True, index=index)
    
    def validate_input(self, game_state: GameState, raw: str) -> ValidationResult:
        """Parse then validate raw user text."""
        parsed = self.parse_input(raw)
        if not parsed.is_valid:
            return parsed
        return self.validate_move(game_state, parsed.index)
    
    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """Get all cell indices the current player may choose."""
        return game_state.get_empty_cells()
