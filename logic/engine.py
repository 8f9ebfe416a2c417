"""
Game engine for console TicTacToe.
Ties the board, win checking and CPU move selection together.
"""

from typing import List, Optional, Tuple

from .config import debug
from .game_state import Cell, GameState, Move, Outcome, Player
from .win_checker import WinChecker
from .ai_player import MoveSelector, RandomMoveSelector
from .errors import RoundOverError


class GameEngine:
    """
    Runs one TicTacToe round at a time.
    
    Round flow:
    1. reset() gives an empty board with the human to move
    2. apply_move() places marks, alternating turns
    3. evaluate() tells when the round is won or tied
    4. reset() again for the next round
    """
    
    def __init__(self, selector: Optional[MoveSelector] = None):
        """
        Initialize the engine.
        
        Args:
            selector: Chooses the CPU's move from the empty cells.
                      Defaults to a uniform random choice.
        """
        self.selector = selector if selector is not None else RandomMoveSelector()
        self.win_checker = WinChecker()
        self.state = GameState()
    
    @property
    def board(self) -> Tuple[Cell, ...]:
        """Read-only view of the 9 cells."""
        return tuple(self.state.board)
    
    @property
    def current_player(self) -> Player:
        return self.state.current_player
    
    @property
    def moves(self) -> Tuple[Move, ...]:
        return tuple(self.state.moves)
    
    def empty_cells(self) -> List[int]:
        return self.state.get_empty_cells()
    
    def apply_move(self, index: int, player: Player) -> Move:
        """
        Place a mark and pass the turn to the other side.
        
        Args:
            index: Cell index (0-8).
            player: Who is moving.
        
        Returns:
            The recorded Move.
        
        Raises:
            RoundOverError: the round already has a result.
            InvalidIndexError: index is outside 0-8.
            CellOccupiedError: the cell is taken.
        """
        outcome = self.evaluate()
        if outcome.is_terminal:
            raise RoundOverError(f"The round is already over ({outcome.value})!")
        
        move = self.state.make_move(index, player)
        debug(f"{player.value} -> {index} (move {move.move_number})")
        return move
    
    def pick_random_move(self) -> int:
        """
        Choose a cell for the CPU. The move is not applied.
        
        Raises:
            RoundOverError: there are no empty cells left.
        """
        empty_cells = self.state.get_empty_cells()
        if not empty_cells:
            raise RoundOverError("No empty cells left to pick from!")
        
        index = self.selector(empty_cells)
        debug(f"cpu candidates {empty_cells}, picked {index}")
        return index
    
    def evaluate(self) -> Outcome:
        """Outcome of the current board. Does not change anything."""
        return self.win_checker.evaluate(self.state)
    
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self.state)
    
    def reset(self):
        """Start a new round on an empty board."""
        self.state = GameState()
        debug("board reset")
