"""
Game state management for console TicTacToe.
Tracks the board, current player, and move history.
"""

from enum import Enum
from typing import List
from dataclasses import dataclass, field

from .config import GameConfig
from .errors import InvalidIndexError, CellOccupiedError


class Cell(Enum):
    """What a single board cell holds."""
    EMPTY = GameConfig.EMPTY_SYMBOL
    HUMAN = GameConfig.HUMAN_SYMBOL
    CPU = GameConfig.CPU_SYMBOL


class Player(Enum):
    """The two sides in the game."""
    HUMAN = "human"
    CPU = "cpu"
    
    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.CPU if self == Player.HUMAN else Player.HUMAN
    
    @property
    def cell(self) -> Cell:
        """The mark this player leaves on the board."""
        return Cell.HUMAN if self == Player.HUMAN else Cell.CPU


class Outcome(Enum):
    """Result of a round, derived from the board."""
    IN_PROGRESS = "in_progress"
    HUMAN_WINS = "human_wins"
    CPU_WINS = "cpu_wins"
    TIE = "tie"
    
    @property
    def is_terminal(self) -> bool:
        return self != Outcome.IN_PROGRESS


def first_player() -> Player:
    """Who opens a round."""
    return Player.HUMAN if GameConfig.HUMAN_FIRST else Player.CPU


def empty_board() -> List[Cell]:
    return [Cell.EMPTY] * GameConfig.CELL_COUNT


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Which move of the round this is (0-8)
    
    @property
    def row(self) -> int:
        return self.index // GameConfig.BOARD_SIZE
    
    @property
    def col(self) -> int:
        return self.index % GameConfig.BOARD_SIZE


@dataclass
class GameState:
    """
    The board and turn state of one TicTacToe round.
    
    Tracks:
    - The board as a flat list of 9 cells (index = row * 3 + col)
    - Current player
    - Move history
    
    Whether the round is won or tied is not stored here, see WinChecker.
    """
    
    board: List[Cell] = field(default_factory=empty_board)
    current_player: Player = field(default_factory=first_player)
    moves: List[Move] = field(default_factory=list)
    
    def check_move(self, index: int):
        """
        Check that a mark can go at the given index.
        
        Raises:
            InvalidIndexError: index is not an int in 0-8.
            CellOccupiedError: the cell is not empty.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidIndexError(index)
        if not 0 <= index < GameConfig.CELL_COUNT:
            raise InvalidIndexError(index)
        if self.board[index] != Cell.EMPTY:
            raise CellOccupiedError(index, self.board[index].value)
    
    def make_move(self, index: int, player: Player) -> Move:
        """
        Place a player's mark at the given index and pass the turn.
        
        Args:
            index: Cell index (0-8).
            player: Who is placing the mark.
        
        Returns:
            The recorded Move.
        """
        self.check_move(index)
        
        self.board[index] = player.cell
        move = Move(player=player, index=index, move_number=len(self.moves))
        self.moves.append(move)
        
        # Winner detection is done by WinChecker, just switch turns here
        self.current_player = player.opposite()
        return move
    
    def get_empty_cells(self) -> List[int]:
        """Get the indices of all empty cells, in ascending order."""
        return [i for i, cell in enumerate(self.board) if cell == Cell.EMPTY]
    
    def is_full(self) -> bool:
        return all(cell != Cell.EMPTY for cell in self.board)


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")
    
    game = GameState()
    for index in (4, 0, 2):
        print(f"{game.current_player.value} moves to {index}")
        game.make_move(index, game.current_player)
    
    print(f"Board: {[cell.value for cell in game.board]}")
    print(f"Empty cells: {game.get_empty_cells()}")
    
    try:
        game.make_move(4, game.current_player)
    except CellOccupiedError as e:
        print(f"Expected error: {e}")
    
    print("\nGame state test done!")
