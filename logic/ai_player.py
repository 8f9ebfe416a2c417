"""
CPU move selection for console TicTacToe.

A move selector is any callable that takes the empty cell indices and
returns one of them. The engine asks its selector for every CPU move, so
tests can swap in a scripted one.
"""

import random
from typing import Callable, Iterable, Optional, Sequence

MoveSelector = Callable[[Sequence[int]], int]


class RandomMoveSelector:
    """
    Picks uniformly at random among the empty cells.
    """
    
    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the selector.
        
        Args:
            seed: Seed for the private random generator. None means
                  unpredictable moves.
        """
        self.seed = seed
        self._rng = random.Random(seed)
    
    def __call__(self, empty_cells: Sequence[int]) -> int:
        if not empty_cells:
            raise ValueError("No empty cells to choose from")
        return self._rng.choice(list(empty_cells))


class ScriptedMoveSelector:
    """
    Replays a fixed sequence of cell indices, one per CPU move.
    """
    
    def __init__(self, choices: Iterable[int]):
        self.choices = list(choices)
        self.position = 0
    
    def __call__(self, empty_cells: Sequence[int]) -> int:
        if self.position >= len(self.choices):
            raise ValueError("Scripted moves exhausted")
        
        index = self.choices[self.position]
        if index not in empty_cells:
            raise ValueError(f"Scripted move {index} is not an empty cell {list(empty_cells)}")
        
        self.position += 1
        return index
