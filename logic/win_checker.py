"""
Win checker for console TicTacToe.
Checks if a player has won or if the round is a tie.
"""

from typing import Optional, Sequence, Tuple
from .game_state import Cell, GameState, Outcome, Player


class WinChecker:
    """
    Checks for win conditions in TicTacToe.
    
    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """
    
    # All possible winning lines, as flat board indices
    WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )
    
    def has_won(self, board: Sequence[Cell], player: Player) -> bool:
        """True if the player owns a complete line."""
        return self._find_line(board, player.cell) is not None
    
    def check_winner(self, game_state: GameState) -> Optional[Player]:
        """
        Check if there's a winner.
        
        The human is checked before the CPU, so a board where both own a
        line (which normal play never produces) reports the human.
        
        Args:
            game_state: The current game state.
        
        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in (Player.HUMAN, Player.CPU):
            if self.has_won(game_state.board, player):
                return player
        return None
    
    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the round is a tie: all cells filled AND no winner.
        """
        if self.check_winner(game_state) is not None:
            return False
        return game_state.is_full()
    
    def evaluate(self, game_state: GameState) -> Outcome:
        """
        Work out the outcome of the round from the board alone.
        
        Args:
            game_state: The game state to look at. It is not changed.
        
        Returns:
            HUMAN_WINS, CPU_WINS, TIE or IN_PROGRESS.
        """
        winner = self.check_winner(game_state)
        
        if winner == Player.HUMAN:
            return Outcome.HUMAN_WINS
        if winner == Player.CPU:
            return Outcome.CPU_WINS
        if self.check_draw(game_state):
            return Outcome.TIE
        return Outcome.IN_PROGRESS
    
    def get_winning_line(self, game_state: GameState) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.
        
        Returns:
            The winning line as a triple of indices, or None.
        """
        winner = self.check_winner(game_state)
        if winner is None:
            return None
        return self._find_line(game_state.board, winner.cell)
    
    def _find_line(
        self,
        board: Sequence[Cell],
        mark: Cell
    ) -> Optional[Tuple[int, int, int]]:
        """Return the first line fully held by mark."""
        for line in self.WINNING_LINES:
            if all(board[i] == mark for i in line):
                return line
        return None


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")
    
    checker = WinChecker()
    H, C, E = Cell.HUMAN, Cell.CPU, Cell.EMPTY
    
    # Test 1: Horizontal win
    game1 = GameState(board=[H, H, H, E, C, E, C, E, E])
    print(f"Test 1 (horizontal): {checker.evaluate(game1)}")
    assert checker.evaluate(game1) == Outcome.HUMAN_WINS
    
    # Test 2: Diagonal win
    game2 = GameState(board=[H, H, C, E, C, E, C, E, H])
    print(f"Test 2 (diagonal): {checker.evaluate(game2)}")
    assert checker.evaluate(game2) == Outcome.CPU_WINS
    
    # Test 3: Tie (full board, no winner)
    game3 = GameState(board=[H, H, C, C, C, H, H, C, H])
    print(f"Test 3 (tie): {checker.evaluate(game3)}")
    assert checker.evaluate(game3) == Outcome.TIE
    
    print("\nWinChecker test done!")
