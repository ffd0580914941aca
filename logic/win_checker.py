"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .game_state import Board, Player


class GameStatus(Enum):
    """Where a board stands in the game."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class WinResult:
    """A winner and the three cells that make the winning line."""
    player: Player
    line: Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.
    
    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """
    
    # All possible winning lines as cell indices, checked in this order
    WINNING_LINES = [
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
    ]
    
    def evaluate(self, board: Board) -> Optional[WinResult]:
        """
        Find the first completed line on the board.
        
        Args:
            board: A 9-cell board.
            
        Returns:
            WinResult with the winner and its line, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return WinResult(player=winner, line=line)
        
        return None
    
    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Player]:
        """Return the player holding all 3 cells of the line, if any."""
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None
    
    def check_winner(self, board: Board) -> Optional[Player]:
        """Get the winning Player, or None if no winner yet."""
        result = self.evaluate(board)
        return result.player if result else None
    
    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """Get the winning line as cell indices, or None."""
        result = self.evaluate(board)
        return result.line if result else None
    
    def check_draw(self, board: Board) -> bool:
        """
        Check if the board is a draw.
        
        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.evaluate(board) is not None:
            return False
        
        return all(cell is not None for cell in board)
    
    def get_status(self, board: Board) -> GameStatus:
        """
        Derive the game status from a board.
        
        Args:
            board: The board to inspect.
            
        Returns:
            WON, DRAWN or IN_PROGRESS.
        """
        if self.evaluate(board) is not None:
            return GameStatus.WON
        if self.check_draw(board):
            return GameStatus.DRAWN
        return GameStatus.IN_PROGRESS
