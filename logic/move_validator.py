"""
Move validator for TicTacToe.
Validates that moves and history jumps follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe requests.
    
    Rules:
    1. Can only place on empty cells inside the board
    2. No more moves once the current board has a winner
    3. Can only jump to a position that exists in the history
    """
    
    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()
    
    def validate_move(self, game_state: GameState, cell: int) -> ValidationResult:
        """
        Validate a move.
        
        Args:
            game_state: Current game state.
            cell: Cell to place a mark on (0-8).
            
        Returns:
            ValidationResult with is_valid and error_message.
        """
        board = game_state.current_board
        
        # Check if game is already won
        winner = self.win_checker.check_winner(board)
        if winner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over! {winner.value} won."
            )
        
        # Check if cell is in valid range
        if not 0 <= cell < GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )
        
        # Check if cell is empty
        if board[cell] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell} is already occupied by {board[cell].value}"
            )
        
        return ValidationResult(is_valid=True)
    
    def validate_jump(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a jump to a history position.
        
        Args:
            game_state: Current game state.
            index: Target history index.
            
        Returns:
            ValidationResult.
        """
        last = len(game_state.history) - 1
        if not 0 <= index <= last:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid move number {index}. Must be 0-{last}."
            )
        
        return ValidationResult(is_valid=True)
    
    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves from the current position.
        
        Args:
            game_state: Current game state.
            
        Returns:
            List of cell indices.
        """
        if self.win_checker.check_winner(game_state.current_board) is not None:
            return []
        
        return game_state.get_empty_cells()
