"""
Game manager for TicTacToe.
Applies moves, travels through the history, and builds what the
front-ends display.

Every operation takes a GameState and returns a GameState. Rejected
requests return the same state object unchanged.
"""

import logging
from typing import Optional, List, Tuple
from dataclasses import dataclass, replace

from .config import GameConfig
from .game_state import Board, GameState
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, GameStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameView:
    """Everything a front-end needs to draw one frame of the game."""
    board: Board
    status: GameStatus
    status_text: str
    moves: List[Tuple[int, str]]               # (history index, description)
    current_move: int
    winning_cells: Optional[Tuple[int, int, int]]
    sort_label: str


class GameManager:
    """
    Runs the rules of a TicTacToe game with move history.
    
    The manager holds no game data itself. Callers keep the latest
    GameState and replace it with whatever each operation returns.
    """
    
    def __init__(
        self,
        win_checker: Optional[WinChecker] = None,
        validator: Optional[MoveValidator] = None
    ):
        self.win_checker = win_checker or WinChecker()
        self.validator = validator or MoveValidator(self.win_checker)
    
    def new_game(self, is_ascending: bool = GameConfig.DEFAULT_ASCENDING) -> GameState:
        """Create the initial state: one empty board, X to move."""
        return GameState.new(is_ascending=is_ascending)
    
    # ==================== COMMANDS ====================
    
    def apply_move(self, state: GameState, cell: int) -> GameState:
        """
        Play the next player's mark at a cell.
        
        Any history after the current position is discarded before the
        new snapshot is appended.
        
        Args:
            state: Current game state.
            cell: Cell index (0-8).
            
        Returns:
            The new state, or the same state if the move was rejected.
        """
        new_state, _ = self.try_move(state, cell)
        return new_state
    
    def try_move(self, state: GameState, cell: int) -> Tuple[GameState, ValidationResult]:
        """
        Same as apply_move, but also returns why a move was rejected.
        
        Returns:
            (new state, validation result). The state is unchanged when
            the result is not valid.
        """
        result = self.validator.validate_move(state, cell)
        if not result.is_valid:
            logger.info("Move rejected: %s", result.error_message)
            return state, result
        
        player = state.next_player
        new_state = state.with_move(cell)
        
        dropped = len(state.history) - 1 - state.current_move
        if dropped:
            logger.debug("Discarded %d later move(s) from history", dropped)
        logger.debug(
            "%s played cell %d (move #%d)", player.value, cell, new_state.current_move
        )
        return new_state, result
    
    def jump_to(self, state: GameState, index: int) -> GameState:
        """
        Show the board as it was after a given move.
        
        Args:
            state: Current game state.
            index: History index (0 = game start).
            
        Returns:
            The state positioned at index, or the same state if index
            is not in the history.
        """
        new_state, _ = self.try_jump(state, index)
        return new_state
    
    def try_jump(self, state: GameState, index: int) -> Tuple[GameState, ValidationResult]:
        """Same as jump_to, but also returns why a jump was rejected."""
        result = self.validator.validate_jump(state, index)
        if not result.is_valid:
            logger.info("Jump rejected: %s", result.error_message)
            return state, result
        
        if index == state.current_move:
            return state, result
        
        logger.debug("Jumped from move #%d to move #%d", state.current_move, index)
        return replace(state, current_move=index), result
    
    def toggle_sort_direction(self, state: GameState) -> GameState:
        """Flip the order the move list is shown in."""
        return replace(state, is_ascending=not state.is_ascending)
    
    # ==================== QUERIES ====================
    
    def describe_move(self, state: GameState, index: int) -> str:
        """
        Get the label for a history entry.
        
        Args:
            state: Game state holding the history.
            index: History index.
            
        Returns:
            "Go to game start" for index 0, otherwise
            "Go to move #<n> (<col>, <row>)" with 1-based col and row.
            
        Raises:
            IndexError: If index is not in the history.
        """
        result = self.validator.validate_jump(state, index)
        if not result.is_valid:
            raise IndexError(result.error_message)
        
        if index == 0:
            return GameConfig.START_LABEL
        
        entry = state.history[index]
        return GameConfig.MOVE_LABEL.format(number=index, col=entry.col, row=entry.row)
    
    def current_status(self, state: GameState) -> str:
        """Status line for the current board: winner, draw, or next player."""
        winner = self.win_checker.check_winner(state.current_board)
        
        if winner is not None:
            return GameConfig.STATUS_WINNER.format(player=winner.value)
        if state.is_board_full():
            return GameConfig.STATUS_DRAW
        return GameConfig.STATUS_NEXT.format(player=state.next_player.value)
    
    def get_status(self, state: GameState) -> GameStatus:
        return self.win_checker.get_status(state.current_board)
    
    def move_list(self, state: GameState) -> List[Tuple[int, str]]:
        """
        Get (index, description) for every history entry.
        
        Ordered oldest first when the state is ascending, newest first
        otherwise.
        """
        moves = [
            (index, self.describe_move(state, index))
            for index in range(len(state.history))
        ]
        if not state.is_ascending:
            moves.reverse()
        return moves
    
    def winning_cells(self, state: GameState) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(state.current_board)
    
    def sort_label(self, state: GameState) -> str:
        """Label for the control that flips the move list order."""
        if state.is_ascending:
            return GameConfig.SORT_DESCENDING_LABEL
        return GameConfig.SORT_ASCENDING_LABEL
    
    def view(self, state: GameState) -> GameView:
        """Build the full display model for a state."""
        return GameView(
            board=state.current_board,
            status=self.get_status(state),
            status_text=self.current_status(state),
            moves=self.move_list(state),
            current_move=state.current_move,
            winning_cells=self.winning_cells(state),
            sort_label=self.sort_label(state),
        )
