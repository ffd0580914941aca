"""
Game state for TicTacToe.
Immutable board snapshots, the move history, and the current position.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field, replace

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = GameConfig.FIRST_PLAYER_MARK
    O = GameConfig.SECOND_PLAYER_MARK
    
    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


# A board is 9 cells in row-major order - None means empty
Board = Tuple[Optional[Player], ...]

EMPTY_BOARD: Board = (None,) * GameConfig.CELL_COUNT


def make_board(cells) -> Board:
    """
    Build a board from any sequence of 9 cells.
    
    Args:
        cells: Sequence of None / Player values.
        
    Returns:
        The board as a tuple.
    """
    board = tuple(cells)
    if len(board) != GameConfig.CELL_COUNT:
        raise ValueError(
            f"Board must have {GameConfig.CELL_COUNT} cells, got {len(board)}"
        )
    return board


def place_mark(board: Board, cell: int, player: Player) -> Board:
    """Return a copy of the board with the player's mark at cell."""
    cells = list(board)
    cells[cell] = player
    return tuple(cells)


@dataclass(frozen=True)
class HistoryEntry:
    """
    One snapshot in the game history.
    """
    board: Board                 # The board after this move
    move: Optional[int] = None   # Cell changed to produce it (None for the start)
    
    def __post_init__(self):
        # Always store the validated tuple, never the caller's sequence
        object.__setattr__(self, "board", make_board(self.board))
    
    @property
    def col(self) -> Optional[int]:
        """1-based column of the move, or None for the start entry."""
        if self.move is None:
            return None
        return 1 + self.move % GameConfig.BOARD_SIZE
    
    @property
    def row(self) -> Optional[int]:
        """1-based row of the move, or None for the start entry."""
        if self.move is None:
            return None
        return 1 + self.move // GameConfig.BOARD_SIZE


@dataclass(frozen=True)
class GameState:
    """
    The complete state of a TicTacToe game.
    
    Tracks:
    - Every board snapshot in move order (history)
    - Which snapshot is currently shown and played from
    - The display order of the move list
    
    Winner and draw are not stored here; they are derived from the
    current board by the WinChecker whenever they are needed.
    """
    
    history: Tuple[HistoryEntry, ...] = field(
        default_factory=lambda: (HistoryEntry(EMPTY_BOARD),)
    )
    
    # Index into history of the snapshot being shown
    current_move: int = 0
    
    # Display order of the move list only
    is_ascending: bool = GameConfig.DEFAULT_ASCENDING
    
    def __post_init__(self):
        if not self.history:
            raise ValueError("History must contain at least the start entry")
        if not 0 <= self.current_move < len(self.history):
            raise ValueError(
                f"current_move {self.current_move} outside history of "
                f"length {len(self.history)}"
            )
    
    @classmethod
    def new(cls, is_ascending: bool = GameConfig.DEFAULT_ASCENDING) -> "GameState":
        """Create a fresh game with only the empty start board."""
        return cls(is_ascending=is_ascending)
    
    @property
    def current_entry(self) -> HistoryEntry:
        return self.history[self.current_move]
    
    @property
    def current_board(self) -> Board:
        return self.current_entry.board
    
    @property
    def x_is_next(self) -> bool:
        """X moves on even positions, O on odd ones."""
        return self.current_move % 2 == 0
    
    @property
    def next_player(self) -> Player:
        return Player.X if self.x_is_next else Player.O
    
    def with_move(self, cell: int) -> "GameState":
        """
        Play the next player's mark at cell, dropping any later history.
        
        No rule checks happen here - use GameManager.apply_move for that.
        
        Args:
            cell: Cell index (0-8).
            
        Returns:
            New state positioned at the new last entry.
        """
        board = place_mark(self.current_board, cell, self.next_player)
        history = self.history[:self.current_move + 1] + (HistoryEntry(board, cell),)
        return replace(self, history=history, current_move=len(history) - 1)
    
    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the current board.
        
        Returns:
            List of cell indices.
        """
        return [i for i, cell in enumerate(self.current_board) if cell is None]
    
    def is_board_full(self) -> bool:
        return all(cell is not None for cell in self.current_board)
    
    def print_board(self):
        """Print the current board to console."""
        size = GameConfig.BOARD_SIZE
        print("\n    1   2   3")
        print("  ┌───┬───┬───┐")
        
        for row in range(size):
            row_str = "│"
            for col in range(size):
                index = row * size + col
                cell = self.current_board[index]
                # Show the cell index on empty cells so players know what to type
                mark = cell.value if cell is not None else str(index)
                row_str += f" {mark} │"
            print(f"{row + 1} {row_str}")
            
            if row < size - 1:
                print("  ├───┼───┼───┤")
        
        print("  └───┴───┴───┘")
