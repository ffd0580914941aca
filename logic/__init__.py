"""
Logic module for TicTacToe.
Handles game state, rules, and move history.
"""

from .config import GameConfig
from .game_state import GameState, HistoryEntry, Player, Board, EMPTY_BOARD
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, WinResult, GameStatus
from .game_manager import GameManager, GameView

__version__ = "1.0.0"
