"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (winning line highlighted)
- Game status (winner, draw, or next player)
- Move history - click any entry to go back to that position
- Sort toggle for the move history
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic.config import GameConfig
from logic.game_manager import GameManager
from logic.game_state import GameState, Player

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """
    
    def __init__(self, is_ascending: bool = GameConfig.DEFAULT_ASCENDING):
        """Initialize the UI."""
        self.manager = GameManager()
        self.game_state: GameState = self.manager.new_game(is_ascending=is_ascending)
        
        self.history_frame: Optional[ttk.Frame] = None
        
        # Create UI
        self._create_ui()
        self._refresh()
        
    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BG_COLOR)
        self.root.minsize(560, 360)
        
        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)
        
        # Configure style
        font = GameConfig.FONT_FAMILY
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BG_COLOR)
        style.configure('TLabel', background=GameConfig.BG_COLOR, foreground='white', font=(font, 11))
        style.configure('Title.TLabel', font=(font, 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=(font, 12), foreground='#ffd700')
        
        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.Y, padx=(0, 10))
        
        ttk.Label(left_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 5))
        
        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)
        
        board_frame = ttk.Frame(left_frame)
        board_frame.pack(pady=10)
        
        size = GameConfig.BOARD_SIZE
        self.board_cells = []
        for row in range(size):
            for col in range(size):
                index = row * size + col
                cell = tk.Button(
                    board_frame,
                    text="",
                    font=(font, 24, 'bold'),
                    width=3,
                    height=1,
                    bg=GameConfig.CELL_COLOR,
                    activebackground=GameConfig.CELL_COLOR,
                    relief='ridge',
                    borderwidth=2,
                    command=lambda i=index: self._on_cell_click(i)
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                self.board_cells.append(cell)
        
        # Control buttons
        control_frame = ttk.Frame(left_frame)
        control_frame.pack(pady=10)
        
        tk.Button(
            control_frame,
            text="🔄 Reset",
            font=(font, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)
        
        tk.Button(
            control_frame,
            text="✕ Quit",
            font=(font, 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)
        
        # Right panel - move history
        right_frame = ttk.Frame(main_frame, width=260)
        right_frame.pack(side=tk.RIGHT, fill=tk.BOTH, expand=True, padx=(10, 0))
        
        ttk.Label(right_frame, text="📜 Moves", style='Title.TLabel').pack(pady=(0, 5))
        
        self.sort_btn = tk.Button(
            right_frame,
            text="",
            font=(font, 10, 'bold'),
            bg='#2d3748',
            fg='white',
            width=20,
            command=self._toggle_sort
        )
        self.sort_btn.pack(pady=5)
        
        self.history_frame = ttk.Frame(right_frame)
        self.history_frame.pack(fill=tk.BOTH, expand=True, pady=5)
        
        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)
        
    def _on_cell_click(self, index: int):
        """Play the clicked cell."""
        self.game_state = self.manager.apply_move(self.game_state, index)
        self._refresh()
        
    def _on_jump(self, index: int):
        """Go back (or forward) to a history entry."""
        self.game_state = self.manager.jump_to(self.game_state, index)
        self._refresh()
        
    def _toggle_sort(self):
        """Flip the move history order."""
        self.game_state = self.manager.toggle_sort_direction(self.game_state)
        self._refresh()
        
    def _refresh(self):
        """Redraw everything from the current game state."""
        view = self.manager.view(self.game_state)
        winning = view.winning_cells or ()
        
        # Board
        for index, cell in enumerate(self.board_cells):
            mark = view.board[index]
            fg = GameConfig.X_COLOR if mark == Player.X else GameConfig.O_COLOR
            bg = GameConfig.HIGHLIGHT_COLOR if index in winning else GameConfig.CELL_COLOR
            cell.configure(
                text=mark.value if mark is not None else "",
                fg=fg,
                bg=bg,
                activebackground=bg
            )
        
        self.status_label.configure(text=view.status_text)
        self.sort_btn.configure(text=view.sort_label)
        
        # Move history - rebuilt on every change
        for child in self.history_frame.winfo_children():
            child.destroy()
            
        for number, (index, description) in enumerate(view.moves, start=1):
            is_current = index == view.current_move
            tk.Button(
                self.history_frame,
                text=f"{number}. {description}",
                font=(GameConfig.FONT_FAMILY, 10, 'bold' if is_current else 'normal'),
                anchor='w',
                width=26,
                command=lambda i=index: self._on_jump(i)
            ).pack(fill=tk.X, pady=1)
            
    def _reset_game(self):
        """Start a new game, keeping the sort order."""
        logger.info("Resetting game")
        self.game_state = self.manager.new_game(is_ascending=self.game_state.is_ascending)
        self._refresh()
            
    def _quit(self):
        """Quit the application."""
        logger.info("Quitting")
        self.root.quit()
        self.root.destroy()
        
    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
