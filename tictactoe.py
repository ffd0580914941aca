"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.

Console commands:
    0-8     Place a mark on that cell
    j <n>   Jump to move n in the history (0 = game start)
    s       Toggle move history order
    r       Reset the game
    h       Show help
    q       Quit
"""

import logging

from logic.config import GameConfig
from logic.game_manager import GameManager
from logic.game_state import GameState

HELP_TEXT = """Commands:
  0-8     place a mark on that cell
  j <n>   jump to move n (0 = game start)
  s       toggle move history order
  r       reset the game
  h       show this help
  q       quit"""


class ConsoleGame:
    """
    Plays TicTacToe in the terminal.
    
    Game flow:
    1. Show the board, status and move history
    2. Read a command
    3. Apply it to the game state
    4. Repeat until the player quits
    """
    
    def __init__(self, is_ascending: bool = GameConfig.DEFAULT_ASCENDING):
        """
        Initialize the console game.
        
        Args:
            is_ascending: Show the move history oldest first.
        """
        self.manager = GameManager()
        self.game_state: GameState = self.manager.new_game(is_ascending=is_ascending)
    
    def start(self):
        """Start the game loop."""
        print("\n" + "="*60)
        print("   TicTacToe")
        print("="*60)
        print(HELP_TEXT)
        
        self.show()
        while True:
            try:
                line = input("\n> ")
            except EOFError:
                break
            
            if not self.handle_command(line):
                break
            self.show()
    
    def handle_command(self, line: str) -> bool:
        """
        Apply one console command.
        
        Args:
            line: The raw command text.
            
        Returns:
            False when the player asked to quit, True otherwise.
        """
        parts = line.strip().lower().split()
        if not parts:
            return True
        
        command, args = parts[0], parts[1:]
        
        if command in ("q", "quit"):
            return False
        
        if command in ("h", "help"):
            print(HELP_TEXT)
        elif command in ("s", "sort"):
            self.game_state = self.manager.toggle_sort_direction(self.game_state)
        elif command in ("r", "reset"):
            print("\nResetting game...")
            self.game_state = self.manager.new_game(is_ascending=self.game_state.is_ascending)
        elif command in ("j", "jump"):
            if len(args) != 1 or not args[0].isdigit():
                print("Usage: j <move number>")
                return True
            self._jump(int(args[0]))
        elif command.isdigit():
            self._move(int(command))
        else:
            print(f"Unknown command: {command!r} (h for help)")
        
        return True
    
    def _move(self, cell: int):
        self.game_state, result = self.manager.try_move(self.game_state, cell)
        if not result.is_valid:
            print(result.error_message)
    
    def _jump(self, index: int):
        self.game_state, result = self.manager.try_jump(self.game_state, index)
        if not result.is_valid:
            print(result.error_message)
    
    def show(self):
        """Print the board, status and move history."""
        view = self.manager.view(self.game_state)
        
        self.game_state.print_board()
        print(f"\n{view.status_text}")
        if view.winning_cells:
            print(f"Winning line: {list(view.winning_cells)}")
        
        print(f"\nMoves ({view.sort_label.lower()} with 's'):")
        for index, description in view.moves:
            marker = "*" if index == view.current_move else " "
            print(f" {marker} [{index}] {description}")


def main():
    """Main entry point."""
    import argparse
    
    parser = argparse.ArgumentParser(description="TicTacToe with move history")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--descending",
        action="store_true",
        help="Show the move history newest first"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every move and jump"
    )
    
    args = parser.parse_args()
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )
    
    is_ascending = not args.descending
    
    # Launch UI by default
    if not args.no_ui:
        from tictactoe_ui import TicTacToeUI
        ui = TicTacToeUI(is_ascending=is_ascending)
        ui.run()
        return
    
    game = ConsoleGame(is_ascending=is_ascending)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
