"""
Game configuration for TicTacToe.
Board geometry, player marks, and the text shown to players.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The board is always 3x3 with three in a row to win.
    """
    
    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells
    
    # ==================== PLAYER SETTINGS ====================
    # X always moves first (position 0 = empty board = X's turn)
    FIRST_PLAYER_MARK = "X"
    SECOND_PLAYER_MARK = "O"
    
    # ==================== TEXT ====================
    START_LABEL = "Go to game start"
    MOVE_LABEL = "Go to move #{number} ({col}, {row})"
    
    STATUS_WINNER = "Winner: {player}"
    STATUS_DRAW = "Draw!"
    STATUS_NEXT = "Next player: {player}"
    
    SORT_DESCENDING_LABEL = "Sort Descending"
    SORT_ASCENDING_LABEL = "Sort Ascending"
    
    # History list order when a game starts
    DEFAULT_ASCENDING = True
    
    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    BG_COLOR = '#1a1a2e'
    CELL_COLOR = '#16213e'
    HIGHLIGHT_COLOR = '#b45309'
    X_COLOR = '#f87171'
    O_COLOR = '#00ff88'
    FONT_FAMILY = 'Segoe UI'
