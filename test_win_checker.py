"""
Tests for the TicTacToe win checker.
"""

import pytest

from logic.game_state import EMPTY_BOARD, Player
from logic.win_checker import GameStatus, WinChecker, WinResult

X, O, _ = Player.X, Player.O, None


@pytest.fixture
def checker():
    return WinChecker()


@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
def test_every_line_wins(checker, line):
    board = [None] * 9
    for cell in line:
        board[cell] = O
    
    assert checker.evaluate(tuple(board)) == WinResult(player=O, line=line)


def test_empty_board_has_no_winner(checker):
    assert checker.evaluate(EMPTY_BOARD) is None
    assert checker.get_status(EMPTY_BOARD) == GameStatus.IN_PROGRESS


def test_mixed_line_is_not_a_win(checker):
    board = (
        X, X, O,
        _, O, _,
        _, _, X,
    )
    assert checker.evaluate(board) is None
    assert checker.check_winner(board) is None
    assert checker.get_winning_line(board) is None


def test_first_line_in_scan_order_is_reported(checker):
    # Not reachable in play, but the scan order must be deterministic
    board = (
        X, X, X,
        O, O, O,
        _, _, _,
    )
    assert checker.evaluate(board) == WinResult(player=X, line=(0, 1, 2))


def test_diagonal_win(checker):
    board = (
        X, O, O,
        _, X, _,
        _, _, X,
    )
    assert checker.check_winner(board) == X
    assert checker.get_winning_line(board) == (0, 4, 8)
    assert checker.get_status(board) == GameStatus.WON


def test_full_board_without_line_is_draw(checker):
    board = (
        X, O, X,
        X, O, O,
        O, X, X,
    )
    assert checker.evaluate(board) is None
    assert checker.check_draw(board)
    assert checker.get_status(board) == GameStatus.DRAWN


def test_full_board_with_line_is_not_draw(checker):
    board = (
        X, X, X,
        O, O, X,
        X, O, O,
    )
    assert not checker.check_draw(board)
    assert checker.get_status(board) == GameStatus.WON


def test_reachable_boards_have_one_winner(checker):
    """Scan order never changes who wins on a board reachable in play."""
    seen = set()
    
    def walk(board, player):
        if board in seen:
            return
        seen.add(board)
        
        result = checker.evaluate(board)
        if result is not None:
            completed = [
                line for line in WinChecker.WINNING_LINES
                if all(board[c] == result.player for c in line)
            ]
            owners = {
                board[line[0]] for line in WinChecker.WINNING_LINES
                if board[line[0]] is not None
                and board[line[0]] == board[line[1]] == board[line[2]]
            }
            assert owners == {result.player}
            assert result.line == completed[0]
            return
        
        for cell in range(9):
            if board[cell] is None:
                cells = list(board)
                cells[cell] = player
                walk(tuple(cells), player.opposite())
    
    walk(EMPTY_BOARD, X)
    
    # 5478 distinct positions are reachable in a game of TicTacToe
    assert len(seen) == 5478
