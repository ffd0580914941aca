"""
Tests for the TicTacToe modules as the front-ends use them.
Covers configuration, the logic package exports, and console mode.
"""

import pytest

from logic import GameConfig, GameManager, GameStatus, Player
from tictactoe import ConsoleGame


def test_game_config():
    """Board geometry and labels."""
    assert GameConfig.BOARD_SIZE == 3
    assert GameConfig.CELL_COUNT == 9
    assert GameConfig.DEFAULT_ASCENDING is True
    assert Player.X.value == "X"
    assert Player.O.value == "O"
    assert Player.X.opposite() == Player.O


def test_game_logic():
    """A full game through the manager, as the UI drives it."""
    manager = GameManager()
    state = manager.new_game()
    
    for cell in (4, 0, 8):
        state = manager.apply_move(state, cell)
    
    assert manager.validator.validate_move(state, 4).is_valid is False
    assert manager.validator.validate_move(state, 1).is_valid is True
    assert manager.validator.get_valid_moves(state) == [1, 2, 3, 5, 6, 7]
    assert manager.get_status(state) == GameStatus.IN_PROGRESS


@pytest.fixture
def console():
    return ConsoleGame()


def test_console_moves(console):
    for line in ("0", "4", "1", "7", "2"):
        assert console.handle_command(line)
    
    assert console.manager.current_status(console.game_state) == "Winner: X"


def test_console_rejected_move_prints_reason(console, capsys):
    console.handle_command("4")
    before = console.game_state
    
    console.handle_command("4")
    
    assert console.game_state is before
    assert "already occupied" in capsys.readouterr().out


def test_console_jump_and_sort(console):
    for line in ("0", "4", "1"):
        console.handle_command(line)
    
    console.handle_command("j 1")
    assert console.game_state.current_move == 1
    
    console.handle_command("s")
    assert not console.game_state.is_ascending
    
    console.handle_command("5")
    assert len(console.game_state.history) == 3


def test_console_bad_jump(console, capsys):
    console.handle_command("j 7")
    assert console.game_state.current_move == 0
    assert "Invalid move number" in capsys.readouterr().out
    
    console.handle_command("j x")
    assert "Usage" in capsys.readouterr().out


def test_console_reset_keeps_sort_order(console):
    console.handle_command("s")
    console.handle_command("0")
    console.handle_command("r")
    
    assert len(console.game_state.history) == 1
    assert not console.game_state.is_ascending


def test_console_quit_and_unknown(console, capsys):
    assert console.handle_command("") is True
    assert console.handle_command("dance") is True
    assert "Unknown command" in capsys.readouterr().out
    assert console.handle_command("q") is False


def test_console_show(console, capsys):
    for line in ("0", "4", "1", "7", "2"):
        console.handle_command(line)
    
    console.show()
    out = capsys.readouterr().out
    
    assert "Winner: X" in out
    assert "Winning line: [0, 1, 2]" in out
    assert "* [5] Go to move #5 (3, 1)" in out
    assert "[0] Go to game start" in out


def test_console_rejection_logged_once(console, caplog):
    console.handle_command("4")
    
    with caplog.at_level("INFO", logger="logic.game_manager"):
        console.handle_command("4")
    
    assert len([r for r in caplog.records if "Move rejected" in r.getMessage()]) == 1
