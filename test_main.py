"""
Tests for the console game and the command line.
"""

import logging

import pytest

import main
from board_view import BoardRenderer, DisplayConfig
from main import TicTacToeConsole
from tictactoe import Cell, GameEngine, GameStatus


def scripted(*lines):
    """input() replacement that replays `lines`, then hits EOF."""
    queue = list(lines)

    def fake_input(prompt=""):
        if not queue:
            raise EOFError
        return queue.pop(0)

    return fake_input


def test_console_plays_both_sides(capsys):
    game = TicTacToeConsole(input_func=scripted("4", "q"))
    game.start()

    out = capsys.readouterr().out
    assert "AI plays cell 0 (corner)" in out
    assert "Goodbye!" in out
    assert game.engine.board[4] == Cell.X
    assert game.engine.board[0] == Cell.O


def test_console_reports_rejections(capsys):
    game = TicTacToeConsole(input_func=scripted("4", "4", "12", "abc"))
    game.start()

    out = capsys.readouterr().out
    assert "That cell is taken." in out
    assert out.count("Pick a cell from 0 to 8.") == 2


def test_console_game_over_and_restart(capsys):
    # Human: 4, 1, 2, 3 loses to the AI (see the engine tests)
    game = TicTacToeConsole(input_func=scripted("4", "1", "2", "3", "5", "r"))
    game.start()

    out = capsys.readouterr().out
    assert "AI wins!" in out
    assert "Game over! Type 'r' to play again." in out
    assert "New game!" in out
    assert game.engine.status == GameStatus.IN_PROGRESS
    assert game.engine.score.wins_o == 1


def test_console_snapshot(tmp_path, capsys):
    class Config(DisplayConfig):
        SNAPSHOT_DIR = str(tmp_path)

    game = TicTacToeConsole(
        renderer=BoardRenderer(Config()),
        input_func=scripted("4", "s"),
    )
    game.start()

    assert len(list(tmp_path.glob("tictactoe_*.png"))) == 1
    assert "Saved:" in capsys.readouterr().out


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_main_console_mode(monkeypatch, capsys, restore_root_logger):
    monkeypatch.setattr("builtins.input", scripted("q"))
    assert main.main(["--no-ui", "--log-level", "warning"]) == 0
    assert restore_root_logger.level == logging.WARNING
    assert "Goodbye!" in capsys.readouterr().out


def test_main_rejects_negative_delay():
    with pytest.raises(SystemExit):
        main.main(["--no-ui", "--delay", "-5"])


def test_console_uses_given_engine():
    engine = GameEngine()
    engine.apply_move(0)
    engine.compute_and_apply_ai_move()
    game = TicTacToeConsole(engine=engine, input_func=scripted())
    game.start()
    assert game.engine is engine
    assert engine.board[0] == Cell.X


@pytest.mark.parametrize("command", ["²", "①", "4.0", "-1"])
def test_console_non_cell_input_reprompts(command, capsys):
    game = TicTacToeConsole(input_func=scripted(command, "4"))
    game.start()

    out = capsys.readouterr().out
    assert "Pick a cell from 0 to 8." in out
    assert "Goodbye!" in out
    # Still playable after the bad input
    assert game.engine.board[4] == Cell.X
