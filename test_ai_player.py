"""
Tests for the heuristic AI player.
"""

import itertools
import logging

import pytest

from tictactoe import AIPlayer, Cell, GameState
from tictactoe.config import GameConfig


def board(layout: str):
    return GameState.from_string(layout).board


@pytest.fixture
def ai():
    return AIPlayer(Cell.O)


def test_takes_win(ai):
    # O completes column 2-5-8
    assert ai.choose_move(board("X.OX.O...")) == 8
    assert ai.last_reason == "win"


def test_prefers_win_over_block(ai):
    # X threatens 2 and O can finish the middle row at 5
    assert ai.choose_move(board("XX.OO....")) == 5
    assert ai.last_reason == "win"


def test_first_winning_cell_in_index_order(ai):
    # O can win at 2 (top row) or at 6 (left column)
    assert ai.choose_move(board("OO.OXX.X.")) == 2


def test_blocks(ai):
    assert ai.choose_move(board("XX..O....")) == 2
    assert ai.last_reason == "block"
    # Diagonal threat
    assert ai.choose_move(board("X...X..O.")) == 8


def test_first_blocking_cell_in_index_order(ai):
    # X threatens 2 (top row) and 6 (left column); O cannot win
    assert ai.choose_move(board("XX.X.O.O.")) == 2


def test_center(ai):
    assert ai.choose_move(board("X........")) == 4
    assert ai.last_reason == "center"


@pytest.mark.parametrize("layout, expected", [
    ("....X....", 0),
    ("O...X...X", 2),
    ("X.OOXX..O", 6),
])
def test_corner_order(ai, layout, expected):
    assert ai.choose_move(board(layout)) == expected
    assert ai.last_reason == "corner"


@pytest.mark.parametrize("layout, expected", [
    ("X.OOXXX.O", 1),
    ("XOOOXXX.O", 7),
])
def test_edge_order(ai, layout, expected):
    # Center and corners taken, no line can be completed by either side
    assert ai.choose_move(board(layout)) == expected
    assert ai.last_reason == "edge"


def test_fallback_on_full_board(ai, caplog):
    with caplog.at_level(logging.WARNING, logger="tictactoe.ai_player"):
        assert ai.choose_move(board("XXOOOXXXO")) == GameConfig.FALLBACK_CELL
    assert ai.last_reason == "fallback"
    assert "falling back" in caplog.text


def test_deterministic_on_every_ai_turn_board():
    """Same board, same answer, and always an empty cell."""
    ai = AIPlayer(Cell.O)
    for marks in itertools.product([Cell.EMPTY, Cell.X, Cell.O], repeat=9):
        cells = list(marks)
        if Cell.EMPTY not in cells:
            continue
        if cells.count(Cell.X) - cells.count(Cell.O) != 1:
            continue  # Not the AI's turn
        first = ai.choose_move(cells)
        assert cells[first] == Cell.EMPTY
        assert ai.choose_move(cells) == first


def test_ai_as_x():
    ai = AIPlayer(Cell.X)
    assert ai.opponent == Cell.O
    assert ai.choose_move(board("XX.OO....")) == 2


def test_ai_needs_a_mark():
    with pytest.raises(ValueError):
        AIPlayer(Cell.EMPTY)


def test_move_suggestion(ai):
    assert ai.get_move_suggestion(board("XX..O....")) == "Place O at cell 2 (row 0, col 2) [block]"
    assert ai.get_move_suggestion(board("XXOOOXXXO")) == "No moves available!"
