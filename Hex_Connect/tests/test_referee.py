"""Winner reporting for whole boards: ordering, errors, and fixed scenarios."""

import importlib

import pytest

from Hex_Connect.Board import EmptyInputError, EmptyRowError, load
from Hex_Connect.engine import referee


def test_empty_board_has_no_winner():
    assert referee.result_of(["...", "...", "..."]) == ""
    assert referee.result_of(["   ", "   "]) == ""


def test_black_chain_wins_despite_stray_stones():
    rows = [
        "O.X.O",
        "XXXXX",
        ".O..X",
    ]
    assert referee.result_of(rows) == "black"


def test_white_chain_wins():
    rows = [
        "X.O..",
        "..O.X",
        "X.O..",
        "..O..",
    ]
    assert referee.result_of(rows) == "white"


def test_three_by_three_scenario():
    # Black's diagonal stones are not hex-adjacent; white joins top to bottom.
    assert referee.result_of(["XOO", "OXO", "OOX"]) == "white"


def test_single_black_stone():
    assert referee.result_of(["X"]) == "black"


def test_single_white_stone():
    assert referee.result_of(["O"]) == "white"


def test_errors_propagate():
    with pytest.raises(EmptyInputError):
        referee.result_of([])
    with pytest.raises(EmptyRowError):
        referee.result_of([""])


def test_custom_markers():
    assert referee.result_of(["bbb", "www", "..."], black="b", white="w") == "black"


def test_idempotent_on_fresh_loads():
    rows = ["XOO", "OXO", "OOX"]
    assert referee.result_of(rows) == referee.result_of(rows) == "white"


def test_white_not_searched_after_black_wins(monkeypatch):
    searched = []
    real = referee.has_winning_connection

    def recording(board, orientation):
        searched.append(orientation.name)
        return real(board, orientation)

    monkeypatch.setattr(referee, "has_winning_connection", recording)
    assert referee.result_of(["XXX", "OOO", "..."]) == "black"
    assert searched == ["black"]

    searched.clear()
    assert referee.result_of(["XO.", ".O.", ".O."]) == "white"
    assert searched == ["black", "white"]


def test_winner_of_accepts_explicit_orientations():
    connectivity = importlib.import_module("Hex_Connect.engine.connectivity")
    board = load(["XXX", "OOO", "..."])
    # white's search alone still finds no top-to-bottom chain
    assert referee.winner_of(board, (connectivity.WHITE_ORIENTATION,)) == ""
    assert referee.winner_of(board, (connectivity.BLACK_ORIENTATION,)) == "black"


def test_ring_board_terminates():
    rows = [
        ".....",
        "..XX.",
        "XX.X.",
        ".XX..",
        ".....",
    ]
    assert referee.result_of(rows) == ""
