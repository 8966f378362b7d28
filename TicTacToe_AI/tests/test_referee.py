"""Tests for referee enforcement of bounds and occupancy."""

import pytest

from TicTacToe_AI.Board import Board, PLAYER, OUT_OF_RANGE, OCCUPIED
from TicTacToe_AI.engine import referee


def test_out_of_range_rejected():
    b = Board()
    with pytest.raises(referee.InvalidMoveError) as excinfo:
        referee.check_move((3, 1), b)
    assert excinfo.value.reason == OUT_OF_RANGE
    assert excinfo.value.move == (3, 1)
    assert str(excinfo.value) == f"Invalid move! {OUT_OF_RANGE}"


def test_occupied_rejected():
    b = Board()
    b.place(1, 1, PLAYER)
    with pytest.raises(ValueError, match="already occupied"):
        referee.check_move((1, 1), b)
    assert OCCUPIED.startswith("The cell")


def test_valid_move_passes():
    b = Board()
    assert referee.check_move((2, 2), b) is True
