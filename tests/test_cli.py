"""Tests for the command line driver."""

from checkers_engine.cli.main import main, parse_moves
from checkers_engine.core import (
    Colour,
    GameState,
    Move,
    Piece,
    Square,
    board_from_pieces,
    generate_legal_moves,
)
from checkers_engine.utils import GameDisplay


def test_show(capsys):
    assert main(["show"]) == 0

    out = capsys.readouterr().out
    assert "|x   x   x   x   |\n|  x   x   x   x |\n" in out
    assert "White to move" in out


def test_parse_moves():
    assert parse_moves([[2, 2, 3, 3]]) == [Move(Square(2, 2), Square(3, 3))]
    assert parse_moves(None) == []


def test_play(capsys):
    assert main(["play", "--move", "2", "2", "3", "3", "--move", "5", "5", "4", "4"]) == 0

    out = capsys.readouterr().out
    assert "Played (2, 2) -> (3, 3)" in out
    assert "Move 2, White to move" in out


def test_play_illegal_move(capsys):
    assert main(["play", "--move", "5", "5", "4", "4"]) == 1

    assert "Move not allowed: (5, 5) -> (4, 4)" in capsys.readouterr().out


def test_play_off_board(capsys):
    assert main(["play", "--move", "2", "2", "9", "9"]) == 1

    assert "off the 8x8 board" in capsys.readouterr().out


def test_moves(capsys):
    assert main(["moves", "--move", "0", "2", "1", "3"]) == 0

    out = capsys.readouterr().out
    assert "Legal moves for Red" in out
    assert "Red to move" in out


def test_explore(capsys):
    assert main(["explore", "--depth", "2", "--no-progress"]) == 0

    assert "49" in capsys.readouterr().out


def test_no_command(capsys):
    assert main([]) == 1


def test_explore_negative_depth(capsys):
    assert main(["explore", "--depth", "-1"]) == 1

    out = capsys.readouterr().out
    assert "Invalid depth -1, must be >= 0" in out
    assert "Move tree" not in out


def test_moves_illegal_move(capsys):
    assert main(["moves", "--move", "1", "1", "2", "2"]) == 1

    assert "Move not allowed: (1, 1) -> (2, 2)" in capsys.readouterr().out


def test_show_moves_when_none_left(capsys):
    """Test the side to move is reported when it has nothing to play."""
    state = GameState(board=board_from_pieces({Square(3, 0): Piece(Colour.RED)}))

    GameDisplay().show_moves(state, generate_legal_moves(state))

    assert "No legal moves for White" in capsys.readouterr().out
