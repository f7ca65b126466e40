import random

import pytest

from pocketapps.tictactoe import (
    Board,
    SpotTakenError,
    other_player,
    play_game,
    random_starter,
)


def scripted(lines):
    it = iter(lines)
    return lambda: next(it)


def test_empty_board_has_no_winner():
    board = Board()
    assert not board.has_won("x")
    assert not board.has_won("o")


@pytest.mark.parametrize(
    "cells",
    [
        [(1, 1), (1, 2), (1, 3)],
        [(1, 2), (2, 2), (3, 2)],
        [(1, 1), (2, 2), (3, 3)],
        [(1, 3), (2, 2), (3, 1)],
    ],
)
def test_lines_win(cells):
    board = Board()
    for row, col in cells:
        board.place(row, col, "o")
    assert board.has_won("o")
    assert not board.has_won("x")


def test_place_out_of_bounds():
    with pytest.raises(ValueError, match="Out of bounds"):
        Board().place(4, 1, "x")


def test_place_on_filled_spot():
    board = Board()
    board.place(2, 2, "x")
    with pytest.raises(SpotTakenError):
        board.place(2, 2, "o")


def test_render_shows_marks():
    board = Board()
    board.place(1, 1, "x")
    lines = board.render().splitlines()
    assert lines[0] == "(x) ( ) ( ) "
    assert lines[1] == lines[2] == "( ) ( ) ( ) "


class FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_random_starter_coin():
    assert random_starter(FixedRng(0.1)) == "x"
    assert random_starter(FixedRng(0.9)) == "o"
    assert random_starter(random.Random(1)) in ("x", "o")


def test_other_player_alternates():
    assert other_player("x") == "o"
    assert other_player(other_player("x")) == "x"


def test_play_game_win():
    out = []
    moves = ["1 1", "2 1", "1 2", "2 2", "1 3"]
    assert play_game(scripted(moves), out.append, "x") == "x"
    assert "Congratulationss!!, Player x won the game" in "".join(out)


def test_play_game_draw():
    out = []
    moves = ["1 1", "1 2", "1 3", "2 2", "2 1", "2 3", "3 2", "3 1", "3 3"]
    assert play_game(scripted(moves), out.append, "x") is None
    assert "Its a Draw!!" in "".join(out)


def test_play_game_reprompts_on_bad_input():
    out = []
    moves = ["a b", "4 1", "1 1", "1 1", "2 1", "1 2", "2 2", "1 3", "2 3"]
    assert play_game(scripted(moves), out.append, "o") == "o"
    text = "".join(out)
    assert "Invalid input! Please type a number: " in text
    assert "Out of bounds! Choose 1, 2, or 3.: " in text
    assert "This spot is already filled, select an empty spot: " in text