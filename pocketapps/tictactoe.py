"""Two-player tic-tac-toe on the console."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable

Reader = Callable[[], str]
Writer = Callable[[str], object]

MARKS = ("x", "o")
EMPTY = " "
SIZE = 3

_OPPONENT = {"x": "o", "o": "x"}

INTRO = (
    "Hello to the Tic Tac Toe Game\n"
    "The rules of the game is to get 3 in a row\n"
    "To input your choice, write down the row first and the column "
    "(ex. 1 2 for top middle)\n\n"
    "Let's start the game\n"
)


class SpotTakenError(ValueError):
    """Raised when a mark is placed on a filled spot."""


class Board:
    """A 3x3 board addressed by 1-based row and column."""

    def __init__(self) -> None:
        self.cells = [[EMPTY] * SIZE for _ in range(SIZE)]

    def place(self, row: int, col: int, mark: str) -> None:
        """Put ``mark`` at ``row``, ``col`` (both 1 to 3)."""
        if mark not in MARKS:
            raise ValueError(f"unknown mark {mark!r}")
        if not (1 <= row <= SIZE and 1 <= col <= SIZE):
            raise ValueError("Out of bounds! Choose 1, 2, or 3.")
        if self.cells[row - 1][col - 1] in MARKS:
            raise SpotTakenError("This spot is already filled, select an empty spot")
        self.cells[row - 1][col - 1] = mark

    def has_won(self, mark: str) -> bool:
        """Whether ``mark`` holds a full row, column or diagonal."""
        lines = [list(row) for row in self.cells]
        lines.extend(list(col) for col in zip(*self.cells))
        lines.append([self.cells[i][i] for i in range(SIZE)])
        lines.append([self.cells[i][SIZE - 1 - i] for i in range(SIZE)])
        return any(all(cell == mark for cell in line) for line in lines)

    @property
    def is_full(self) -> bool:
        return all(cell in MARKS for row in self.cells for cell in row)

    def render(self) -> str:
        return "".join(
            "".join(f"({cell}) " for cell in row) + "\n" for row in self.cells
        )


def random_starter(rng: random.Random | None = None) -> str:
    """Pick the starting mark with a fair coin flip."""
    rng = rng or random.Random()
    return "x" if rng.random() < 0.5 else "o"


def other_player(mark: str) -> str:
    """Return the mark of the player who moves after ``mark``."""
    try:
        return _OPPONENT[mark]
    except KeyError:
        raise ValueError(f"unknown mark {mark!r}") from None


def _default_read() -> str:
    return input()


def _default_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _read_move(board: Board, mark: str, read: Reader, write: Writer) -> None:
    write("Input your choice: (ex: 1 1 for top left): ")
    while True:
        parts = read().split()
        try:
            row, col = (int(p) for p in parts[:2])
            if len(parts) < 2:
                raise ValueError
        except ValueError:
            write("Invalid input! Please type a number: ")
            continue
        try:
            board.place(row, col, mark)
        except SpotTakenError:
            write("This spot is already filled, select an empty spot: ")
        except ValueError:
            write("Out of bounds! Choose 1, 2, or 3.: ")
        else:
            return


def play_game(
    read: Reader | None = None,
    write: Writer | None = None,
    starter: str | None = None,
) -> str | None:
    """Play one game; return the winning mark, or None for a draw."""
    read = read or _default_read
    write = write or _default_write
    board = Board()
    player = starter or random_starter()
    if player not in MARKS:
        raise ValueError(f"unknown mark {player!r}")

    while True:
        write(f"Its player {player}'s turn\n")
        write(board.render())
        _read_move(board, player, read, write)
        if board.has_won(player):
            write(board.render())
            write(f"Congratulationss!!, Player {player} won the game\n")
            return player
        player = other_player(player)
        if board.is_full:
            write(board.render())
            write("Its a Draw!!\n")
            return None


def main(argv: list[str] | None = None) -> int:
    """Run one game of tic-tac-toe on the console."""
    parser = argparse.ArgumentParser(description="Play tic-tac-toe.")
    parser.add_argument("--starter", choices=MARKS, default=None, help="who moves first")
    args = parser.parse_args(argv)
    _default_write(INTRO)
    try:
        play_game(starter=args.starter)
    except EOFError:
        pass
    return 0