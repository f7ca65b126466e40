"""Guess a random number between 1 and 100."""

from __future__ import annotations

import argparse
import random
import sys
from enum import Enum
from typing import Callable

Reader = Callable[[], str]
Writer = Callable[[str], object]

LOWEST = 1
HIGHEST = 100

WELCOME = (
    "Welcome to the Random Number Guesser!\n"
    f"The game is about guessing a number between {LOWEST} and {HIGHEST}. "
    "Can you guess it?\n"
    "Let's begin!\n\n\n"
)


class GuessResult(Enum):
    """Outcome of comparing a guess with the hidden number."""

    TOO_LOW = "Guess higher!"
    TOO_HIGH = "Too high! Guess Lower! lmao"
    CORRECT = "Congratulations, this game is done!"

    @property
    def message(self) -> str:
        return self.value


def check_guess(guess: int, target: int) -> GuessResult:
    """Compare ``guess`` with ``target``."""
    if guess < target:
        return GuessResult.TOO_LOW
    if guess > target:
        return GuessResult.TOO_HIGH
    return GuessResult.CORRECT


def _default_read() -> str:
    return input()


def _default_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def play_round(
    target: int,
    read: Reader | None = None,
    write: Writer | None = None,
) -> list[int]:
    """Play one round until ``target`` is guessed; return the guesses made."""
    read = read or _default_read
    write = write or _default_write
    guesses: list[int] = []
    while True:
        write("Enter your guess: ")
        try:
            guess = int(read().strip())
        except ValueError:
            write(f"Invalid input. Please enter a number between {LOWEST} and {HIGHEST}.\n")
            continue
        guesses.append(guess)
        result = check_guess(guess, target)
        write(result.message + "\n")
        if result is GuessResult.CORRECT:
            break
    write(f"You took {len(guesses)} attempts to guess the number.\n")
    write(" ".join(str(g) for g in guesses) + "\n")
    return guesses


def main(argv: list[str] | None = None) -> int:
    """Run the guessing game on the console."""
    parser = argparse.ArgumentParser(description="Guess a number between 1 and 100.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random number")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    try:
        while True:
            _default_write(WELCOME)
            play_round(rng.randint(LOWEST, HIGHEST))
            _default_write("Do you want to play again? (y/n): ")
            answer = _default_read().strip()[:1]
            if answer not in ("y", "Y"):
                _default_write("Thank you for playing! Goodbye!\n")
                return 0
    except EOFError:
        return 0