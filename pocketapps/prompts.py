"""Console prompts shared by the interactive menus."""

from __future__ import annotations

import sys
from typing import Callable

Reader = Callable[[], str]
Writer = Callable[[str], object]

CLEAR_SCREEN = "\033[2J\033[1;1H"

MAIN_MENU = (
    "Main Menu\n"
    "1. Students\n"
    "2. Subjects\n"
    "3. Exit Program\n"
    "Choose a number: "
)


def _default_read() -> str:
    return input()


def _default_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def parse_choice(text: str, size: int) -> int:
    """Parse a menu choice between 1 and ``size``.

    Raises ValueError carrying the message to show the user.
    """
    try:
        number = int(text.strip())
    except ValueError:
        raise ValueError("Please input a valid number") from None
    if not 1 <= number <= size:
        raise ValueError(f"Please input a number between 1 and {size}")
    return number


def read_number(
    size: int,
    read: Reader | None = None,
    write: Writer | None = None,
) -> int:
    """Keep asking until the user enters a number between 1 and ``size``."""
    read = read or _default_read
    write = write or _default_write
    while True:
        try:
            return parse_choice(read(), size)
        except ValueError as exc:
            write(f"{exc}\n")


def clear_screen(write: Writer | None = None) -> None:
    """Clear the terminal and move the cursor home."""
    (write or _default_write)(CLEAR_SCREEN)


def main_menu(write: Writer | None = None) -> None:
    """Show the main menu of the student manager."""
    (write or _default_write)(MAIN_MENU)