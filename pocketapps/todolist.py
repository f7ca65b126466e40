"""A to-do list kept in a plain text file between sessions."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator

Reader = Callable[[], str]
Writer = Callable[[str], object]

DEFAULT_FILE = "output.txt"

EMPTY_MESSAGE = "The List is Empty. Add an Item\n"

MENU = (
    "1. Display List\n"
    "2. Add Item\n"
    "3. Remove Item\n"
    "4. Edit Item\n"
    "5. Exit\n"
    "Input choice: "
)

_LINE = re.compile(r"\s*([+-]?\d+)(.*)")


@dataclass
class Task:
    """One entry of the list."""

    description: str
    done: bool = False


@dataclass
class TaskList:
    """An ordered list of tasks, numbered from 1."""

    tasks: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __getitem__(self, number: int) -> Task:
        return self.tasks[self._index(number)]

    def _index(self, number: int) -> int:
        if not 1 <= number <= len(self.tasks):
            raise IndexError(f"no task number {number}")
        return number - 1

    def add(self, description: str) -> Task:
        """Append a new, unfinished task."""
        task = Task(description)
        self.tasks.append(task)
        return task

    def remove(self, number: int) -> Task:
        """Remove and return the task with the given 1-based number."""
        return self.tasks.pop(self._index(number))

    def toggle(self, number: int) -> bool:
        """Flip the done mark of a task; return its new state."""
        task = self.tasks[self._index(number)]
        task.done = not task.done
        return task.done

    def render(self) -> str:
        """The list as shown on the console."""
        if not self.tasks:
            return EMPTY_MESSAGE
        lines = "".join(
            f"{number} {'[x]' if task.done else '[o]'} {task.description}\n"
            for number, task in enumerate(self.tasks, start=1)
        )
        return "\n\n Your List \n" + lines + "\n\n"

    def dumps(self) -> str:
        """Serialise to the saved-file format."""
        body = "".join(
            f"{1 if task.done else 0} {task.description}\n" for task in self.tasks
        )
        return body + "\n"

    @classmethod
    def loads(cls, text: str) -> TaskList:
        """Parse the saved-file format.

        Blank lines are skipped; reading stops at the first line that does
        not start with a number.
        """
        tasks: list[Task] = []
        for line in text.splitlines():
            if not line.strip():
                continue
            match = _LINE.match(line)
            if match is None:
                break
            flag, rest = match.groups()
            tasks.append(Task(rest[1:], int(flag) == 1))
        return cls(tasks)

    @classmethod
    def load(cls, path: str | Path) -> TaskList:
        """Read a saved list; raises FileNotFoundError if there is none."""
        return cls.loads(Path(path).read_text(encoding="utf-8"))

    def save(self, path: str | Path) -> None:
        """Write the list to ``path``."""
        Path(path).write_text(self.dumps(), encoding="utf-8")


def _default_read() -> str:
    return input()


def _default_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _read_number(size: int, read: Reader, write: Writer) -> int:
    while True:
        try:
            number = int(read().strip())
        except ValueError:
            write("Please enter a valid number: ")
            continue
        if not 1 <= number <= size:
            write(f"Please enter a number between 1 and {size}: ")
            continue
        return number


def run(
    tasks: TaskList,
    read: Reader | None = None,
    write: Writer | None = None,
) -> TaskList:
    """Drive the menu until the user picks Exit; return the list."""
    read = read or _default_read
    write = write or _default_write
    while True:
        write(MENU)
        choice = _read_number(5, read, write)
        if choice == 1:
            write(tasks.render())
        elif choice == 2:
            write("Add an Item - write the description: \n")
            tasks.add(read())
        elif choice in (3, 4):
            if not tasks:
                write(EMPTY_MESSAGE)
                continue
            write(tasks.render())
            if choice == 3:
                write("Input the number of the item you want to remove: \n")
                tasks.remove(_read_number(len(tasks), read, write))
                write("The item is succesfully removed!\n")
            else:
                write("Input the number of the item you want to change mark: \n")
                tasks.toggle(_read_number(len(tasks), read, write))
                write("The item is succesfully changed mark!\n")
        else:
            return tasks


def main(argv: list[str] | None = None) -> int:
    """Run the to-do list on the console, saving on exit."""
    parser = argparse.ArgumentParser(description="A simple to-do list.")
    parser.add_argument("--file", default=DEFAULT_FILE, help="where the list is kept")
    args = parser.parse_args(argv)

    try:
        tasks = TaskList.load(args.file)
    except FileNotFoundError:
        tasks = TaskList()
        _default_write("There is no saved file. Create a fresh list!")
    else:
        _default_write("File is succesfully loaded\n")

    _default_write("Welcome!! This is a To do list Application\n")
    try:
        run(tasks)
    except EOFError:
        return 0
    tasks.save(args.file)
    return 0