# pocketapps

Four small interactive programs that run in the terminal. They need only the
Python standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Programs

### Number guesser

```
pocket-guesser [--seed N]
```

The game picks a number between 1 and 100 at random. You type guesses until you
find it. After each guess it tells you to guess higher or lower. Input that is
not a number is rejected and does not count as a guess. When you find the
number, the game shows how many attempts you took and lists your guesses. It then
asks whether to play again; answer `y` or `Y` to start a new round. `--seed`
makes the hidden numbers repeatable.

### Tic-tac-toe

```
pocket-tictactoe [--starter {x,o}]
```

A two-player game on a 3x3 board. A coin flip picks whether `x` or `o` moves
first, unless `--starter` sets it. Enter a move as a row and a column, each from
1 to 3. For example, `1 1` is the top-left square and `1 2` is the top-middle
square. The game asks again if the input is not two numbers, is out of range, or
names a square that is already filled. A player wins with three in a row, column
or diagonal. The game is a draw when the board is full.

### To-do list

```
pocket-todo [--file PATH]
```

A menu-driven task list:

1. Display List
2. Add Item
3. Remove Item
4. Edit Item (toggles an item between done `[x]` and not done `[o]`)
5. Exit

At startup the list is read from `PATH`, which defaults to `output.txt` in the
current directory. If the file does not exist, the program starts with an empty
list. The list is written back to the file when you choose Exit. If input ends
early (end of file), the program quits without saving.

The saved format has one task per line: `1` or `0` for done or not done, a
space, then the description.

### Student roster

```
pocket-students
```

The main menu offers Students, Subjects and Exit Program.

The Students menu shows the current list. From it you can:

- show one student's details by ID
- change a student's name
- delete a student by ID

Student IDs are entered as numbers from 1 to 10000.

Subjects lists the subjects held by the students in the roster.

## Use as a library

Each program is also a module whose pieces can be used on their own.

- `pocketapps.guesser`: `check_guess(guess, target)` returns a `GuessResult`
  (`TOO_LOW`, `TOO_HIGH` or `CORRECT`, each with a `message`).
  `play_round(target, read, write)` plays one round and returns the list of
  guesses.
- `pocketapps.tictactoe`: `Board` provides `place(row, col, mark)`,
  `has_won(mark)`, `is_full` and `render()`. `place` raises `SpotTakenError` for
  a filled square and `ValueError` for a bad position or mark. There are also
  `random_starter(rng)`, `other_player(mark)`, and `play_game(read, write,
  starter)`, which returns the winning mark or `None` for a draw.
- `pocketapps.todolist`: `Task` and `TaskList` provide `add`, `remove`,
  `toggle`, `render`, `dumps`/`loads` and `save`/`load`. Tasks are numbered
  from 1. `run(tasks, read, write)` drives the menu.
- `pocketapps.students`: `Subject`, `Student` (with `add_subject`) and
  `StudentManager` provide `add_student`, `find_student`, `delete_student`,
  `render` and `students_menu`.
- `pocketapps.prompts`: `parse_choice(text, size)`, `read_number(size, read,
  write)`, `clear_screen(write)` and `main_menu(write)`.

The interactive functions take a `read` callable that returns one line of input
and a `write` callable that receives output text. By default they use the
console.

```python
from pocketapps.tictactoe import Board

board = Board()
board.place(1, 1, "x")
board.place(2, 2, "x")
board.place(3, 3, "x")
assert board.has_won("x")
print(board.render())
```

```python
from pocketapps.todolist import TaskList

tasks = TaskList()
tasks.add("buy milk")
tasks.toggle(1)
print(tasks.render())
tasks.save("output.txt")
```

```python
from pocketapps.students import Student, StudentManager, Subject

manager = StudentManager()
student = Student("Ada", 1)
student.add_subject(Subject("Maths", "Algebra and geometry"))
manager.add_student(student)
print(manager.render())
```

## What it does not do

- The student roster has no console command for adding students or subjects.
  `pocket-students` starts with an empty roster; to fill one, use
  `StudentManager.add_student` and `Student.add_subject` from Python.
- The roster is kept in memory only and is not saved to or loaded from a file.
- There is no music player or other graphical program. Everything here runs in
  a text terminal.