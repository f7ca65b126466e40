"""Small terminal programs: a number guesser, tic-tac-toe, a to-do list and a student roster."""

__version__ = "0.1.0"