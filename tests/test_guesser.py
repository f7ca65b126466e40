import io

import pytest

from pocketapps.guesser import GuessResult, check_guess, main, play_round


def scripted(lines):
    it = iter(lines)
    return lambda: next(it)


@pytest.mark.parametrize(
    "guess, target, message",
    [
        (10, 50, "Guess higher!"),
        (90, 50, "Too high! Guess Lower! lmao"),
        (50, 50, "Congratulations, this game is done!"),
    ],
)
def test_check_guess_messages(guess, target, message):
    assert check_guess(guess, target).message == message


def test_check_guess_correct_is_correct_member():
    assert check_guess(7, 7) is GuessResult.CORRECT


def test_play_round_records_valid_guesses():
    out = []
    guesses = play_round(42, scripted(["abc", "10", "90", "42"]), out.append)
    assert guesses == [10, 90, 42]
    text = "".join(out)
    assert "Invalid input." in text
    assert "Guess higher!\n" in text
    assert "Too high! Guess Lower! lmao\n" in text
    assert "You took 3 attempts to guess the number.\n" in text


def test_play_round_ends_on_target():
    guesses = play_round(5, scripted(["1", "2", "5", "9"]), lambda _: None)
    assert guesses[-1] == 5
    assert all(g != 5 for g in guesses[:-1])


def test_play_round_accepts_numbers_outside_range():
    guesses = play_round(1, scripted(["500", "1"]), lambda _: None)
    assert guesses == [500, 1]


def test_main_plays_until_correct(monkeypatch, capsys):
    lines = "\n".join(str(n) for n in range(1, 101)) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(lines))
    assert main(["--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Welcome to the Random Number Guesser!" in out
    assert "Congratulations, this game is done!" in out