import pytest

from pocketapps.prompts import clear_screen, main_menu, parse_choice, read_number


def scripted(lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_parse_choice_accepts_value_in_range():
    assert parse_choice(" 3 ", 4) == 3


@pytest.mark.parametrize("text", ["1", "4"])
def test_parse_choice_accepts_bounds(text):
    assert parse_choice(text, 4) == int(text)


@pytest.mark.parametrize("text", ["0", "5", "-2"])
def test_parse_choice_rejects_out_of_range(text):
    with pytest.raises(ValueError, match="Please input a number between 1 and 4"):
        parse_choice(text, 4)


def test_parse_choice_rejects_text():
    with pytest.raises(ValueError, match="Please input a valid number"):
        parse_choice("abc", 4)


def test_read_number_retries_until_valid():
    out = []
    result = read_number(4, scripted(["x", "9", "2"]), out.append)
    assert result == 2
    text = "".join(out)
    assert "Please input a valid number\n" in text
    assert "Please input a number between 1 and 4\n" in text


def test_read_number_propagates_end_of_input():
    with pytest.raises(EOFError):
        read_number(4, scripted(["nope"]), lambda _: None)


def test_clear_screen_writes_escape_sequence():
    out = []
    clear_screen(out.append)
    assert out == ["\033[2J\033[1;1H"]


def test_main_menu_lists_options():
    out = []
    main_menu(out.append)
    text = "".join(out)
    assert text.startswith("Main Menu\n")
    assert "1. Students\n" in text
    assert "3. Exit Program\n" in text
    assert text.endswith("Choose a number: ")