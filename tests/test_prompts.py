import pytest

from heat_load_calculator.prompts import format_bound, parse_float, parse_int, parse_yes_no


@pytest.mark.parametrize(
    "text, expected",
    [("0", 0), ("3", 3), (" 2 ", 2), ("4", None), ("-1", None), ("1.5", None), ("", None), ("abc", None)],
)
def test_parse_int(text, expected):
    assert parse_int(text, 0, 3) == expected


@pytest.mark.parametrize("text", ["1_0", "\u0661\u0660", "\uff11\uff10"])
def test_parse_int_rejects_separators_and_non_ascii_digits(text):
    assert int(text) == 10
    assert parse_int(text, 0, 100) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("20", 20.0),
        ("-200", -200.0),
        ("200.0", 200.0),
        ("1e2", 100.0),
        ("200.1", None),
        ("-201", None),
        ("nan", None),
        ("inf", None),
        ("-inf", None),
        ("", None),
        ("twenty", None),
        ("1_0", None),
        ("\u0661\u0662", None),
    ],
)
def test_parse_float(text, expected):
    assert parse_float(text, -200.0, 200.0) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("y", True),
        ("Y", True),
        ("n", False),
        ("N", False),
        ("yes", None),
        ("", None),
        ("x", None),
        (" y ", None),
        ("n ", None),
    ],
)
def test_parse_yes_no(text, expected):
    assert parse_yes_no(text) is expected


def test_format_bound():
    assert format_bound(0.0) == "0"
    assert format_bound(-200.0) == "-200"
    assert format_bound(1e9) == "1e+09"


def test_read_int_reprompts_until_valid(make_console):
    console, output = make_console(["9", "x", "2"])
    assert console.read_int("Select: ", 0, 3) == 2
    assert output == ["  [Error] Enter an integer from 0 to 3."] * 2


def test_read_float_reprompts_until_valid(make_console):
    console, output = make_console(["0", "-5", "0.5"])
    assert console.read_float("R-value: ", 0.000001, 1e12) == 0.5
    assert output == ["  [Error] Enter a number from 1e-06 to 1e+12."] * 2


def test_read_line_allows_empty(make_console):
    console, _ = make_console([""])
    assert console.read_line("Name: ") == ""


def test_yes_no_reprompts(make_console):
    console, output = make_console(["maybe", "N"])
    assert console.yes_no("Clear all items?") is False
    assert output == ["  [Error] Please type y or n."]


def test_pause_consumes_a_line_only_when_enabled(make_console):
    console, _ = make_console(["", "5"], pause_enabled=True)
    console.pause()
    assert console.read_int("Select: ", 0, 9) == 5

    console, _ = make_console(["5"], pause_enabled=False)
    console.pause()
    assert console.read_int("Select: ", 0, 9) == 5


def test_exhausted_input_raises_eof(make_console):
    console, _ = make_console([])
    with pytest.raises(EOFError):
        console.read_float("CFM: ", 0.0, 1e9)
