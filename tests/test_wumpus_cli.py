import io

from pocketapps.console import Console
from pocketapps.wumpus.cli import get_debug, get_height, get_width, main


def console_with(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_get_width_reprompts_until_in_range():
    console, out = console_with("3\n31\nabc\n10\n")
    assert get_width(console) == 10
    assert out.getvalue().count("Invalid width!") == 3


def test_get_width_accepts_bounds():
    console, _ = console_with("4\n")
    assert get_width(console) == 4
    console, _ = console_with("30\n")
    assert get_width(console) == 30


def test_get_height_reprompts():
    console, out = console_with("0\n30\n")
    assert get_height(console) == 30
    assert out.getvalue().count("Invalid height!") == 1
    assert "Enter the game board height between 4 and 30: " in out.getvalue()


def test_get_debug():
    console, out = console_with("2\n1\n")
    assert get_debug(console) is True
    assert out.getvalue().count("Invalid input!") == 1
    console, _ = console_with("0\n")
    assert get_debug(console) is False


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n5\n40\n5\n1\n"))
    assert main(["--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert out.count("Invalid width!") == 1
    assert out.count("Invalid height!") == 1
    assert "Arrows remaining: 0" in out
    assert "What would you like to do?" in out


def test_main_with_no_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "Enter the game board width between 4 and 30: " in capsys.readouterr().out