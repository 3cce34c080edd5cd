import io
import sys

import pytest

from pocketapps.catalog.catalog import (
    load_teams,
    parse_teams,
    players_by_nationality,
    team_info,
    top_scorers,
)
from pocketapps.catalog.cli import (
    display_teams_by_ppg,
    get_input_filename,
    get_output_selection,
    get_search_selection,
    main,
    search_by_nationality,
    search_by_team_name,
)
from pocketapps.console import Console

TEAM_DATA = (
    "2\n"
    "Lakers Buss 5000 2\n"
    "James 39 USA 25.5 0.5\n"
    "Davis 31 USA 24.0 0.55\n"
    "Nuggets Kroenke 4000 1\n"
    "Jokic 29 Serbia 26.4 0.58\n"
)


def make_console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


@pytest.fixture
def teams():
    return parse_teams(TEAM_DATA)


def test_get_input_filename_reads_whole_line():
    console, out = make_console("my teams.txt\n")
    assert get_input_filename(console) == "my teams.txt"
    assert "Enter the team info filename: " in out.getvalue()


def test_search_selection_reprompts_on_bad_input():
    console, out = make_console("abc\n7\n3\n")
    assert get_search_selection(console) == 3
    assert out.getvalue().count("Input must be an integer between 1 and 5, inclusive.") == 2


def test_search_selection_accepts_leading_integer():
    console, _ = make_console("4abc\n")
    assert get_search_selection(console) == 4


def test_output_selection_reprompts():
    console, out = make_console("0\nx\n2\n")
    assert get_output_selection(console) == 2
    assert out.getvalue().count("Input must be either 1 or 2.") == 2


def test_search_by_team_name_loops_until_found(teams):
    console, out = make_console("Nobody\nNuggets\n")
    assert search_by_team_name(teams, console) == team_info(teams[1])
    assert "Invalid team name." in out.getvalue()


def test_search_by_nationality_loops_until_found(teams):
    console, out = make_console("Canada\nUSA\n")
    result = search_by_nationality(teams, console)
    assert result == players_by_nationality(teams, "USA")
    assert "Matching nationality not found." in out.getvalue()


def test_display_teams_by_ppg_sorts_in_place(teams):
    console, out = make_console("")
    result = display_teams_by_ppg(teams, console)
    totals = [team.total_ppg for team in teams]
    assert totals == sorted(totals, reverse=True)
    assert result.splitlines()[0].startswith(teams[0].name + " ")
    assert len(out.getvalue().splitlines()) == len(teams)


def test_prompt_raises_eof_when_input_ends():
    console, _ = make_console("9\n")
    with pytest.raises(EOFError):
        get_search_selection(console)


def run_main(monkeypatch, text):
    out = io.StringIO()
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    monkeypatch.setattr(sys, "stdout", out)
    code = main([])
    return code, out.getvalue()


def test_main_missing_file(monkeypatch, tmp_path):
    code, output = run_main(monkeypatch, f"{tmp_path / 'absent.txt'}\n")
    assert code == 0
    assert "File could not be opened. Goodbye." in output


def test_main_prints_top_scorers(monkeypatch, tmp_path):
    path = tmp_path / "teams.txt"
    path.write_text(TEAM_DATA)
    code, output = run_main(monkeypatch, f"{path}\n2\n1\n5\n")
    assert code == 0
    assert top_scorers(load_teams(path)) in output


def test_main_appends_to_file(monkeypatch, tmp_path):
    path = tmp_path / "teams.txt"
    path.write_text(TEAM_DATA)
    target = tmp_path / "out.txt"
    target.write_text("previous\n")
    code, output = run_main(monkeypatch, f"{path}\n3\n2\n{target}\nSerbia\n5\n")
    assert code == 0
    assert "Appended requested information to file." in output
    expected = players_by_nationality(load_teams(path), "Serbia")
    assert target.read_text() == "previous\n" + expected