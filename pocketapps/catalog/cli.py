"""Interactive front end for querying the basketball team catalog."""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable, Sequence

from pocketapps.catalog.catalog import (
    Team,
    find_team,
    format_float,
    load_teams,
    players_by_nationality,
    team_info,
    teams_by_ppg,
    top_scorers,
)
from pocketapps.console import Console

SEARCH_BY_NAME = 1
TOP_SCORERS = 2
SEARCH_BY_NATIONALITY = 3
SORT_BY_PPG = 4
QUIT = 5

PRINT_TO_SCREEN = 1
PRINT_TO_FILE = 2

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _parse_int(text: str) -> int:
    """Parse the integer a line starts with, ignoring whatever follows it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _prompt_choice(console: Console, valid: Callable[[int], bool], error: str) -> int:
    while True:
        console.write("Your choice: ")
        try:
            selection = _parse_int(console.read_line())
        except ValueError:
            console.write(error + "\n")
            continue
        if valid(selection):
            console.write("\n")
            return selection
        console.write(error + "\n")


def get_input_filename(console: Console) -> str:
    """Ask for the name of the team file."""
    console.write("Enter the team info filename: ")
    filename = console.read_line()
    console.write("\n")
    return filename


def get_search_selection(console: Console) -> int:
    """Show the search options and return the one chosen, from 1 to 5."""
    console.write(
        "Which option would you like to choose?\n"
        "1. Search teams by name\n"
        "2. Display the top scorer of each team\n"
        "3. Search players by nationality\n"
        "4. Sort teams by total points per game\n"
        "5. Quit\n"
    )
    return _prompt_choice(
        console,
        lambda n: SEARCH_BY_NAME <= n <= QUIT,
        "Input must be an integer between 1 and 5, inclusive.",
    )


def get_output_selection(console: Console) -> int:
    """Ask whether results go to the screen (1) or to a file (2)."""
    console.write(
        "How would you like the information displayed?\n"
        "1. Print to screen\n"
        "2. Print to file\n"
    )
    return _prompt_choice(
        console,
        lambda n: n in (PRINT_TO_SCREEN, PRINT_TO_FILE),
        "Input must be either 1 or 2.",
    )


def search_by_team_name(teams: Sequence[Team], console: Console) -> str:
    """Prompt for a team name until one matches and describe that team."""
    while True:
        console.write("Enter the team's name: ")
        team = find_team(teams, console.read_line())
        if team is not None:
            return team_info(team)
        console.write("Invalid team name.\n")


def search_by_nationality(teams: Sequence[Team], console: Console) -> str:
    """Prompt for a nationality until some player has it and list those players."""
    while True:
        console.write("Enter the player's nationality: ")
        output = players_by_nationality(teams, console.read_line())
        if output:
            return output
        console.write("Matching nationality not found.\n")


def display_teams_by_ppg(teams: list[Team], console: Console) -> str:
    """Reorder teams by descending total points per game and list them.

    Each total is also echoed to the console as the list is built.
    """
    teams[:] = teams_by_ppg(teams)
    lines = []
    for team in teams:
        total = format_float(team.total_ppg)
        console.write(total + "\n")
        lines.append(f"{team.name} {total}\n")
    return "".join(lines)


def _run_search(selection: int, teams: list[Team], console: Console) -> str:
    if selection == SEARCH_BY_NAME:
        return search_by_team_name(teams, console)
    if selection == TOP_SCORERS:
        return top_scorers(teams)
    if selection == SEARCH_BY_NATIONALITY:
        return search_by_nationality(teams, console)
    return display_teams_by_ppg(teams, console)


def main(argv: Sequence[str] | None = None) -> int:
    """Load a team file and answer queries until the user quits."""
    argparse.ArgumentParser(
        prog="hooping-catalog", description="Query basketball team statistics."
    ).parse_args(argv)
    console = Console()
    try:
        filename = get_input_filename(console)
        try:
            teams = load_teams(filename)
        except OSError:
            console.write("File could not be opened. Goodbye.\n")
            return 0
        except ValueError as error:
            console.write(f"The team file is malformed: {error}\n")
            return 1

        while True:
            selection = get_search_selection(console)
            if selection == QUIT:
                return 0
            destination = get_output_selection(console)
            output_filename = None
            if destination == PRINT_TO_FILE:
                console.write("Please provide desired filename: ")
                output_filename = console.read_line()

            output = _run_search(selection, teams, console)

            if output_filename is None:
                console.write(f"\n{output}\n")
                continue
            try:
                with open(output_filename, "a") as handle:
                    handle.write(output)
            except OSError:
                console.write(f"\nCould not write to {output_filename}.\n\n")
            else:
                console.write("\nAppended requested information to file.\n\n")
    except EOFError:
        return 0