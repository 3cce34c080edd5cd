"""Three-point shooting contest simulation."""

from __future__ import annotations

import argparse
import random
import re
from collections.abc import Sequence

from pocketapps.console import Console

SHOTS_PER_GAME = 27
RACKS = 5
BALLS_PER_RACK = 5

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


def _parse_int(text: str) -> int:
    """Parse a leading integer as the standard string-to-int conversion does."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _prompt_int(console: Console, prompt: str, error: str, valid) -> int:
    while True:
        console.write(prompt)
        token = console.read_token()
        console.write("\n")
        try:
            value = _parse_int(token)
        except ValueError:
            console.write(error + "\n")
            continue
        if valid(value):
            return value
        console.write(error + "\n")


def prompt_players(console: Console) -> int:
    """Ask for the number of players until a positive integer is given."""
    return _prompt_int(
        console,
        "Enter number of players: ",
        "Input must be a positive integer.",
        lambda n: n >= 1,
    )


def prompt_moneyball(console: Console) -> int:
    """Ask for the money-ball rack until a number from 1 to 5 is given."""
    return _prompt_int(
        console,
        "Where do you want to put your money-ball rack? Enter 1-5: ",
        "Input must be an integer 1-5, inclusive.",
        lambda n: 1 <= n <= 5,
    )


def prompt_play_again(console: Console) -> bool:
    """Ask whether to play again until 0 or 1 is given."""
    answer = _prompt_int(
        console,
        "Do you want to play again? (1-yes, 0-no): ",
        "Input must be 0 or 1.",
        lambda n: n in (0, 1),
    )
    return answer == 1


def generate_shots(moneyball_position: int, rng: random.Random) -> list[int]:
    """Return the 27 shot values: 0 for a miss, else the points the ball was worth.

    The first 25 are the racks in order, the last two are the starry balls.
    """
    shots = []
    for i in range(SHOTS_PER_GAME):
        if rng.randrange(2) != 1:
            shots.append(0)
        elif i >= RACKS * BALLS_PER_RACK:
            shots.append(3)
        elif i // BALLS_PER_RACK == moneyball_position - 1 or i % BALLS_PER_RACK == 4:
            shots.append(2)
        else:
            shots.append(1)
    return shots


def _rack(shots: Sequence[int], rack: int) -> Sequence[int]:
    start = rack * BALLS_PER_RACK
    return shots[start:start + BALLS_PER_RACK]


def total_score(shots: Sequence[int]) -> int:
    """Return a player's total: every rack plus each starry ball that went in."""
    racks = sum(sum(_rack(shots, rack)) for rack in range(RACKS))
    starry = sum(3 for shot in shots[RACKS * BALLS_PER_RACK:SHOTS_PER_GAME] if shot == 3)
    return racks + starry


_SYMBOLS = {1: "O", 2: "M", 3: "S"}


def render_shots(shots: Sequence[int]) -> str:
    """Return the rack-by-rack picture of a player's shots with the total."""
    lines = []
    for rack in range(RACKS):
        balls = _rack(shots, rack)
        marks = "".join(_SYMBOLS.get(shot, "_") + " " for shot in balls)
        lines.append(f"Rack {rack + 1}: {marks}| {sum(balls)} pts\n")
        if rack in (1, 2):
            if shots[24 + rack] == 3:
                lines.append("Starry: S         | 3 pts\n")
            else:
                lines.append("Starry: _         | 0 pts\n")
    lines.append(f"\nTotal: {total_score(shots)} pts\n\n")
    return "".join(lines)


def winner_message(scores: Sequence[int]) -> str:
    """Announce the winner, or a tie when the best score was reached more than once."""
    if not scores:
        raise ValueError("at least one score is required")
    maximum = -1
    winner = -1
    tie = False
    for number, score in enumerate(scores, start=1):
        if score > maximum:
            maximum, winner, tie = score, number, False
        elif score == maximum:
            tie = True
    if tie:
        return f"There was a tie at {maximum} points."
    return f"Player {winner} is the winner with {maximum} points!!"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the contest interactively until the players stop."""
    argparse.ArgumentParser(
        prog="shootout", description="Three-point shooting contest."
    ).parse_args(argv)
    console = Console()
    rng = random.Random()
    try:
        while True:
            console.write("Welcome to the basketball shooting contest!\n\n")
            num_players = prompt_players(console)
            scores = []
            for number in range(1, num_players + 1):
                console.write(f"Player {number}:\n")
                position = prompt_moneyball(console)
                shots = generate_shots(position, rng)
                console.write(render_shots(shots))
                scores.append(total_score(shots))
            console.write(winner_message(scores) + "\n\n")
            if not prompt_play_again(console):
                return 0
    except EOFError:
        return 0