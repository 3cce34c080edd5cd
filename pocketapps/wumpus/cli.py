"""Command-line entry point for Hunt the Wumpus."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence

from pocketapps.console import Console
from pocketapps.wumpus.game import Game

MIN_SIZE = 4
MAX_SIZE = 30


def _prompt_int(
    console: Console, prompt: str, error: str, valid: Callable[[int], bool]
) -> int:
    first = True
    while True:
        if not first:
            console.write(error)
        first = False
        console.write(prompt)
        try:
            value = console.read_int()
        except ValueError:
            continue
        if valid(value):
            return value


def get_width(console: Console) -> int:
    """Ask for the number of columns until one from 4 to 30 is given."""
    return _prompt_int(
        console,
        "Enter the game board width between 4 and 30: ",
        "\nInvalid width!\n\n",
        lambda n: MIN_SIZE <= n <= MAX_SIZE,
    )


def get_height(console: Console) -> int:
    """Ask for the number of rows until one from 4 to 30 is given."""
    return _prompt_int(
        console,
        "Enter the game board height between 4 and 30: ",
        "\nInvalid height!\n\n",
        lambda n: MIN_SIZE <= n <= MAX_SIZE,
    )


def get_debug(console: Console) -> bool:
    """Ask whether to play in debug mode until 0 or 1 is given."""
    answer = _prompt_int(
        console,
        "Would you like to play in debug mode? (1-yes, 0-no): ",
        "\nInvalid input!\n\n",
        lambda n: n in (0, 1),
    )
    return answer == 1


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for the board size and mode, then play one game."""
    parser = argparse.ArgumentParser(prog="wumpus", description="Hunt the Wumpus.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random cave")
    args = parser.parse_args(argv)
    console = Console()
    try:
        width = get_width(console)
        height = get_height(console)
        debug = get_debug(console)
        game = Game(width, height, debug, random.Random(args.seed))
        game.play(console)
    except EOFError:
        return 0
    return 0