"""Basketball teams and players read from a text file, with queries over them."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path


def _f32(value: float) -> float:
    """Round a value to single precision, the precision statistics are kept in."""
    return struct.unpack("f", struct.pack("f", value))[0]


def format_float(value: float) -> str:
    """Format a single-precision statistic with six decimal places."""
    return f"{_f32(value):f}"


@dataclass(frozen=True)
class Player:
    """A player's name, age, nationality, points per game and field-goal rate."""

    name: str
    age: int
    nation: str
    ppg: float
    fg: float


@dataclass
class Team:
    """A team, its owner, market value and roster."""

    name: str
    owner: str
    market_value: int
    players: list[Player] = field(default_factory=list)

    @property
    def num_player(self) -> int:
        return len(self.players)

    @property
    def total_ppg(self) -> float:
        """Sum of the roster's points per game, in single precision."""
        total = 0.0
        for player in self.players:
            total = _f32(total + _f32(player.ppg))
        return total


def _fields(tokens: Iterator[str]):
    def take() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise ValueError("team data is truncated") from None
    return take


def parse_teams(text: str) -> list[Team]:
    """Parse a team count followed by each team and its players."""
    take = _fields(iter(text.split()))
    count = int(take())
    if count < 0:
        raise ValueError(f"negative team count: {count}")
    teams = []
    for _ in range(count):
        name, owner, market_value, num_player = take(), take(), int(take()), int(take())
        if num_player < 0:
            raise ValueError(f"negative player count for team {name}")
        players = [
            Player(take(), int(take()), take(), float(take()), float(take()))
            for _ in range(num_player)
        ]
        teams.append(Team(name, owner, market_value, players))
    return teams


def load_teams(path: str | PathLike[str]) -> list[Team]:
    """Read and parse a team file; raises OSError if it cannot be opened."""
    return parse_teams(Path(path).read_text())


def team_info(team: Team) -> str:
    """Describe a team on one line and each of its players on a line of their own."""
    lines = [f"{team.name} {team.owner} {team.market_value} {team.num_player}\n"]
    lines.extend(
        f"{p.name} {p.age} {p.nation} {format_float(p.ppg)} {format_float(p.fg)}\n"
        for p in team.players
    )
    return "".join(lines)


def find_team(teams: Iterable[Team], name: str) -> Team | None:
    """Return the team with that name (the last one if several share it), or None."""
    found = None
    for team in teams:
        if team.name == name:
            found = team
    return found


def top_scorers(teams: Iterable[Team]) -> str:
    """One line per team naming its highest scorer; the earliest wins a tie."""
    lines = []
    for team in teams:
        if not team.players:
            continue
        top = max(team.players, key=lambda p: _f32(p.ppg))
        lines.append(f"{team.name}: {top.name} {format_float(top.ppg)}\n")
    return "".join(lines)


def players_by_nationality(teams: Iterable[Team], nation: str) -> str:
    """Name and age of every player of that nationality; empty if there are none."""
    return "".join(
        f"{p.name} {p.age}\n"
        for team in teams
        for p in team.players
        if p.nation == nation
    )


def teams_by_ppg(teams: Sequence[Team]) -> list[Team]:
    """Return the teams in descending order of total points per game.

    Teams with equal totals come out in the order the exchange sort leaves
    them, which is not necessarily their original order.
    """
    ordered = list(teams)
    totals = [team.total_ppg for team in ordered]
    for i in range(len(ordered) - 1):
        for j in range(i, len(ordered)):
            if totals[j] > totals[i]:
                ordered[i], ordered[j] = ordered[j], ordered[i]
                totals[i], totals[j] = totals[j], totals[i]
    return ordered