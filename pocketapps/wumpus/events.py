"""Things that can be found in a cave room and what they do to the player."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Sequence

from pocketapps.wumpus.moveable import Moveable
from pocketapps.wumpus.player import Player


class Event(ABC):
    """Something in a room, with a percept noticed from next door and a map letter."""

    def __init__(self, percept: str, letter: str) -> None:
        self.percept = percept
        self.letter = letter

    @abstractmethod
    def encounter(self, player: Player) -> bool:
        """Act on the player entering the room; return True if the event is used up."""


class Arrow(Event):
    """An arrow lying on the ground."""

    def __init__(self) -> None:
        super().__init__("You see an arrow on the ground in an adjacent room.\n", "A")

    def encounter(self, player: Player) -> bool:
        player.give_arrow()
        return True


class Bats(Event):
    """Bats that leave the player dazed."""

    def __init__(self) -> None:
        super().__init__("You hear wings flapping.\n", "B")

    def encounter(self, player: Player) -> bool:
        player.daze()
        return False


class EscapeRope(Event):
    """The way out, usable only with the gold in hand."""

    def __init__(self) -> None:
        super().__init__("", "E")

    def encounter(self, player: Player) -> bool:
        if player.gold:
            player.escape()
        return False


class Gold(Event):
    """The treasure the player came for."""

    def __init__(self) -> None:
        super().__init__("You see something shimmer nearby.\n", "G")

    def encounter(self, player: Player) -> bool:
        player.gold = True
        return True


class Stalactites(Event):
    """Loose rock with an even chance of killing the player."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__("You water dripping.\n", "S")
        self._rng = rng if rng is not None else random.Random()

    def encounter(self, player: Player) -> bool:
        if self._rng.randrange(2):
            player.die()
        return False


class Wumpus(Event, Moveable):
    """The monster: kills the player unless dead, and wanders the cave."""

    def __init__(self, x: int, y: int, rng: random.Random | None = None) -> None:
        Moveable.__init__(self, x, y)
        Event.__init__(self, "You smell a horrible stench.\n", "W")
        self._rng = rng if rng is not None else random.Random()
        self.dead = False

    def encounter(self, player: Player) -> bool:
        if not self.dead:
            player.die()
        return False

    def wander(self, directions: Sequence[str]) -> None:
        """Step in one of the given directions chosen at random; stay if there are none."""
        if not directions:
            return
        self.step(directions[self._rng.randrange(len(directions))])

    def kill(self) -> None:
        self.dead = True