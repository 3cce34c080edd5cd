"""The adventurer exploring the cave."""

from __future__ import annotations

import random

from pocketapps.wumpus.moveable import DIRECTIONS, Moveable

STARTING_LIVES = 3


class Player(Moveable):
    """Position, inventory and remaining lives of the adventurer."""

    def __init__(self, x: int, y: int, rng: random.Random | None = None) -> None:
        super().__init__(x, y)
        self._rng = rng if rng is not None else random.Random()
        self.gold = False
        self.escaped = False
        self.dazed = False
        self.arrows = 0
        self.lives = STARTING_LIVES

    def escape(self) -> None:
        self.escaped = True

    def daze(self) -> None:
        """Make the next move go in a random direction."""
        self.dazed = True

    def shoot(self) -> None:
        self.arrows -= 1

    def give_arrow(self) -> None:
        self.arrows += 1

    def die(self) -> None:
        """Lose one life."""
        self.lives -= 1

    def is_dead(self) -> bool:
        """Return whether no lives are left."""
        return self.lives == 0

    def move(self, direction: str) -> None:
        """Step in direction, or in a random one if dazed (which wears off)."""
        if self.dazed:
            self.step(DIRECTIONS[self._rng.randrange(len(DIRECTIONS))])
            self.dazed = False
        else:
            self.step(direction)

    def reset_inventory(self) -> tuple[bool, int]:
        """Empty the inventory and return what it held as (gold, arrows)."""
        held = (self.gold, self.arrows)
        self.gold = False
        self.arrows = 0
        return held