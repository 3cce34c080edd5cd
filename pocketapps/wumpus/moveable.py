"""Something with a position on the cave grid that can take a step."""

from __future__ import annotations

from collections.abc import Sequence

UP = "w"
LEFT = "a"
DOWN = "s"
RIGHT = "d"
DIRECTIONS = (UP, LEFT, DOWN, RIGHT)


class Moveable:
    """An (x, y) position; y grows downwards."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def location(self) -> tuple[int, int]:
        """Return the position as (x, y)."""
        return (self.x, self.y)

    def set_location(self, location: Sequence[int]) -> None:
        """Move to the (x, y) position given."""
        self.x, self.y = location[0], location[1]

    def step(self, direction: str) -> None:
        """Take one step: 'w' up, 'a' left, 's' down, anything else right."""
        if direction == UP:
            self.y -= 1
        elif direction == LEFT:
            self.x -= 1
        elif direction == DOWN:
            self.y += 1
        else:
            self.x += 1