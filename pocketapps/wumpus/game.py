"""Hunt the Wumpus: the cave grid and the rules of a turn."""

from __future__ import annotations

import random

from pocketapps.console import Console
from pocketapps.wumpus.events import Arrow, Bats, EscapeRope, Gold, Stalactites, Wumpus
from pocketapps.wumpus.moveable import DIRECTIONS, DOWN, LEFT, RIGHT, UP
from pocketapps.wumpus.player import Player
from pocketapps.wumpus.room import Room

FIRE = "f"
ARROW_RANGE = 3

_OFFSETS = {UP: (0, -1), LEFT: (-1, 0), DOWN: (0, 1), RIGHT: (1, 0)}

_ACTION_MENU = (
    "\n\nWhat would you like to do?\n\n"
    "w: move up\n"
    "a: move left\n"
    "s: move down\n"
    "d: move right\n"
    "f: fire an arrow\n"
)

_FIRE_MENU = (
    "\n\nWhat direction would you like to fire the arrow?\n\n"
    "w: up\n"
    "a: left\n"
    "s: down\n"
    "d: right\n"
)

INVALID_INPUT = "\nThat's an invalid input!\n\n"
CANNOT_MOVE = "You can't move in that direction!\n\n"
OUT_OF_ARROWS = "You're out of arrows!\n\n"


def is_direction(c: str) -> bool:
    """Return whether c is one of the direction keys w, a, s, d."""
    return c in DIRECTIONS


def _to_lower(c: str) -> str:
    return c.lower() if "A" <= c <= "Z" else c


class Game:
    """A cave of rooms holding the player, the wumpus and the other events."""

    def __init__(
        self,
        width: int,
        height: int,
        debug: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("the cave needs a positive width and height")
        self.width = width
        self.height = height
        self.debug = debug
        self._rng = rng if rng is not None else random.Random()
        self.cave = [[Room() for _ in range(width)] for _ in range(height)]

        x, y = self.random_empty_room()
        self.wumpus = Wumpus(x, y, self._rng)
        self.cave[y][x].event = self.wumpus

        x, y = self.random_empty_room()
        self.escape_rope = (x, y)
        self.player = Player(x, y, self._rng)
        self.cave[y][x].event = EscapeRope()

        for event in (
            Arrow(),
            Arrow(),
            Gold(),
            Stalactites(self._rng),
            Stalactites(self._rng),
            Bats(),
            Bats(),
        ):
            x, y = self.random_empty_room()
            self.cave[y][x].event = event

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _room(self, x: int, y: int) -> Room:
        if not self._in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the cave")
        return self.cave[y][x]

    def render(self) -> str:
        """Return the picture of the cave; event letters appear only in debug mode."""
        border = "--" + "-----" * self.width
        px, py = self.player.location()
        parts = [f"\n\nArrows remaining: {self.player.arrows}\n", border, "\n"]
        for y, row in enumerate(self.cave):
            parts.append("||")
            for x, room in enumerate(row):
                parts.append("*" if (x, y) == (px, py) else " ")
                parts.append(room.event_char() if self.debug and room.contains_event() else " ")
                parts.append(" ||")
            parts.extend(["\n", border, "\n"])
        return "".join(parts)

    def check_win(self) -> bool:
        return self.player.escaped or self.wumpus.dead

    def check_lose(self) -> bool:
        return self.player.is_dead()

    def random_empty_room(self) -> tuple[int, int]:
        """Return the (x, y) of a randomly chosen room with no event."""
        if all(room.contains_event() for row in self.cave for room in row):
            raise RuntimeError("no empty room is left in the cave")
        while True:
            x = self._rng.randrange(self.width)
            y = self._rng.randrange(self.height)
            if not self.cave[y][x].contains_event():
                return (x, y)

    def can_move_in_direction(self, direction: str) -> bool:
        """Return whether a step in direction keeps the player inside the cave."""
        x, y = self.player.location()
        if direction == UP:
            return y > 0
        if direction == LEFT:
            return x > 0
        if direction == DOWN:
            return y + 1 < self.height
        if direction == RIGHT:
            return x + 1 < self.width
        return False

    def is_valid_action(self, action: str) -> bool:
        if is_direction(action):
            return self.can_move_in_direction(action)
        if action == FIRE:
            return self.player.arrows > 0
        return False

    def action_error(self, action: str) -> str:
        """Return the message explaining why action cannot be taken."""
        if is_direction(action):
            return CANNOT_MOVE
        if action == FIRE:
            return OUT_OF_ARROWS
        return INVALID_INPUT

    def get_player_action(self, console: Console) -> str:
        """Prompt until the player gives a valid action and return it."""
        action = ""
        first = True
        while True:
            if not first:
                console.write(self.action_error(action))
            first = False
            console.write(_ACTION_MENU)
            action = _to_lower(console.read_token()[0])
            if self.is_valid_action(action):
                return action

    def get_arrow_fire_direction(self, console: Console) -> str:
        """Prompt until the player gives a direction to fire in and return it."""
        first = True
        while True:
            if not first:
                console.write(INVALID_INPUT)
            first = False
            console.write(_FIRE_MENU)
            direction = _to_lower(console.read_token()[0])
            if is_direction(direction):
                return direction

    def move(self, direction: str) -> None:
        self.player.move(direction)

    def _place_arrow_near(self, x: int, y: int) -> None:
        room = self._room(x, y)
        if room.contains_event():
            rx, ry = self.random_empty_room()
            self.cave[ry][rx].event = Arrow()
        else:
            room.event = Arrow()

    def _loose_arrow(self, direction: str) -> None:
        dx, dy = _OFFSETS.get(direction, _OFFSETS[RIGHT])
        x, y = self.player.location()
        i = 0
        while i < ARROW_RANGE and self._in_bounds(x + dx * (i + 1), y + dy * (i + 1)):
            if self._room(x + dx * i, y + dy * i).event_char() == self.wumpus.letter:
                self.wumpus.kill()
                return
            i += 1
        self._place_arrow_near(x + dx * i, y + dy * i)

    def fire_arrow(self, direction: str) -> None:
        """Shoot an arrow; a wumpus that survives flees to a random empty room."""
        self._loose_arrow(direction)
        self.player.shoot()
        if not self.wumpus.dead:
            old_x, old_y = self.wumpus.location()
            self.wumpus.set_location(self.random_empty_room())
            self._room(old_x, old_y).event = None
            self._room(*self.wumpus.location()).event = self.wumpus

    def free_adjacent_rooms(self, x: int, y: int) -> list[str]:
        """Directions from (x, y) leading to rooms with no event, in w, s, a, d order."""
        free = []
        for direction in (UP, DOWN, LEFT, RIGHT):
            dx, dy = _OFFSETS[direction]
            nx, ny = x + dx, y + dy
            if self._in_bounds(nx, ny) and not self.cave[ny][nx].contains_event():
                free.append(direction)
        return free

    def percepts(self, x: int, y: int) -> str:
        """What can be sensed from (x, y): the percepts of the neighbouring events."""
        parts = []
        for direction in (UP, DOWN, LEFT, RIGHT):
            dx, dy = _OFFSETS[direction]
            nx, ny = x + dx, y + dy
            if self._in_bounds(nx, ny) and self.cave[ny][nx].contains_event():
                parts.append(self.cave[ny][nx].percept())
        return "".join(parts)

    def player_death(self) -> None:
        """Scatter the player's gold and arrows and send them back to the escape rope."""
        had_gold, arrows = self.player.reset_inventory()
        if had_gold:
            x, y = self.random_empty_room()
            self.cave[y][x].event = Gold()
        for _ in range(arrows):
            x, y = self.random_empty_room()
            self.cave[y][x].event = Arrow()
        self.player.set_location(self.escape_rope)

    def _wumpus_wanders(self) -> None:
        old_x, old_y = self.wumpus.location()
        self.wumpus.wander(self.free_adjacent_rooms(old_x, old_y))
        self._room(old_x, old_y).event = None
        self._room(*self.wumpus.location()).event = self.wumpus

    def take_turn(self, action: str, fire_direction: str | None = None) -> None:
        """Play one turn: the player's action, the wumpus's move, then any encounter."""
        if not self.is_valid_action(action):
            raise ValueError(f"invalid action: {action!r}")
        if is_direction(action):
            self.move(action)
        else:
            if fire_direction is None or not is_direction(fire_direction):
                raise ValueError(f"invalid fire direction: {fire_direction!r}")
            self.fire_arrow(fire_direction)

        self._wumpus_wanders()

        room = self._room(*self.player.location())
        lives = self.player.lives
        room.encounter(self.player)
        if lives != self.player.lives:
            self.player_death()

    def play(self, console: Console) -> bool:
        """Play turns until the game is won or lost; return whether it was won."""
        while not self.check_win() and not self.check_lose():
            console.write(self.render())
            console.write(self.percepts(*self.player.location()))
            action = self.get_player_action(console)
            fire_direction = (
                self.get_arrow_fire_direction(console) if action == FIRE else None
            )
            self.take_turn(action, fire_direction)
        return self.check_win()