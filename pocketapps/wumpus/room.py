"""A single room of the cave, which may hold one event."""

from __future__ import annotations

from pocketapps.wumpus.events import Event
from pocketapps.wumpus.player import Player


class Room:
    """A cave room and the event in it, if any."""

    def __init__(self, event: Event | None = None) -> None:
        self.event = event

    def contains_event(self) -> bool:
        return self.event is not None

    def event_char(self) -> str:
        """Return the event's map letter, or a space if the room is empty."""
        return self.event.letter if self.event is not None else " "

    def percept(self) -> str:
        """Return what the event gives away to a neighbour, or '' if empty."""
        return self.event.percept if self.event is not None else ""

    def encounter(self, player: Player) -> None:
        """Let the event act on the player, clearing it if it is used up."""
        if self.event is not None and self.event.encounter(player):
            self.event = None