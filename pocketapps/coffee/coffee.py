"""A coffee drink with a price for each cup size."""

from __future__ import annotations

from dataclasses import dataclass

SIZES = ("s", "m", "l")


def format_price(value: float) -> str:
    """Format a price with six decimal places."""
    return f"{value:f}"


@dataclass(frozen=True)
class Coffee:
    """A named drink sold in small, medium and large cups."""

    name: str = ""
    small_cost: float = 0.0
    medium_cost: float = 0.0
    large_cost: float = 0.0

    def _size_lines(self) -> list[tuple[float, str]]:
        return [
            (self.small_cost, f"   Small - {format_price(self.small_cost)}\n"),
            (self.medium_cost, f"   Medium - {format_price(self.medium_cost)}\n"),
            (self.large_cost, f"   Large - {format_price(self.large_cost)}\n"),
        ]

    def __str__(self) -> str:
        return self.name + "\n" + "".join(line for _, line in self._size_lines())

    def describe_within(self, budget: float) -> str:
        """Describe only the sizes costing no more than budget; empty if none do."""
        lines = "".join(line for cost, line in self._size_lines() if cost <= budget)
        return self.name + "\n" + lines if lines else ""

    def cost(self, size: str) -> float:
        """Return the price of size 's', 'm' or 'l'; any other size costs 0."""
        return {
            "s": self.small_cost,
            "m": self.medium_cost,
            "l": self.large_cost,
        }.get(size, 0.0)