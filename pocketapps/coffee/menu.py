"""The list of coffees a shop sells, stored in a plain text file."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

from pocketapps.coffee.coffee import Coffee

NO_COFFEES = "(No coffees to display)"
NO_PRODUCT = "Sorry, we don't have that product at the moment.\n"
NO_PRODUCT_IN_BUDGET = "Sorry, we don't have a product less than or equal to your budget.\n"


class Menu:
    """An ordered collection of coffees."""

    def __init__(self, coffees: Iterable[Coffee] = ()) -> None:
        self._coffees: list[Coffee] = list(coffees)

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Menu:
        """Read a menu: a count, then name and three prices for each coffee."""
        tokens = Path(path).read_text().split()
        if not tokens:
            return cls()
        count = int(tokens[0])
        fields = tokens[1:]
        if count < 0 or len(fields) < 4 * count:
            raise ValueError(f"menu file {path} is truncated")
        coffees = []
        for i in range(count):
            name, small, medium, large = fields[4 * i:4 * i + 4]
            coffees.append(Coffee(name, float(small), float(medium), float(large)))
        return cls(coffees)

    def save(self, path: str | PathLike[str]) -> None:
        """Write the menu in the format that load reads."""
        lines = [f"{len(self._coffees)}\n"]
        lines.extend(
            f"{c.name} {c.cost('s'):g} {c.cost('m'):g} {c.cost('l'):g}\n"
            for c in self._coffees
        )
        Path(path).write_text("".join(lines))

    def copy(self) -> Menu:
        return Menu(self._coffees)

    def add_coffee(self, coffee: Coffee) -> None:
        self._coffees.append(coffee)

    def remove_coffee(self, index: int) -> Coffee:
        """Remove and return the coffee at the 1-based index."""
        if not 1 <= index <= len(self._coffees):
            raise IndexError(f"no coffee number {index} on the menu")
        return self._coffees.pop(index - 1)

    def __len__(self) -> int:
        return len(self._coffees)

    def __iter__(self) -> Iterator[Coffee]:
        return iter(self._coffees)

    def names(self) -> list[str]:
        return [c.name for c in self._coffees]

    def __str__(self) -> str:
        if not self._coffees:
            return NO_COFFEES
        return "".join(f"{n}. {c}" for n, c in enumerate(self._coffees, start=1))

    def search_by_name(self, query: str) -> str:
        """Describe the first coffee named query, or say there is none."""
        for coffee in self._coffees:
            if coffee.name == query:
                return "Results:\n" + str(coffee)
        return NO_PRODUCT

    def search_by_budget(self, budget: float) -> str:
        """Describe every size of every coffee that costs no more than budget."""
        result = "".join(c.describe_within(budget) for c in self._coffees)
        return result or NO_PRODUCT_IN_BUDGET

    def order_cost(self, name: str, size: str, quantity: int) -> float:
        """Price of quantity cups of the named coffee; 0 if it is not on the menu."""
        for coffee in self._coffees:
            if coffee.name == name:
                return coffee.cost(size) * quantity
        return 0.0