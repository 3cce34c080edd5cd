"""A customer's order for some cups of one coffee."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Order:
    """An order number, the coffee ordered, its size and how many cups."""

    order_number: int = 0
    coffee_name: str = ""
    coffee_size: str = ""
    quantity: int = 0

    def __str__(self) -> str:
        return f"{self.order_number} {self.quantity} {self.coffee_size} {self.coffee_name}"