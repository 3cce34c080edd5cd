"""A coffee shop: contact details, a menu, orders and revenue."""

from __future__ import annotations

import dataclasses
from os import PathLike
from pathlib import Path

from pocketapps.coffee.coffee import Coffee, format_price
from pocketapps.coffee.menu import Menu
from pocketapps.coffee.order import Order

SHOP_INFO_FILE = "shop_info.txt"
MENU_FILE = "menu.txt"
ORDERS_FILE = "orders.txt"


class Shop:
    """Holds the menu and takes orders, keeping a running revenue total."""

    def __init__(self, menu: Menu | None = None, phone: str = "", address: str = "") -> None:
        self.menu = menu if menu is not None else Menu()
        self.phone = phone
        self.address = address
        self.revenue = 0.0
        self.orders: list[Order] = []

    @classmethod
    def load(cls, directory: str | PathLike[str]) -> Shop:
        """Read phone and address from shop_info.txt and the menu from menu.txt."""
        directory = Path(directory)
        lines = (directory / SHOP_INFO_FILE).read_text().splitlines()
        phone = lines[0] if lines else ""
        address = lines[1] if len(lines) > 1 else ""
        return cls(Menu.load(directory / MENU_FILE), phone, address)

    def save(self, directory: str | PathLike[str]) -> None:
        """Write the orders to orders.txt and the menu to menu.txt."""
        directory = Path(directory)
        lines = [f"{len(self.orders)}\n"]
        lines.extend(
            f"{n} {o.coffee_name} {o.coffee_size} {o.quantity}\n"
            for n, o in enumerate(self.orders, start=1)
        )
        (directory / ORDERS_FILE).write_text("".join(lines))
        self.menu.save(directory / MENU_FILE)

    def copy(self) -> Shop:
        clone = Shop(self.menu.copy(), self.phone, self.address)
        clone.revenue = self.revenue
        clone.orders = [dataclasses.replace(o) for o in self.orders]
        return clone

    def add_coffee_to_menu(self, coffee: Coffee) -> None:
        self.menu.add_coffee(coffee)

    def add_order(self, order: Order) -> None:
        """Record the order and add its price to the revenue."""
        self.orders.append(order)
        self.add_revenue(
            self.menu.order_cost(order.coffee_name, order.coffee_size, order.quantity)
        )

    def __str__(self) -> str:
        parts = [
            f"Address: {self.address}\n",
            f"Phone: {self.phone}\n",
            f"The shop revenue is: {format_price(self.revenue)}\n",
            "\n",
            "Here is our menu: \n",
            f"{self.menu}\n",
            "Order Info:\n",
        ]
        if self.orders:
            parts.extend(f"{o}\n" for o in self.orders)
        else:
            parts.append("(No orders to display)\n")
        return "".join(parts)

    def coffee_names_listing(self) -> str:
        """Numbered list of coffee names, one per line."""
        return "".join(f"{n}. {name}\n" for n, name in enumerate(self.menu.names(), start=1))

    def coffee_names(self) -> list[str]:
        return self.menu.names()

    def num_coffees(self) -> int:
        return len(self.menu)

    def remove_coffee_from_menu(self, index: int) -> Coffee:
        """Remove the coffee at the 1-based index."""
        return self.menu.remove_coffee(index)

    def search_coffee_by_name(self, query: str) -> str:
        return self.menu.search_by_name(query)

    def search_coffee_by_budget(self, budget: float) -> str:
        return self.menu.search_by_budget(budget)

    def menu_text(self) -> str:
        return str(self.menu)

    def next_order_number(self) -> int:
        return len(self.orders) + 1

    def add_revenue(self, amount: float) -> None:
        self.revenue += amount