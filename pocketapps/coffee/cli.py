"""Interactive front end for running the coffee shop."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from pocketapps.coffee.coffee import SIZES, Coffee
from pocketapps.coffee.order import Order
from pocketapps.coffee.shop import MENU_FILE, SHOP_INFO_FILE, Shop
from pocketapps.console import Console

_OPTIONS = (
    "View shop info",
    "Add an item to menu",
    "Remove an item from menu",
    "Search by coffee name",
    "Search by price",
    "Place an order",
    "Log out",
)
LOG_OUT = len(_OPTIONS)


def _try_int(console: Console) -> int | None:
    try:
        return console.read_int()
    except ValueError:
        return None


def _try_float(console: Console) -> float | None:
    try:
        return console.read_float()
    except ValueError:
        return None


def options_text() -> str:
    """Return the numbered list of actions offered to the user."""
    lines = ["\nWhat would you like to do?\n"]
    lines.extend(f"\t{n}. {text}\n" for n, text in enumerate(_OPTIONS, start=1))
    return "".join(lines)


def get_option(console: Console) -> int:
    """Prompt until the user picks one of the numbered options."""
    first = True
    while True:
        if not first:
            console.write("Error: You must choose one of the 7 options provided\n")
        first = False
        console.write(options_text())
        console.write("Selection: ")
        option = _try_int(console)
        if option is not None and 1 <= option <= LOG_OUT:
            break
    console.write("\n")
    return option


def _prompt_price(console: Console, prompt: str) -> float:
    while True:
        console.write(prompt)
        value = _try_float(console)
        if value is not None and not value < 0:
            return value


def create_coffee_from_user(console: Console) -> Coffee:
    """Ask for a one-word name and a non-negative price for each size."""
    console.write("Enter the name of the new coffee drink (in 1 word): ")
    name = console.read_token()
    small = _prompt_price(console, "Enter price of small size (8oz): ")
    medium = _prompt_price(console, "Enter price of medium size (12oz): ")
    large = _prompt_price(console, "Enter price of large size (16oz): ")
    console.write("\n")
    return Coffee(name, small, medium, large)


def _prompt_menu_number(shop: Shop, console: Console, prompt: str) -> int:
    count = shop.num_coffees()
    if count == 0:
        raise ValueError("There are no coffees on the menu.")
    while True:
        console.write(f"{prompt} Enter 1-{count}: ")
        choice = _try_int(console)
        if choice is not None and 1 <= choice <= count:
            return choice


def get_coffee_for_deletion(shop: Shop, console: Console) -> int:
    """List the coffees and return the 1-based number of the one to remove."""
    console.write(shop.coffee_names_listing())
    return _prompt_menu_number(
        shop, console,
        "Which of the drinks above from our menu would you like to remove?",
    )


def get_coffee_name_query(console: Console) -> str:
    """Ask for a coffee name to search for."""
    console.write("Enter the coffee name: ")
    query = console.read_token()
    console.write("\n")
    return query


def get_coffee_budget_query(console: Console) -> float:
    """Ask for the most the user will pay for one drink."""
    while True:
        console.write(
            "Enter your budget for one drink, and I will list out our products "
            "that cheaper or equal to your budget: "
        )
        budget = _try_float(console)
        if budget is not None:
            break
    console.write("\n")
    return budget


def create_order_from_user(shop: Shop, console: Console) -> Order:
    """Ask for a coffee, size and quantity; the order number is left at 0."""
    console.write(shop.menu_text() + "\n")
    selection = _prompt_menu_number(
        shop, console,
        "Which of the drinks above from our menu would you like to order?",
    )
    console.write("\n")
    size = ""
    while size not in SIZES:
        console.write("Enter the size: s-small, m-medium, l-large: ")
        size = console.read_token()[0]
    console.write("\n")
    quantity = 0
    while quantity < 1:
        console.write("Enter quantity: ")
        quantity = _try_int(console) or 0
    name = shop.coffee_names()[selection - 1]
    return Order(0, name, size, quantity)


def execute_option(shop: Shop, option: int, console: Console) -> None:
    """Carry out one of the actions from 1 to 6; other numbers do nothing."""
    try:
        if option == 1:
            console.write(f"{shop}\n")
        elif option == 2:
            shop.add_coffee_to_menu(create_coffee_from_user(console))
            console.write("This new drink has been successfully added to the menu!\n\n")
        elif option == 3:
            shop.remove_coffee_from_menu(get_coffee_for_deletion(shop, console))
            console.write("\nThis drink has been successfully removed from the menu!\n\n")
        elif option == 4:
            console.write(shop.search_coffee_by_name(get_coffee_name_query(console)) + "\n")
        elif option == 5:
            console.write(shop.search_coffee_by_budget(get_coffee_budget_query(console)) + "\n")
        elif option == 6:
            order = create_order_from_user(shop, console)
            order.order_number = shop.next_order_number()
            shop.add_order(order)
            console.write("\nYour order has been placed successfully.\n")
    except ValueError as error:
        console.write(f"{error}\n")


def files_present(directory: str | PathLike[str]) -> bool:
    """Return whether both shop_info.txt and menu.txt can be opened for reading."""
    directory = Path(directory)
    try:
        with open(directory / SHOP_INFO_FILE), open(directory / MENU_FILE):
            return True
    except OSError:
        return False


def main(argv: Sequence[str] | None = None) -> int:
    """Run the shop until the user logs out, then save orders and menu."""
    parser = argparse.ArgumentParser(prog="coffee-shop", description="Run the coffee shop.")
    parser.add_argument(
        "-d", "--directory", default=".",
        help="directory holding shop_info.txt and menu.txt",
    )
    args = parser.parse_args(argv)
    console = Console()
    console.write("Welcome to the Coffee++ Cafe!\n")
    if not files_present(args.directory):
        console.write("Either menu.txt or shop_info.txt were not openable. Goodbye.\n")
        return 0
    shop = Shop.load(args.directory)
    try:
        while (option := get_option(console)) != LOG_OUT:
            execute_option(shop, option, console)
    except EOFError:
        return 0
    shop.save(args.directory)
    return 0