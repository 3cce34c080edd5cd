import io
import sys

import pytest

from pocketapps.coffee.cli import (
    create_coffee_from_user,
    create_order_from_user,
    execute_option,
    files_present,
    get_coffee_budget_query,
    get_coffee_for_deletion,
    get_coffee_name_query,
    get_option,
    main,
    options_text,
)
from pocketapps.coffee.coffee import Coffee
from pocketapps.coffee.menu import Menu
from pocketapps.coffee.order import Order
from pocketapps.coffee.shop import Shop
from pocketapps.console import Console


def _console(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


@pytest.fixture
def shop():
    menu = Menu([Coffee("Latte", 3.5, 4.5, 5.5), Coffee("Mocha", 4.0, 5.0, 6.0)])
    return Shop(menu, "000", "Main St")


def test_get_option_rejects_out_of_range():
    console, out = _console("0\n8\n3\n")
    assert get_option(console) == 3
    assert out.getvalue().count("Error: You must choose one of the 7 options provided") == 2
    assert out.getvalue().count(options_text()) == 3


def test_get_option_rejects_non_number():
    console, out = _console("abc\n2\n")
    assert get_option(console) == 2
    assert "Error: You must choose" in out.getvalue()


def test_options_text_lists_log_out_last():
    lines = options_text().strip().splitlines()
    assert lines[-1].strip() == "7. Log out"
    assert lines[0] == "What would you like to do?"


def test_create_coffee_reprompts_negative_price():
    console, out = _console("Cappuccino\n-1\n2\n3\n4\n")
    assert create_coffee_from_user(console) == Coffee("Cappuccino", 2.0, 3.0, 4.0)
    assert out.getvalue().count("Enter price of small size (8oz): ") == 2


def test_get_coffee_for_deletion(shop):
    console, out = _console("0\n5\n2\n")
    assert get_coffee_for_deletion(shop, console) == 2
    assert out.getvalue().startswith(shop.coffee_names_listing())


def test_get_coffee_for_deletion_empty_menu():
    console, _ = _console("1\n")
    with pytest.raises(ValueError):
        get_coffee_for_deletion(Shop(Menu()), console)


def test_name_and_budget_queries():
    console, _ = _console("Latte\n4.25\n")
    assert get_coffee_name_query(console) == "Latte"
    assert get_coffee_budget_query(console) == 4.25


def test_create_order_from_user(shop):
    console, _ = _console("2\nx\nm\n0\n3\n")
    assert create_order_from_user(shop, console) == Order(0, "Mocha", "m", 3)


def test_execute_add_coffee(shop):
    console, out = _console("Espresso\n1\n2\n3\n")
    execute_option(shop, 2, console)
    assert shop.coffee_names() == ["Latte", "Mocha", "Espresso"]
    assert "successfully added" in out.getvalue()


def test_execute_remove_coffee(shop):
    console, _ = _console("1\n")
    execute_option(shop, 3, console)
    assert shop.coffee_names() == ["Mocha"]


def test_execute_search_by_name(shop):
    console, out = _console("Latte\n")
    execute_option(shop, 4, console)
    assert out.getvalue().endswith(shop.search_coffee_by_name("Latte") + "\n")


def test_execute_place_order(shop):
    console, out = _console("2\nm\n2\n")
    execute_option(shop, 6, console)
    assert len(shop.orders) == 1
    assert shop.orders[0].order_number == 1
    assert shop.revenue == shop.menu.order_cost("Mocha", "m", 2)
    assert out.getvalue().endswith("\nYour order has been placed successfully.\n")


def test_execute_view_info(shop):
    console, out = _console("")
    execute_option(shop, 1, console)
    assert out.getvalue() == f"{shop}\n"


def test_files_present(tmp_path):
    assert files_present(tmp_path) is False
    (tmp_path / "shop_info.txt").write_text("000\nMain St\n")
    assert files_present(tmp_path) is False
    (tmp_path / "menu.txt").write_text("0\n")
    assert files_present(tmp_path) is True


def test_main_places_order_and_saves(tmp_path, monkeypatch, capsys):
    (tmp_path / "shop_info.txt").write_text("000\nMain St\n")
    (tmp_path / "menu.txt").write_text("1\nLatte 3.5 4.5 5.5\n")
    monkeypatch.setattr(sys, "stdin", io.StringIO("6\n1\ns\n2\n7\n"))
    assert main(["--directory", str(tmp_path)]) == 0
    assert (tmp_path / "orders.txt").read_text() == "1\n1 Latte s 2\n"
    assert Menu.load(tmp_path / "menu.txt").names() == ["Latte"]
    assert "Welcome to the Coffee++ Cafe!" in capsys.readouterr().out


def test_main_without_files(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["--directory", str(tmp_path)]) == 0
    assert "were not openable. Goodbye." in capsys.readouterr().out
    assert not (tmp_path / "orders.txt").exists()