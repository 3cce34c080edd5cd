import pytest

from pocketapps.coffee.coffee import Coffee, format_price
from pocketapps.coffee.menu import Menu
from pocketapps.coffee.order import Order
from pocketapps.coffee.shop import Shop


@pytest.fixture
def latte():
    return Coffee("Latte", 1.5, 2.5, 3.5)


@pytest.fixture
def shop(latte):
    return Shop(Menu([latte, Coffee("Mocha", 4.0, 5.0, 6.0)]), "555-0100", "1 Example Way")


def test_load_reads_info_and_menu(tmp_path, latte):
    (tmp_path / "shop_info.txt").write_text("555-0100\n1 Example Way\n")
    Menu([latte]).save(tmp_path / "menu.txt")
    loaded = Shop.load(tmp_path)
    assert loaded.phone == "555-0100"
    assert loaded.address == "1 Example Way"
    assert loaded.coffee_names() == ["Latte"]


def test_load_missing_files_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Shop.load(tmp_path)


def test_add_order_adds_revenue(shop, latte):
    shop.add_order(Order(shop.next_order_number(), "Latte", "l", 2))
    assert shop.revenue == latte.cost("l") * 2
    assert len(shop.orders) == 1


def test_order_for_unknown_coffee_adds_nothing(shop):
    shop.add_order(Order(1, "Tea", "s", 5))
    assert shop.revenue == 0


def test_next_order_number_counts_orders(shop):
    assert shop.next_order_number() == 1
    shop.add_order(Order(1, "Latte", "s", 1))
    assert shop.next_order_number() == 2


def test_str_without_orders(shop):
    text = str(shop)
    assert text.startswith("Address: 1 Example Way\nPhone: 555-0100\n")
    assert f"The shop revenue is: {format_price(0.0)}\n" in text
    assert shop.menu_text() in text
    assert text.endswith("Order Info:\n(No orders to display)\n")


def test_str_with_orders(shop):
    order = Order(1, "Mocha", "m", 3)
    shop.add_order(order)
    text = str(shop)
    assert text.endswith("Order Info:\n" + str(order) + "\n")
    assert format_price(shop.revenue) in text


def test_coffee_names_listing(shop):
    assert shop.coffee_names_listing().splitlines() == [
        f"{n}. {name}" for n, name in enumerate(shop.coffee_names(), start=1)
    ]


def test_add_and_remove_coffee(shop, latte):
    shop.add_coffee_to_menu(Coffee("Tea", 1, 1, 1))
    assert shop.num_coffees() == 3
    shop.remove_coffee_from_menu(1)
    assert shop.coffee_names() == ["Mocha", "Tea"]


def test_searches_delegate_to_menu(shop):
    assert shop.search_coffee_by_name("Mocha") == shop.menu.search_by_name("Mocha")
    assert shop.search_coffee_by_budget(2.0) == shop.menu.search_by_budget(2.0)


def test_save_writes_orders_and_menu(shop, tmp_path):
    shop.add_order(Order(1, "Latte", "m", 2))
    shop.save(tmp_path)
    lines = (tmp_path / "orders.txt").read_text().splitlines()
    assert lines[0] == "1"
    assert lines[1] == "1 Latte m 2"
    assert list(Menu.load(tmp_path / "menu.txt")) == list(shop.menu)


def test_add_revenue_accumulates(shop):
    shop.add_revenue(2.0)
    shop.add_revenue(3.0)
    assert shop.revenue == 5.0


def test_copy_is_independent(shop):
    shop.add_order(Order(1, "Latte", "s", 1))
    clone = shop.copy()
    clone.add_order(Order(2, "Mocha", "s", 1))
    clone.add_coffee_to_menu(Coffee("Tea", 1, 1, 1))
    clone.orders[0].order_number = 9
    assert len(shop.orders) == 1
    assert shop.orders[0].order_number == 1
    assert shop.num_coffees() == 2
    assert clone.revenue > shop.revenue