import io

import pytest

from tableorder.dishes import Appetizer, Dessert, Entree
from tableorder.menu import Menu


@pytest.fixture
def menu():
    m = Menu()
    m.add_dish(Appetizer("Caesar Salad", 5.99, True))
    m.add_dish(Entree("Grilled Salmon", 18.99, 15))
    m.add_dish(Dessert("Cheesecake", 6.99, False))
    return m


def test_empty_menu_shows_header_only():
    buf = io.StringIO()
    Menu().display_menu(buf)
    assert buf.getvalue() == "=== Menu ===\n"


def test_lookup_finds_dish(menu):
    dish = menu.get_dish_by_name("Grilled Salmon")
    assert dish.name == "Grilled Salmon"
    assert dish.calories == 15


def test_lookup_missing_returns_none(menu):
    assert menu.get_dish_by_name("Pizza") is None


def test_lookup_is_exact(menu):
    assert menu.get_dish_by_name("Caesar") is None


def test_add_dish_keeps_order(menu):
    assert [d.name for d in menu] == ["Caesar Salad", "Grilled Salmon", "Cheesecake"]
    assert len(menu) == 3


def test_display_menu_lists_all(menu):
    buf = io.StringIO()
    menu.display_menu(buf)
    lines = buf.getvalue().splitlines()
    assert lines[0] == "=== Menu ==="
    assert len(lines) == 4
    assert "Cheesecake" in lines[3]