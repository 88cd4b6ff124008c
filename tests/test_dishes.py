import io

from tableorder.dishes import Appetizer, Dessert, Dish, Entree


def _shown(dish):
    buf = io.StringIO()
    dish.display(buf)
    return buf.getvalue()


def test_plain_dish_display():
    assert _shown(Dish("Soup", 3.5)) == "Soup-$3.5\n"


def test_appetizer_spicy_display():
    assert _shown(Appetizer("Salad", 5.99, True)) == "Appetizer: Salad - $5.99 (Spicy)\n"


def test_appetizer_not_spicy_has_no_marker():
    text = _shown(Appetizer("Salad", 5.99, False))
    assert "(Spicy)" not in text
    assert text.startswith("Appetizer: Salad")


def test_entree_display():
    assert _shown(Entree("Steak", 15.99, 800)) == "Entree: Steak - $15.99, 800 calories\n"


def test_dessert_display_nuts():
    assert _shown(Dessert("Cake", 4.99, True)) == "Dessert: Cake - $4.99 (Contains Nuts)\n"


def test_dessert_display_without_nuts():
    assert _shown(Dessert("Cake", 4.99, False)) == "Dessert: Cake - $4.99\n"


def test_display_defaults_to_stdout(capsys):
    Entree("Steak", 15.99, 800).display()
    assert "Steak" in capsys.readouterr().out


def test_fields_round_trip():
    app = Appetizer("Caesar Salad", 5.99, True)
    assert (app.name, app.price, app.is_spicy) == ("Caesar Salad", 5.99, True)
    assert Entree("Grilled Salmon", 18.99, 15).calories == 15