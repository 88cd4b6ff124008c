# tableorder

A small restaurant ordering system. A restaurant keeps a menu of dishes
(appetizers, entrees and desserts). It registers a customer when that
customer places a first order, and keeps each customer's order history.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
tableorder
```

This sets up a sample menu (Salad, Steak, Cake) and prints it as each dish is
added. It then takes an order for the customer Alice from standard input:
first a contact string, then dish names, ending with `done` or end of input.
Last, it prints Alice's order history with the total.

Input is read word by word, split on whitespace, so a dish name that contains
a space can never match a menu entry. A name that is not on the menu prints
`Dish not found!` and the order goes on.

## Library use

```python
import io

from tableorder.dishes import Appetizer, Dessert, Entree
from tableorder.restaurant import Restaurant

restaurant = Restaurant()
restaurant.menu.add_dish(Appetizer("Salad", 5.99, True))
restaurant.menu.add_dish(Entree("Steak", 15.99, 800))
restaurant.menu.add_dish(Dessert("Cake", 4.99, False))
restaurant.show_menu()

answers = io.StringIO("alice@example.com\nSalad\nCake\ndone\n")
order = restaurant.place_new_order("Alice", answers)
print(order.total_price)
restaurant.view_customer_order_history("Alice")
```

### `tableorder.dishes`

- `Dish(name, price)`: a dataclass. `display(file)` prints `name-$price`.
- `Appetizer(name, price, is_spicy)`, `Entree(name, price, calories)`,
  `Dessert(name, price, contains_nuts)`: subclasses whose `display(file)`
  prints a line such as `Appetizer: Salad - $5.99 (Spicy)`.
- `format_amount(value)`: formats a price with up to six significant digits,
  as used in every printed line.

### `tableorder.menu`

- `Menu`: `add_dish(dish)`, `get_dish_by_name(name)` (first exact match, or
  `None`) and `display_menu(file)`, which prints `=== Menu ===` and then each
  dish. A menu can be iterated and has a length.

### `tableorder.order`

- `Order(customer, dishes, total_price)`: `add_dish(dish)` appends a dish
  without touching the total; `calculate_total()` recomputes `total_price`
  from the dishes; `display_order(file)` prints the customer's name, each
  dish and the total.

### `tableorder.customer`

- `Customer(name, contact_info, order_history)`: `place_order(order)` records
  an order; `view_order_history(file)` prints every recorded order.

### `tableorder.restaurant`

- `Restaurant`: holds `menu`, `customers` and `orders`.
  - `show_menu(file)` prints the menu.
  - `get_customer_by_name(name)` returns the customer or `None`.
  - `place_new_order(customer_name, input_stream, output)` reads from
    `input_stream` (standard input by default) and writes prompts to `output`
    (standard output by default). An unknown customer is asked for contact
    info and registered. The finished order is returned, added to `orders`,
    and a copy goes into the customer's history.
  - `view_customer_order_history(customer_name, file)` prints the history, or
    raises `CustomerNotFoundError` (a `LookupError`) for an unknown name.
- `main(argv=None)`: the `tableorder` command.

Every method that prints takes an optional `file` argument and writes to
standard output when none is given.

## What it does not do

Everything lives in memory: menus, customers and orders are not saved
anywhere and are gone when the program ends. There is no way to remove or
change dishes, customers or orders once added, and the command line only
runs the fixed sample described above.