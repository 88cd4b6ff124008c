"""The restaurant: menu, customers and interactive ordering."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from tableorder.customer import Customer
from tableorder.dishes import Appetizer, Dessert, Entree
from tableorder.menu import Menu
from tableorder.order import Order

_DISH_PROMPT = "Enter dish name (or 'done' to finish):"


class CustomerNotFoundError(LookupError):
    """Raised when a customer name is not known to the restaurant."""


def _tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-separated words from a stream, reading lazily."""
    for line in stream:
        yield from line.split()


class Restaurant:
    """A menu plus the customers and orders placed against it."""

    def __init__(self) -> None:
        self.menu = Menu()
        self.customers: list[Customer] = []
        self.orders: list[Order] = []

    def show_menu(self, file: TextIO | None = None) -> None:
        """Print the menu."""
        self.menu.display_menu(file)

    def get_customer_by_name(self, name: str) -> Customer | None:
        """Return the customer with this name, or None."""
        return next((c for c in self.customers if c.name == name), None)

    def place_new_order(
        self,
        customer_name: str,
        input_stream: TextIO | None = None,
        output: TextIO | None = None,
    ) -> Order:
        """Take an order interactively, word by word, until 'done' or end of input."""
        input_stream = sys.stdin if input_stream is None else input_stream
        output = sys.stdout if output is None else output
        words = _tokens(input_stream)

        customer = self.get_customer_by_name(customer_name)
        if customer is None:
            output.write(f"Enter contact info for{customer_name}: ")
            output.flush()
            contact = next(words, "")
            customer = Customer(customer_name, contact)
            self.customers.append(customer)

        order = Order(customer)
        output.write(_DISH_PROMPT + " ")
        output.flush()
        for word in words:
            if word == "done":
                break
            dish = self.menu.get_dish_by_name(word)
            if dish is not None:
                order.add_dish(dish)
            else:
                print("Dish not found!", file=output)
            output.write(_DISH_PROMPT)
            output.flush()
        order.calculate_total()

        customer.place_order(
            Order(customer, list(order.dishes), order.total_price)
        )
        self.orders.append(order)
        return order

    def view_customer_order_history(
        self, customer_name: str, file: TextIO | None = None
    ) -> None:
        """Print a customer's order history; raise if the customer is unknown."""
        customer = self.get_customer_by_name(customer_name)
        if customer is None:
            raise CustomerNotFoundError("Customer not found!")
        customer.view_order_history(file)


def main(argv: list[str] | None = None) -> int:
    """Set up a sample menu, take an order for Alice and show her history."""
    restaurant = Restaurant()
    restaurant.show_menu()
    restaurant.menu.add_dish(Appetizer("Salad", 5.99, True))
    restaurant.show_menu()
    restaurant.menu.add_dish(Entree("Steak", 15.99, 800))
    restaurant.show_menu()
    restaurant.menu.add_dish(Dessert("Cake", 4.99, False))
    restaurant.show_menu()
    restaurant.show_menu()
    restaurant.place_new_order("Alice")
    restaurant.view_customer_order_history("Alice")
    return 0


if __name__ == "__main__":
    sys.exit(main())