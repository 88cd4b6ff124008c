"""A customer's order."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

from tableorder.dishes import Dish, format_amount

if TYPE_CHECKING:
    from tableorder.customer import Customer


@dataclass
class Order:
    """Dishes ordered by one customer and their total price."""

    customer: Customer = field(repr=False, compare=False)
    dishes: list[Dish] = field(default_factory=list)
    total_price: float = 0.0

    def calculate_total(self) -> None:
        """Recompute the total from the ordered dishes."""
        self.total_price = sum((dish.price for dish in self.dishes), 0.0)

    def add_dish(self, dish: Dish) -> None:
        """Add a dish; the total is updated only by calculate_total."""
        self.dishes.append(dish)

    def display_order(self, file: TextIO | None = None) -> None:
        """Print the customer's name, each dish and the total."""
        print(f"Order for {self.customer.name}:", file=file)
        for dish in self.dishes:
            dish.display(file)
        print(f"Total: ${format_amount(self.total_price)}\n", file=file)