"""Restaurant customers and their order history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from tableorder.order import Order


@dataclass
class Customer:
    """A customer with contact details and past orders."""

    name: str
    contact_info: str
    order_history: list[Order] = field(default_factory=list, repr=False)

    def place_order(self, order: Order) -> None:
        """Record an order in the customer's history."""
        self.order_history.append(order)

    def view_order_history(self, file: TextIO | None = None) -> None:
        """Print every order the customer has placed."""
        print(f"{self.name}'s Order History:", file=file)
        for order in self.order_history:
            order.display_order(file)