"""The restaurant's menu."""

from __future__ import annotations

from typing import Iterator, TextIO

from tableorder.dishes import Dish


class Menu:
    """An ordered collection of dishes that can be looked up by name."""

    def __init__(self) -> None:
        self._dishes: list[Dish] = []

    def __iter__(self) -> Iterator[Dish]:
        return iter(self._dishes)

    def __len__(self) -> int:
        return len(self._dishes)

    def display_menu(self, file: TextIO | None = None) -> None:
        """Print a header followed by every dish."""
        print("=== Menu ===", file=file)
        for dish in self._dishes:
            dish.display(file)

    def add_dish(self, dish: Dish) -> None:
        """Append a dish to the menu."""
        self._dishes.append(dish)

    def get_dish_by_name(self, name: str) -> Dish | None:
        """Return the first dish with this exact name, or None."""
        return next((dish for dish in self._dishes if dish.name == name), None)