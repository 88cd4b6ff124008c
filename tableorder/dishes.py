"""Dishes that can appear on a menu and in an order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO


def format_amount(value: float) -> str:
    """Render a number the way a default-precision stream does (6 significant digits)."""
    return f"{value:g}"


@dataclass
class Dish:
    """A named dish with a price."""

    name: str
    price: float

    def __str__(self) -> str:
        return f"{self.name}-${format_amount(self.price)}"

    def display(self, file: TextIO | None = None) -> None:
        """Print a one-line description of the dish."""
        print(self, file=file)


@dataclass
class Appetizer(Dish):
    """A starter, possibly spicy."""

    is_spicy: bool = False

    def __str__(self) -> str:
        spicy = " (Spicy)" if self.is_spicy else ""
        return f"Appetizer: {self.name} - ${format_amount(self.price)}{spicy}"

    def display(self, file: TextIO | None = None) -> None:
        """Print a one-line description of the appetizer."""
        print(self, file=file)


@dataclass
class Entree(Dish):
    """A main course with a calorie count."""

    calories: int = 0

    def __str__(self) -> str:
        return (
            f"Entree: {self.name} - ${format_amount(self.price)}, "
            f"{self.calories} calories"
        )

    def display(self, file: TextIO | None = None) -> None:
        """Print a one-line description of the entree."""
        print(self, file=file)


@dataclass
class Dessert(Dish):
    """A dessert that may contain nuts."""

    contains_nuts: bool = False

    def __str__(self) -> str:
        nuts = " (Contains Nuts)" if self.contains_nuts else ""
        return f"Dessert: {self.name} - ${format_amount(self.price)}{nuts}"

    def display(self, file: TextIO | None = None) -> None:
        """Print a one-line description of the dessert."""
        print(self, file=file)