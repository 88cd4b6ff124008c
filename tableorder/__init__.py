"""Restaurant ordering: dishes, a menu, customers, orders and the restaurant."""

__version__ = "0.1.0"
__all__ = ["dishes", "menu", "order", "customer", "restaurant"]