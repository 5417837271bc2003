"""Coffee shop console menu: order an espresso or latte with toppings."""

from .controller import MenuController
from .enums import BeverageKind, MenuState
from .menu import BeverageFactory, parse_toppings
from .models import Beverage, Order, Topping
from .service import BrewStation, OrderCommand, OrderRegistry, OrderService

__all__ = [
    "Beverage",
    "BeverageFactory",
    "BeverageKind",
    "BrewStation",
    "MenuController",
    "MenuState",
    "Order",
    "OrderCommand",
    "OrderRegistry",
    "OrderService",
    "Topping",
    "parse_toppings",
]
