"""Interactive menu loop: main menu -> coffee menu -> exit."""

from typing import Callable

from loguru import logger

from .enums import MenuState
from .menu import BeverageFactory, parse_toppings
from .models import Order
from .service import OrderCommand, OrderService

MAIN_MENU_LINES = (
    "welcome to make your choice",
    "1. Order Coffee",
    "2. Exit",
    "Choose an action:",
)
COFFEE_PROMPT = (
    "Choose a coffee type (espresso/latte) or type 'exit' to go back to the main menu: "
)
TOPPINGS_PROMPT = "Enter toppings separated by commas (e.g., whipped cream, caramel): "
FAREWELL = "Exiting Coffee Shop. Thank you!"


class MenuController:
    """Drives the console menus until the customer exits.

    `read` is called once per prompt and returns the raw line; it may raise
    EOFError or KeyboardInterrupt, both of which end the session.
    """

    def __init__(
        self,
        service: OrderService,
        factory: BeverageFactory | None = None,
        customer_name: str = "Customer",
        read: Callable[[str], str] | None = None,
    ) -> None:
        self.service = service
        self.factory = factory or BeverageFactory()
        self.customer_name = customer_name
        self._read = read or input
        self.state = MenuState.MAIN_MENU

    def run(self) -> int:
        """Loop until EXIT and return the process exit status."""
        logger.info("Menu session started for {}", self.customer_name)
        while self.state != MenuState.EXIT:
            if self.state == MenuState.MAIN_MENU:
                self.state = self.main_menu()
            else:
                self.state = self.coffee_menu()
        print(FAREWELL)
        logger.info("Menu session ended")
        return 0

    def _ask(self, lines: tuple[str, ...] | str) -> str | None:
        """Print the prompt and read one line. None means input is closed."""
        for line in (lines,) if isinstance(lines, str) else lines:
            print(line)
        try:
            return self._read("")
        except (EOFError, KeyboardInterrupt):
            print()
            logger.debug("Input closed at prompt")
            return None

    def main_menu(self) -> MenuState:
        answer = self._ask(MAIN_MENU_LINES)
        if answer is None:
            return MenuState.EXIT
        try:
            choice = int(answer.strip())
        except ValueError:
            choice = None
        if choice == 1:
            return MenuState.COFFEE_MENU
        if choice == 2:
            return MenuState.EXIT
        logger.debug("Invalid main menu choice: {!r}", answer)
        print("Invalid choice. Try again.")
        return MenuState.MAIN_MENU

    def coffee_menu(self) -> MenuState:
        """Take orders until the customer types 'exit'."""
        while True:
            keyword = self._ask(COFFEE_PROMPT)
            if keyword is None:
                return MenuState.EXIT
            if keyword.strip().lower() == "exit":
                return MenuState.MAIN_MENU

            beverage = self.factory.create(keyword)
            if beverage is None:
                print("Invalid coffee type. Try again.")
                continue

            toppings_text = self._ask(TOPPINGS_PROMPT)
            if toppings_text is None:
                return MenuState.EXIT
            toppings = parse_toppings(toppings_text)
            if toppings:
                beverage = beverage.with_toppings(toppings)

            order = Order(customer_name=self.customer_name, beverage=beverage)
            OrderCommand(order, self.service).execute()
