"""CLI entry point for the coffee shop menu.

Usage:
    coffee-shop
    python -m coffee_shop.main
"""

import sys

from loguru import logger

from .config import get_settings
from .controller import MenuController
from .logging import setup_logging
from .service import BrewStation, OrderRegistry, OrderService


def main() -> int:
    """Run the coffee shop menu and return the exit status."""
    settings = get_settings()

    setup_logging(level=settings.log_level, log_dir=settings.log_dir)
    logger.info("Starting coffee shop menu")

    service = OrderService(OrderRegistry(), BrewStation())
    controller = MenuController(service, customer_name=settings.customer_name)
    return controller.run()


if __name__ == "__main__":
    sys.exit(main())
