"""Shared pytest fixtures for coffee shop tests."""

from collections.abc import Callable

import pytest
from loguru import logger

from coffee_shop.menu import BeverageFactory
from coffee_shop.service import BrewStation, OrderRegistry, OrderService


class RecordingService(OrderService):
    """OrderService that remembers every call before delegating."""

    def __init__(self) -> None:
        super().__init__(OrderRegistry(), BrewStation())
        self.calls: list[tuple] = []

    def place_order(self, customer_name, beverage, toppings) -> None:
        self.calls.append((customer_name, beverage, tuple(toppings)))
        super().place_order(customer_name, beverage, toppings)


@pytest.fixture
def factory() -> BeverageFactory:
    return BeverageFactory()


@pytest.fixture
def service() -> RecordingService:
    """A real OrderService that also records the orders it placed."""
    return RecordingService()


@pytest.fixture
def scripted_input() -> Callable[..., Callable[[str], str]]:
    """Build a reader that replays the given lines, then raises EOFError."""

    def _make(*lines: str) -> Callable[[str], str]:
        remaining = list(lines)

        def _read(prompt: str = "") -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        return _read

    return _make


@pytest.fixture
def isolated_logging():
    """Drop any loguru sinks a test installed (they may point at capsys streams)."""
    yield
    logger.remove()
