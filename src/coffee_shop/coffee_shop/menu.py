"""Menu lookups: beverage keywords and topping parsing.

Both tables are keyed by the lower-cased keyword the customer types.
"""

from functools import partial
from typing import Callable

from loguru import logger

from .enums import BeverageKind
from .models import Beverage, Topping

WHIPPED_CREAM = Topping(name="Whipped Cream")
CARAMEL = Topping(name="Caramel")

TOPPINGS: dict[str, Topping] = {
    "whipped cream": WHIPPED_CREAM,
    "caramel": CARAMEL,
}


class BeverageFactory:
    """Maps a beverage keyword to a constructor for a fresh base beverage."""

    def __init__(self) -> None:
        self._constructors: dict[str, Callable[[], Beverage]] = {
            kind.value: partial(Beverage, kind=kind) for kind in BeverageKind
        }

    @property
    def keywords(self) -> list[str]:
        return list(self._constructors)

    def get(self, keyword: str) -> Callable[[], Beverage] | None:
        return self._constructors.get(keyword.strip().lower())

    def create(self, keyword: str) -> Beverage | None:
        """Build a base beverage (no toppings), or None for an unknown keyword."""
        constructor = self.get(keyword)
        if constructor is None:
            logger.debug("No beverage registered for keyword {!r}", keyword)
            return None
        return constructor()


def parse_toppings(text: str) -> list[Topping]:
    """Parse a comma-separated toppings line.

    Tokens are trimmed and lower-cased before lookup. Unknown tokens are
    reported to the customer and dropped; empty tokens are skipped.
    """
    toppings: list[Topping] = []
    for raw in text.split(","):
        token = raw.strip().lower()
        if not token:
            continue
        topping = TOPPINGS.get(token)
        if topping is None:
            logger.info("Dropping unknown topping {!r}", token)
            print(f"Invalid topping: {token}")
            continue
        toppings.append(topping)
    return toppings
