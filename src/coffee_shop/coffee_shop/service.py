"""Order placement: registry, brew station, and the facade tying them together."""

from loguru import logger

from .models import Beverage, Order, Topping


class OrderRegistry:
    """Announces each order. One instance is built at startup and injected."""

    def record(self, customer_name: str, beverage: Beverage) -> None:
        logger.info("Recording order for {}: {}", customer_name, beverage.describe())
        print(f"{customer_name} ordered a {beverage.describe()}")


class BrewStation:
    def brew(
        self,
        customer_name: str,
        beverage: Beverage,
        toppings: tuple[Topping, ...] | list[Topping],
    ) -> None:
        print(f"Brewing {beverage.describe()} for {customer_name}")
        if toppings:
            print("Adding toppings: " + " ".join(t.name for t in toppings))
        logger.debug("Brewed {} with {} topping(s)", beverage.kind.value, len(toppings))


class OrderService:
    """Facade: record the order, then brew it."""

    def __init__(
        self, registry: OrderRegistry, station: BrewStation | None = None
    ) -> None:
        self.registry = registry
        self.station = station or BrewStation()

    def place_order(
        self,
        customer_name: str,
        beverage: Beverage,
        toppings: tuple[Topping, ...] | list[Topping],
    ) -> None:
        self.registry.record(customer_name, beverage)
        self.station.brew(customer_name, beverage, toppings)


class OrderCommand:
    """Captures one order and places it through `service` when executed."""

    def __init__(self, order: Order, service: OrderService) -> None:
        self.order = order
        self.service = service

    def execute(self) -> None:
        self.service.place_order(
            self.order.customer_name, self.order.beverage, self.order.toppings
        )
