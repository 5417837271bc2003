from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import BeverageKind


class Topping(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class Beverage(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: BeverageKind
    toppings: tuple[Topping, ...] = Field(default_factory=tuple)

    def describe(self) -> str:
        """Human-readable description, e.g. "Espresso with Caramel"."""
        return self.kind.display_name + "".join(
            f" with {topping.name}" for topping in self.toppings
        )

    def with_toppings(
        self, toppings: list[Topping] | tuple[Topping, ...]
    ) -> "Beverage":
        """Return a new beverage of the same kind carrying `toppings`."""
        return Beverage(kind=self.kind, toppings=tuple(toppings))


class Order(BaseModel):
    customer_name: str
    beverage: Beverage
    toppings: tuple[Topping, ...] | None = Field(default=None)

    @model_validator(mode="after")
    def set_toppings_from_beverage(self) -> Self:
        if self.toppings is None:
            self.toppings = self.beverage.toppings
        return self
