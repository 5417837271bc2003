"""Tests for the beverage, topping and order models."""

import pytest
from pydantic import ValidationError

from coffee_shop.enums import BeverageKind
from coffee_shop.menu import CARAMEL, WHIPPED_CREAM
from coffee_shop.models import Beverage, Order, Topping


class TestDescribe:
    """Verify the human-readable beverage description."""

    def test_base_beverages(self):
        """A beverage without toppings is described by its kind alone."""
        assert Beverage(kind=BeverageKind.ESPRESSO).describe() == "Espresso"
        assert Beverage(kind=BeverageKind.LATTE).describe() == "Latte"

    def test_toppings_appended_in_order(self):
        """Each topping is appended as ' with <name>' in the order given."""
        beverage = Beverage(kind=BeverageKind.ESPRESSO, toppings=(WHIPPED_CREAM, CARAMEL))
        assert beverage.describe() == "Espresso with Whipped Cream with Caramel"

    def test_repeated_topping_is_described_twice(self):
        """Duplicate toppings are not collapsed."""
        beverage = Beverage(kind=BeverageKind.LATTE, toppings=(CARAMEL, CARAMEL))
        assert beverage.describe() == "Latte with Caramel with Caramel"


class TestBeverage:
    """Verify beverages are immutable values."""

    def test_with_toppings_returns_new_beverage(self):
        """The base beverage must not change when toppings are attached."""
        base = Beverage(kind=BeverageKind.LATTE)
        topped = base.with_toppings([CARAMEL])

        assert base.toppings == ()
        assert topped.toppings == (CARAMEL,)
        assert topped.kind == BeverageKind.LATTE

    def test_beverage_is_frozen(self):
        """Assigning toppings after construction should fail."""
        beverage = Beverage(kind=BeverageKind.ESPRESSO)
        with pytest.raises(ValidationError):
            beverage.toppings = (CARAMEL,)

    def test_toppings_compare_by_name(self):
        """Two toppings with the same name are equal and hash alike."""
        assert Topping(name="Caramel") == CARAMEL
        assert hash(Topping(name="Caramel")) == hash(CARAMEL)


class TestOrder:
    """Verify how an order picks up its toppings."""

    def test_toppings_default_to_beverage_toppings(self):
        """Omitted toppings are taken from the beverage."""
        beverage = Beverage(kind=BeverageKind.ESPRESSO, toppings=(CARAMEL,))
        order = Order(customer_name="Customer", beverage=beverage)
        assert order.toppings == (CARAMEL,)

    def test_explicit_toppings_are_kept(self):
        """Toppings passed explicitly override the default."""
        beverage = Beverage(kind=BeverageKind.ESPRESSO)
        order = Order(customer_name="Ana", beverage=beverage, toppings=(WHIPPED_CREAM,))
        assert order.toppings == (WHIPPED_CREAM,)
