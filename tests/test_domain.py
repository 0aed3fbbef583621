"""Tests for the order, recipe and coffee value types."""
import dataclasses

import pytest

from coffeemaker.domain import Coffee, CoffeeOrder, CoffeeRecipe, CoffeeSize, CoffeeType, Status


def test_order_of_accepts_strings():
    order = CoffeeOrder.of("standard", "flat_white")
    assert order == CoffeeOrder(size=CoffeeSize.STANDARD, type=CoffeeType.FLAT_WHITE)


def test_order_of_is_case_insensitive():
    order = CoffeeOrder.of("  LARGE ", "Espresso")
    assert order.size is CoffeeSize.LARGE
    assert order.type is CoffeeType.ESPRESSO


def test_order_of_accepts_members():
    order = CoffeeOrder.of(CoffeeSize.SMALL, CoffeeType.LATTE)
    assert order.size is CoffeeSize.SMALL


def test_order_of_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown CoffeeType"):
        CoffeeOrder.of("standard", "mocha")
    with pytest.raises(ValueError, match="Unknown CoffeeSize"):
        CoffeeOrder.of("venti", "latte")


def test_order_is_frozen():
    order = CoffeeOrder(size=CoffeeSize.STANDARD, type=CoffeeType.ESPRESSO)
    with pytest.raises(dataclasses.FrozenInstanceError):
        order.size = CoffeeSize.LARGE


def test_recipe_defaults_to_no_milk():
    recipe = CoffeeRecipe(water_amounts={CoffeeSize.STANDARD: 30})
    assert recipe.milk_amount == 0
    assert recipe.has_milk is False


def test_recipe_with_milk():
    recipe = CoffeeRecipe(water_amounts={CoffeeSize.STANDARD: 30}, milk_amount=100)
    assert recipe.has_milk is True


def test_recipe_rejects_negative_amounts():
    with pytest.raises(ValueError):
        CoffeeRecipe(water_amounts={CoffeeSize.STANDARD: 30}, milk_amount=-1)
    with pytest.raises(ValueError):
        CoffeeRecipe(water_amounts={CoffeeSize.STANDARD: -5})


def test_recipe_water_amounts_are_read_only():
    water = {CoffeeSize.STANDARD: 30}
    recipe = CoffeeRecipe(water_amounts=water)

    water[CoffeeSize.LARGE] = 60
    assert CoffeeSize.LARGE not in recipe.water_amounts

    with pytest.raises(TypeError):
        recipe.water_amounts[CoffeeSize.LARGE] = 60


def test_recipe_water_amount_lookup():
    recipe = CoffeeRecipe(water_amounts={CoffeeSize.SMALL: 20, CoffeeSize.LARGE: 50})
    assert recipe.water_amount(CoffeeSize.LARGE) == 50
    with pytest.raises(KeyError):
        recipe.water_amount(CoffeeSize.STANDARD)


def test_recipe_supported_sizes_in_size_order():
    recipe = CoffeeRecipe(water_amounts={CoffeeSize.XL: 90, CoffeeSize.SMALL: 20, CoffeeSize.STANDARD: 30})
    assert recipe.supported_sizes() == [CoffeeSize.SMALL, CoffeeSize.STANDARD, CoffeeSize.XL]


def test_coffee_ready():
    coffee = Coffee.ready(water_amount=30, milk_amount=100)
    assert coffee.status is Status.READY
    assert coffee.message is None
    assert coffee.is_ready is True


def test_coffee_error():
    coffee = Coffee.error("no coffee beans available")
    assert coffee.status is Status.ERROR
    assert coffee.message == "no coffee beans available"
    assert coffee.water_amount == 0
    assert coffee.milk_amount == 0
    assert coffee.is_ready is False


def test_coffee_error_requires_message():
    with pytest.raises(ValueError):
        Coffee.error("")
    with pytest.raises(ValueError):
        Coffee(status=Status.ERROR)


def test_coffee_ready_rejects_message():
    with pytest.raises(ValueError):
        Coffee(status=Status.READY, message="oops", water_amount=30)


def test_coffee_error_rejects_amounts():
    with pytest.raises(ValueError):
        Coffee(status=Status.ERROR, message="broken", water_amount=30)


def test_coffee_status_string_is_coerced():
    coffee = Coffee(status="error", message="grinder failure")
    assert coffee.status is Status.ERROR
    assert Coffee(status="ready", water_amount=30).status is Status.READY


def test_coffee_error_string_status_requires_message():
    with pytest.raises(ValueError, match="requires a message"):
        Coffee(status="error")


def test_coffee_unknown_status_rejected():
    with pytest.raises(ValueError):
        Coffee(status="brewing", water_amount=30)


def test_recipe_accepts_string_sizes():
    recipe = CoffeeRecipe(water_amounts={"standard": 30, "LARGE": 45})
    assert recipe.water_amount(CoffeeSize.STANDARD) == 30
    assert recipe.water_amount(CoffeeSize.LARGE) == 45


def test_recipe_string_size_with_negative_amount():
    with pytest.raises(ValueError, match="standard"):
        CoffeeRecipe(water_amounts={"standard": -1})
