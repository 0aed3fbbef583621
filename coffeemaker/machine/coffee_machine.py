"""
Order fulfilment for a single drink.

``CoffeeMachine.make`` looks up the recipe, grinds once, heats and pours milk
when the recipe asks for it, and always returns a ``Coffee``. Any error raised
by the grinder or the milk unit is turned into an ``ERROR`` result and never
leaves ``make``.
"""
from __future__ import annotations

import logging
from typing import Optional

from coffeemaker.domain.coffee import Coffee
from coffeemaker.domain.order import CoffeeOrder
from coffeemaker.domain.recipe import CoffeeRecipe
from coffeemaker.machine.base import CoffeeGrinder, CoffeeRecipes, MilkProvider
from coffeemaker.machine.exceptions import HeaterException

NO_BEANS_MESSAGE = "no coffee beans available"


class CoffeeMachine:
    def __init__(
        self,
        grinder: CoffeeGrinder,
        milk_provider: MilkProvider,
        recipes: CoffeeRecipes,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.grinder = grinder
        self.milk_provider = milk_provider
        self.recipes = recipes
        self.logger = logger or logging.getLogger(__name__)

    def make(self, order: CoffeeOrder) -> Coffee:
        """
        Prepare one drink.

        Args:
            order: The drink type and size to prepare.

        Returns:
            A ``READY`` coffee with the water and poured milk amounts, or an
            ``ERROR`` coffee whose message names the failing step.

        Raises:
            KeyError: If the recipe has no water amount for ``order.size``.
        """
        recipe = self.recipes.get_recipe(order.type)
        if recipe is None:
            self.logger.info("recipe_missing", extra={"details": {"type": order.type}})
            return Coffee.error(f"no recipe for {order.type.value}")

        try:
            ground = self.grinder.grind(order)
        except Exception as exc:
            # GrinderException and raw driver errors end the order the same way
            return self._fault("grinder_fault", "grinder failure", order, exc)
        if not ground:
            self.logger.info("no_beans", extra={"details": {"type": order.type, "size": order.size}})
            return Coffee.error(NO_BEANS_MESSAGE)

        milk_amount = 0
        if recipe.has_milk:
            try:
                milk_amount = self._add_milk(recipe)
            except HeaterException as exc:
                return self._fault("heater_fault", "milk heater failure", order, exc)
            except Exception as exc:
                return self._fault("milk_fault", "milk provider failure", order, exc)

        water_amount = recipe.water_amounts[order.size]
        self.logger.info(
            "coffee_ready",
            extra={"details": {"type": order.type, "size": order.size, "water": water_amount, "milk": milk_amount}},
        )
        return Coffee.ready(water_amount=water_amount, milk_amount=milk_amount)

    def _fault(self, event: str, reason: str, order: CoffeeOrder, exc: Exception) -> Coffee:
        self.logger.warning(event, extra={"details": {"type": order.type, "error": str(exc)}})
        return Coffee.error(f"{reason}: {exc}" if str(exc) else reason)

    def _add_milk(self, recipe: CoffeeRecipe) -> int:
        self.milk_provider.heat()
        poured = self.milk_provider.pour(recipe.milk_amount)
        if poured < recipe.milk_amount:
            self.logger.warning("short_pour", extra={"details": {"requested": recipe.milk_amount, "poured": poured}})
        return poured
