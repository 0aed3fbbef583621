from __future__ import annotations

from typing import Optional

from coffeemaker.catalog import RecipeCatalog
from coffeemaker.config import MachineSettings, get_settings
from coffeemaker.logging import create_logger
from coffeemaker.machine.base import CoffeeGrinder, CoffeeRecipes, MilkProvider
from coffeemaker.machine.coffee_machine import CoffeeMachine


def load_catalog(settings: MachineSettings) -> RecipeCatalog:
    if settings.recipes_path:
        return RecipeCatalog.from_file(settings.recipes_path)
    return RecipeCatalog.default()


def create_coffee_machine(
    grinder: CoffeeGrinder,
    milk_provider: MilkProvider,
    recipes: Optional[CoffeeRecipes] = None,
    settings: Optional[MachineSettings] = None,
) -> CoffeeMachine:
    settings = settings or get_settings()
    logger = create_logger(settings.logger_name, ring_size=settings.log_ring_size, level=settings.log_level)
    return CoffeeMachine(
        grinder=grinder,
        milk_provider=milk_provider,
        recipes=recipes if recipes is not None else load_catalog(settings),
        logger=logger,
    )
