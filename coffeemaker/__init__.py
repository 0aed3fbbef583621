from coffeemaker.catalog import RecipeCatalog, RecipeFileError
from coffeemaker.config import MachineSettings, get_settings
from coffeemaker.domain import Coffee, CoffeeOrder, CoffeeRecipe, CoffeeSize, CoffeeType, Status
from coffeemaker.factory import create_coffee_machine
from coffeemaker.machine import (
    NO_BEANS_MESSAGE,
    BeanHopper,
    CoffeeGrinder,
    CoffeeMachine,
    CoffeeRecipes,
    GrinderException,
    HeaterException,
    MilkProvider,
    MilkTank,
)
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "BeanHopper",
    "Coffee",
    "CoffeeGrinder",
    "CoffeeMachine",
    "CoffeeOrder",
    "CoffeeRecipe",
    "CoffeeRecipes",
    "CoffeeSize",
    "CoffeeType",
    "GrinderException",
    "HeaterException",
    "MachineSettings",
    "MilkProvider",
    "MilkTank",
    "NO_BEANS_MESSAGE",
    "RecipeCatalog",
    "RecipeFileError",
    "Status",
    "create_coffee_machine",
    "get_settings",
]

try:
    __version__ = version("coffeemaker")
except PackageNotFoundError:
    __version__ = "0.0.0"
