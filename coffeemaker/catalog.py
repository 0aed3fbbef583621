"""
In-memory recipe catalog.

Provides the ``CoffeeRecipes`` lookup used by ``CoffeeMachine``, backed by a
plain mapping of drink type to recipe. Catalogs can be built from the bundled
``recipes.json`` or from any JSON file with the same layout.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from coffeemaker.domain.order import CoffeeType, parse_enum
from coffeemaker.domain.recipe import CoffeeRecipe
from coffeemaker.domain.recipe_file import RecipeFile
from coffeemaker.machine.base import CoffeeRecipes
from coffeemaker.resources import load_recipe_config


class RecipeFileError(ValueError):
    pass


def parse_recipe_config(data: Any, source: str = "<memory>") -> dict[CoffeeType, CoffeeRecipe]:
    """
    Validate a decoded recipe document.

    Args:
        data: The decoded JSON document.
        source: Where the document came from, used in error messages.

    Returns:
        Drink type -> recipe mapping.

    Raises:
        RecipeFileError: If the document does not match the recipe schema.
    """
    try:
        return RecipeFile.model_validate(data).to_recipes()
    except ValidationError as exc:
        raise RecipeFileError(f"Invalid recipe file '{source}': {exc}") from exc


class RecipeCatalog(CoffeeRecipes):
    """
    Read-only catalog of recipes keyed by drink type.
    """

    def __init__(self, recipes: Optional[Mapping[CoffeeType, CoffeeRecipe]] = None) -> None:
        self._by_type: dict[CoffeeType, CoffeeRecipe] = dict(recipes or {})

    @classmethod
    def default(cls) -> "RecipeCatalog":
        """Build a catalog from the recipes shipped with the package."""
        return cls(parse_recipe_config(load_recipe_config(), source="coffeemaker/resources/recipes.json"))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "RecipeCatalog":
        """
        Build a catalog from a JSON recipe file.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            RecipeFileError: If the file is not valid JSON or fails validation.
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise RecipeFileError(f"Invalid recipe file '{path}': {exc}") from exc
        return cls(parse_recipe_config(data, source=str(path)))

    def get_recipe(self, coffee_type: CoffeeType) -> Optional[CoffeeRecipe]:
        return self._by_type.get(coffee_type)

    def all(self) -> list[tuple[CoffeeType, CoffeeRecipe]]:
        """Return ``(type, recipe)`` pairs sorted by type value."""
        return sorted(self._by_type.items(), key=lambda item: item[0].value)

    def list_with_milk(self) -> list[CoffeeType]:
        return [coffee_type for coffee_type, recipe in self.all() if recipe.has_milk]

    def __len__(self) -> int:
        return len(self._by_type)

    def __contains__(self, item: Union[CoffeeType, str]) -> bool:
        try:
            return parse_enum(CoffeeType, item) in self._by_type
        except ValueError:
            return False
