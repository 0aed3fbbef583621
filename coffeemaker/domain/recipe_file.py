from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from coffeemaker.domain.order import CoffeeSize, CoffeeType
from coffeemaker.domain.recipe import CoffeeRecipe


class RecipeEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    water: Dict[CoffeeSize, NonNegativeInt] = Field(min_length=1)
    milk: int = Field(0, ge=0)

    def to_recipe(self) -> CoffeeRecipe:
        return CoffeeRecipe(water_amounts=dict(self.water), milk_amount=self.milk)


class RecipeFile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    version: int = 1
    recipes: Dict[CoffeeType, RecipeEntry] = Field(default_factory=dict)

    def to_recipes(self) -> dict[CoffeeType, CoffeeRecipe]:
        return {coffee_type: entry.to_recipe() for coffee_type, entry in self.recipes.items()}
