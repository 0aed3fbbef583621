from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any


@lru_cache
def load_recipe_config() -> dict[str, Any]:
    resource = resources.files("coffeemaker.resources").joinpath("recipes.json")
    with resource.open("r", encoding="utf-8") as f:
        return json.load(f)


__all__ = ["load_recipe_config"]
