"""
Collaborator interfaces consumed by ``CoffeeMachine``.

Each one is a narrow capability: recipe lookup, grinding, and milk handling.
Real hardware drivers, in-memory catalogs and test doubles all plug in here.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from coffeemaker.domain.order import CoffeeOrder, CoffeeType
from coffeemaker.domain.recipe import CoffeeRecipe


class CoffeeRecipes(ABC):
    @abstractmethod
    def get_recipe(self, coffee_type: CoffeeType) -> Optional[CoffeeRecipe]:
        """Return the recipe for ``coffee_type``, or ``None`` if there is none."""
        raise NotImplementedError


class CoffeeGrinder(ABC):
    @abstractmethod
    def grind(self, order: CoffeeOrder) -> bool:
        """
        Grind beans for one order.

        Returns:
            ``True`` when grounds were produced, ``False`` when there are not
            enough beans.

        Raises:
            GrinderException: On a mechanical fault.
        """
        raise NotImplementedError


class MilkProvider(ABC):
    @abstractmethod
    def heat(self) -> None:
        """
        Raises:
            HeaterException: If the milk could not be heated.
        """
        raise NotImplementedError

    @abstractmethod
    def pour(self, milk_amount: int) -> int:
        """
        Pour up to ``milk_amount`` of milk.

        Returns:
            The real amount poured, ``0 <= poured <= milk_amount``.
        """
        raise NotImplementedError
