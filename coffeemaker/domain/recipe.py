from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from coffeemaker.domain.order import CoffeeSize, parse_enum


@dataclass(frozen=True)
class CoffeeRecipe:
    """
    Water and milk quantities needed to prepare one drink type.

    Attributes:
        water_amounts: Water per cup size. Only sizes present here can be ordered.
        milk_amount: Milk per drink, independent of size. ``0`` means no milk.
    """
    water_amounts: Mapping[CoffeeSize, int] = field(default_factory=dict)
    milk_amount: int = 0

    def __post_init__(self) -> None:
        if self.milk_amount < 0:
            raise ValueError(f"milk_amount must be >= 0, got {self.milk_amount}")
        water_amounts = {parse_enum(CoffeeSize, size): amount for size, amount in self.water_amounts.items()}
        for size, amount in water_amounts.items():
            if amount < 0:
                raise ValueError(f"water amount for {size.value} must be >= 0, got {amount}")
        object.__setattr__(self, "water_amounts", MappingProxyType(water_amounts))

    @property
    def has_milk(self) -> bool:
        return self.milk_amount > 0

    def water_amount(self, size: CoffeeSize) -> int:
        return self.water_amounts[size]

    def supported_sizes(self) -> list[CoffeeSize]:
        order = list(CoffeeSize)
        return sorted(self.water_amounts, key=order.index)
