"""
In-process stand-ins for the grinder and milk unit.

They keep simple stock counters so a ``CoffeeMachine`` can be exercised end to
end without hardware. Fault flags let callers reproduce grinder jams and
heater failures.
"""
from __future__ import annotations

from typing import Mapping, Optional

from coffeemaker.domain.order import CoffeeOrder, CoffeeSize
from coffeemaker.machine.base import CoffeeGrinder, MilkProvider
from coffeemaker.machine.exceptions import GrinderException, HeaterException

# Grams of beans per cup size.
DEFAULT_DOSES: dict[CoffeeSize, int] = {
    CoffeeSize.SMALL: 7,
    CoffeeSize.STANDARD: 9,
    CoffeeSize.LARGE: 14,
    CoffeeSize.XL: 18,
}


class BeanHopper(CoffeeGrinder):
    def __init__(
        self,
        beans_g: int = 250,
        dose_by_size: Optional[Mapping[CoffeeSize, int]] = None,
        jammed: bool = False,
    ) -> None:
        if beans_g < 0:
            raise ValueError("beans_g must be >= 0")
        self.beans_g = beans_g
        self.dose_by_size = dict(dose_by_size or DEFAULT_DOSES)
        self.jammed = jammed
        self.grind_count = 0

    def grind(self, order: CoffeeOrder) -> bool:
        self.grind_count += 1
        if self.jammed:
            raise GrinderException("burr jammed")
        dose = self.dose_by_size[order.size]
        if self.beans_g < dose:
            return False
        self.beans_g -= dose
        return True

    def refill(self, grams: int) -> None:
        if grams < 0:
            raise ValueError("grams must be >= 0")
        self.beans_g += grams


class MilkTank(MilkProvider):
    def __init__(self, milk_ml: int = 500, heater_broken: bool = False) -> None:
        if milk_ml < 0:
            raise ValueError("milk_ml must be >= 0")
        self.milk_ml = milk_ml
        self.heater_broken = heater_broken
        self.heated = False

    def heat(self) -> None:
        if self.heater_broken:
            raise HeaterException("heating element did not reach temperature")
        self.heated = True

    def pour(self, milk_amount: int) -> int:
        if milk_amount < 0:
            raise ValueError("milk_amount must be >= 0")
        poured = min(milk_amount, self.milk_ml)
        self.milk_ml -= poured
        self.heated = False
        return poured

    def refill(self, ml: int) -> None:
        if ml < 0:
            raise ValueError("ml must be >= 0")
        self.milk_ml += ml
