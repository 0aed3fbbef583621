"""
Order model for the coffee machine.

An order names the drink type and the cup size. It is built once per request
and never mutated afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeVar, Type, Union


class CoffeeSize(str, Enum):
    """Cup sizes a recipe can define water amounts for."""
    SMALL = "small"
    STANDARD = "standard"
    LARGE = "large"
    XL = "xl"


class CoffeeType(str, Enum):
    """Drink types known to the machine."""
    ESPRESSO = "espresso"
    LUNGO = "lungo"
    AMERICANO = "americano"
    CAPPUCCINO = "cappuccino"
    LATTE = "latte"
    FLAT_WHITE = "flat_white"


_E = TypeVar("_E", CoffeeSize, CoffeeType)


def parse_enum(enum_cls: Type[_E], value: Union[_E, str]) -> _E:
    """
    Resolve an enum member from a member or its string value.

    Args:
        enum_cls: ``CoffeeSize`` or ``CoffeeType``.
        value: A member, a value (``"standard"``) or a member name (``"STANDARD"``).

    Returns:
        The matching enum member.

    Raises:
        ValueError: If ``value`` does not name a member of ``enum_cls``.
    """
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise ValueError(f"{enum_cls.__name__} expects a string, got {type(value).__name__}")
    key = value.strip().lower()
    for member in enum_cls:
        if member.value == key:
            return member
    allowed = [m.value for m in enum_cls]
    raise ValueError(f"Unknown {enum_cls.__name__} '{value}'. Allowed: {allowed}")


@dataclass(frozen=True)
class CoffeeOrder:
    """
    A customer request for a single drink.

    Attributes:
        size: The requested cup size.
        type: The requested drink type.
    """
    size: CoffeeSize
    type: CoffeeType

    @classmethod
    def of(cls, size: Union[CoffeeSize, str], type: Union[CoffeeType, str]) -> "CoffeeOrder":
        return cls(size=parse_enum(CoffeeSize, size), type=parse_enum(CoffeeType, type))
