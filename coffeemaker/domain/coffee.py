"""
Result of processing a single order.

A ``Coffee`` is either a prepared drink (``READY``) with its water and milk
amounts, or a failed order (``ERROR``) carrying a human-readable message.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Status(str, Enum):
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class Coffee:
    """
    Outcome of ``CoffeeMachine.make``.

    Attributes:
        status: ``READY`` or ``ERROR``. Terminal.
        message: Failure reason; set only when ``status`` is ``ERROR``.
        water_amount: Water used, meaningful only when ``READY``.
        milk_amount: Milk actually poured, meaningful only when ``READY``.
    """
    status: Status
    message: Optional[str] = None
    water_amount: int = 0
    milk_amount: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", Status(self.status))
        if self.status is Status.ERROR:
            if not self.message:
                raise ValueError("An ERROR coffee requires a message.")
            if self.water_amount or self.milk_amount:
                raise ValueError("An ERROR coffee cannot carry water or milk amounts.")
        elif self.message is not None:
            raise ValueError("A READY coffee cannot carry a message.")

    @classmethod
    def ready(cls, water_amount: int, milk_amount: int = 0) -> "Coffee":
        return cls(status=Status.READY, water_amount=water_amount, milk_amount=milk_amount)

    @classmethod
    def error(cls, message: str) -> "Coffee":
        return cls(status=Status.ERROR, message=message)

    @property
    def is_ready(self) -> bool:
        return self.status is Status.READY
