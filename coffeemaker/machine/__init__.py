"""
The order-fulfilment core and the collaborator interfaces it drives.

``CoffeeMachine`` coordinates a ``CoffeeRecipes`` lookup, a ``CoffeeGrinder``
and a ``MilkProvider``. ``BeanHopper`` and ``MilkTank`` are in-memory
implementations of the hardware collaborators.
"""
from coffeemaker.machine.base import CoffeeGrinder, CoffeeRecipes, MilkProvider
from coffeemaker.machine.coffee_machine import NO_BEANS_MESSAGE, CoffeeMachine
from coffeemaker.machine.exceptions import CoffeeMachineError, GrinderException, HeaterException
from coffeemaker.machine.simulated import BeanHopper, MilkTank

__all__ = [
    "BeanHopper",
    "CoffeeGrinder",
    "CoffeeMachine",
    "CoffeeMachineError",
    "CoffeeRecipes",
    "GrinderException",
    "HeaterException",
    "MilkProvider",
    "MilkTank",
    "NO_BEANS_MESSAGE",
]
