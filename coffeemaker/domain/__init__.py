"""
This package defines the value types of the coffeemaker library: the order a
customer places, the recipe the machine follows, and the coffee it returns.

All of them are immutable and created per order.
"""
from coffeemaker.domain.coffee import Coffee, Status
from coffeemaker.domain.order import CoffeeOrder, CoffeeSize, CoffeeType
from coffeemaker.domain.recipe import CoffeeRecipe

__all__ = ["Coffee", "CoffeeOrder", "CoffeeRecipe", "CoffeeSize", "CoffeeType", "Status"]
