"""Pizzas built on a topping base, optionally wrapped by decorators."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from .components import PizzaComponent

DOUGH_PRICE = 10.0
EXTRA_CHEESE_PRICE = 12.0
STUFFED_CRUST_PRICE = 20.0


def _format_price(value: float) -> str:
    return f"{value:g}"


class Pizza(ABC):
    """A pizza with a name and a price."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the pizza."""

    @property
    @abstractmethod
    def price(self) -> float:
        """Price of the pizza in rand."""

    @abstractmethod
    def clone(self) -> Pizza:
        """Return an independent copy of the pizza."""

    def describe(self) -> str:
        """One-line description with name and price."""
        return f"Pizza : {self.name} Price (ZAR): {_format_price(self.price)}"

    def print_pizza(self, file: TextIO | None = None) -> None:
        """Write the description to ``file`` (standard output by default)."""
        print(self.describe(), file=file if file is not None else sys.stdout)


class BasePizza(Pizza):
    """Dough plus a topping component."""

    def __init__(self, toppings: PizzaComponent) -> None:
        if toppings is None:
            raise TypeError("a base pizza needs toppings")
        self._toppings = toppings

    @property
    def toppings(self) -> PizzaComponent:
        return self._toppings

    @property
    def name(self) -> str:
        return self._toppings.name

    @property
    def price(self) -> float:
        return self._toppings.price + DOUGH_PRICE

    def clone(self) -> BasePizza:
        return BasePizza(self._toppings.clone())


class PizzaDecorator(Pizza):
    """A pizza that wraps another pizza and adds to it."""

    def __init__(self, pizza: Pizza | None = None) -> None:
        self._pizza = pizza

    @property
    def pizza(self) -> Pizza | None:
        return self._pizza

    def add(self, extra: Pizza | None) -> None:
        """Wrap ``extra`` if nothing is wrapped yet; otherwise do nothing."""
        if extra is None:
            return
        if self._pizza is None:
            self._pizza = extra

    def clone(self) -> PizzaDecorator:
        inner = self._pizza.clone() if self._pizza is not None else None
        return type(self)(inner)


class ExtraCheese(PizzaDecorator):
    """Adds extra cheese; works even with nothing wrapped."""

    @property
    def name(self) -> str:
        if self._pizza is None:
            return "Extra Cheese"
        return f"Extra Cheese {self._pizza.name}"

    @property
    def price(self) -> float:
        if self._pizza is None:
            return EXTRA_CHEESE_PRICE
        return EXTRA_CHEESE_PRICE + self._pizza.price


class StuffedCrust(PizzaDecorator):
    """Adds a stuffed crust; needs a wrapped pizza."""

    def _inner(self) -> Pizza:
        if self._pizza is None:
            raise ValueError("stuffed crust has no pizza to decorate")
        return self._pizza

    @property
    def name(self) -> str:
        return f"Stuffed Crust {self._inner().name}"

    @property
    def price(self) -> float:
        return STUFFED_CRUST_PRICE + self._inner().price