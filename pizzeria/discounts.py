"""Pricing strategies applied to an order total."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DiscountStrategy(ABC):
    """Computes the amount due for a given total."""

    def __init__(self, price: float) -> None:
        self.price = float(price)

    @abstractmethod
    def apply_discount(self) -> float:
        """Return the total after the discount."""


class BulkDiscount(DiscountStrategy):
    """Ten percent off."""

    def apply_discount(self) -> float:
        return self.price * 0.9


class FamilyDiscount(DiscountStrategy):
    """Fifteen percent off."""

    def apply_discount(self) -> float:
        return self.price * 0.85


class RegularPrice(DiscountStrategy):
    """No discount."""

    def apply_discount(self) -> float:
        return self.price