"""Orders and the states an order moves through: pick, pay, prepare, finished."""

from __future__ import annotations

import random
import sys
from abc import ABC, abstractmethod
from typing import Protocol, TextIO

from .discounts import BulkDiscount, DiscountStrategy, FamilyDiscount, RegularPrice
from .pizza import Pizza

BULK_ORDER_SIZE = 5


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def _format_amount(value: float) -> str:
    return f"{value:g}"


class Process(ABC):
    """One stage of an order; it moves the order on to the next stage."""

    def __init__(self, order: Order) -> None:
        self.order = order

    def _say(self, text: str) -> None:
        print(text, file=self.order.output)

    @abstractmethod
    def proceed(self) -> None:
        """Carry out this stage."""


class Pick(Process):
    """The customer chooses pizzas; payment comes next."""

    def proceed(self) -> None:
        self._say("Please pick your pizzas")
        self.order.set_state(Pay(self.order))


class Pay(Process):
    """Payment, which may be approved or declined at random."""

    def __init__(self, order: Order) -> None:
        super().__init__(order)
        self.discount: DiscountStrategy | None = None

    def proceed(self) -> None:
        decision = self.order.rng.randrange(4)
        if decision == 1:
            self._say("The payment was declined maybe your balance is to low")
            self._say(f"The total was: {_format_amount(self.apply_discount())}")
            self.declined()
        else:
            self._say("The payment was approved")
            self._say(f"The total was: R{_format_amount(self.apply_discount())}")
            self.approved()

    def apply_discount(self) -> float:
        """Choose a pricing strategy for the order and return the amount due."""
        total = self.total()
        if self.order.count >= BULK_ORDER_SIZE:
            self.discount = BulkDiscount(total)
        elif self.order.rng.randrange(2) == 0:
            self.discount = RegularPrice(total)
        else:
            self.discount = FamilyDiscount(total)
        return self.discount.apply_discount()

    def declined(self) -> None:
        """Send the order back to picking."""
        self.order.set_state(Pick(self.order))

    def approved(self) -> None:
        """Send the order on to the kitchen."""
        self.order.set_state(Prepare(self.order))

    def total(self) -> float:
        """The undiscounted order total."""
        return self.order.total_price


class Prepare(Process):
    """The kitchen makes the pizzas."""

    def proceed(self) -> None:
        self._say("The chiefs are preparing your order")
        self.order.set_state(Finished(self.order))


class Finished(Process):
    """The order is done; proceeding again changes nothing."""

    def proceed(self) -> None:
        self._say("Order is complete...")


class Order:
    """A list of pizzas and the stage the order has reached."""

    def __init__(self, stream: TextIO | None = None, rng: RandomSource | None = None) -> None:
        self._pizzas: list[Pizza] = []
        self._stream = stream
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self._state: Process = Pick(self)

    @property
    def output(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def state(self) -> Process:
        return self._state

    @property
    def pizzas(self) -> tuple[Pizza, ...]:
        return tuple(self._pizzas)

    def next(self) -> None:
        """Carry out the current stage."""
        self._state.proceed()

    def set_state(self, state: Process) -> None:
        """Move the order to ``state``."""
        if state is None:
            raise ValueError("an order needs a state")
        self._state = state

    def add_pizza(self, pizza: Pizza) -> None:
        """Add a pizza to the order."""
        if pizza is None:
            raise ValueError("cannot add a missing pizza to an order")
        self._pizzas.append(pizza)

    @property
    def count(self) -> int:
        """Number of pizzas in the order."""
        return len(self._pizzas)

    @property
    def total_price(self) -> float:
        """Sum of the prices of the pizzas."""
        return sum((pizza.price for pizza in self._pizzas), 0.0)