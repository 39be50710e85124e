"""A customer who watches menus and places orders."""

from __future__ import annotations

import sys
from typing import TextIO

from .observers import Observer
from .order import Order, RandomSource
from .pizza import Pizza


class Customer(Observer):
    """Hears about menu changes and can build up one order."""

    def __init__(self, stream: TextIO | None = None, rng: RandomSource | None = None) -> None:
        self._stream = stream
        self._rng = rng
        self.order: Order | None = None

    def update(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(
            f"Customer has received {message} \n and will update their known menus",
            file=stream,
        )

    def make_order(self) -> None:
        """Start an order unless one is already open."""
        if self.order is None:
            self.order = Order(stream=self._stream, rng=self._rng)

    def proceed(self) -> None:
        """Move the open order on a stage; does nothing without an order."""
        if self.order is not None:
            self.order.next()

    def add_to_order(self, pizza: Pizza) -> None:
        """Add a pizza to the open order; does nothing without an order."""
        if self.order is not None:
            self.order.add_pizza(pizza)