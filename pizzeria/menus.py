"""Menus of pizzas that notify observers when they change."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod

from .observers import Observer
from .pizza import Pizza

_ADDED = " has been added"
_REMOVED = " was removed"


class Menu(ABC):
    """A list of pizzas with a list of observers."""

    def __init__(self) -> None:
        self._pizzas: list[Pizza] = []
        self._observers: list[Observer] = []

    @property
    def pizzas(self) -> tuple[Pizza, ...]:
        return tuple(self._pizzas)

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def add_observer(self, observer: Observer | None) -> None:
        """Attach an observer; ``None`` is ignored."""
        if observer is None:
            return
        self._observers.append(observer)

    def remove_observer(self, observer: Observer | None) -> None:
        """Detach every occurrence of this exact observer."""
        if observer is None:
            return
        self._observers = [ob for ob in self._observers if ob is not observer]

    def add_pizza(self, pizza: Pizza | None) -> None:
        """Put a pizza on the menu and tell the observers."""
        if pizza is None:
            return
        self._pizzas.append(pizza)
        self.notify_observers(pizza.name + _ADDED)

    def remove_pizza(self, pizza: Pizza | None) -> None:
        """Take every occurrence of this exact pizza off the menu and tell the observers."""
        if pizza is None:
            return
        self._pizzas = [item for item in self._pizzas if item is not pizza]
        self.notify_observers(pizza.name + _REMOVED)

    @abstractmethod
    def notify_observers(self, message: str) -> None:
        """Pass a change message on to every observer."""

    def menu_index(self, index: int) -> Pizza | None:
        """Return a copy of the pizza at 1-based ``index``, or ``None``."""
        if not 1 <= index <= len(self._pizzas):
            return None
        return self._pizzas[index - 1].clone()

    def _broadcast(self, message: str, place: str) -> None:
        suffix = f" to the {place}" if _ADDED in message else f" from the {place}"
        notice = message + suffix
        for observer in list(self._observers):
            try:
                observer.update(notice)
            except Exception as exc:
                print(f"Error notifying observer: {exc}", file=sys.stderr)


class PizzaMenu(Menu):
    """The regular menu."""

    def notify_observers(self, message: str) -> None:
        self._broadcast(message, "menu")


class SpecialMenu(Menu):
    """The specials board."""

    def notify_observers(self, message: str) -> None:
        self._broadcast(message, "specials")