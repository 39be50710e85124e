"""Pizza toppings and named groups of toppings."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod


class PizzaComponent(ABC):
    """Something that can go on a pizza: it has a name and a price."""

    def __init__(self, price: float, name: str) -> None:
        self._price = float(price)
        self._name = name

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the component."""

    @property
    @abstractmethod
    def price(self) -> float:
        """Price of the component in rand."""

    @abstractmethod
    def clone(self) -> PizzaComponent:
        """Return an independent copy of the component."""


class Topping(PizzaComponent):
    """A single topping with a fixed price."""

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> float:
        return self._price

    def clone(self) -> Topping:
        return copy.copy(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(price={self._price!r}, name={self._name!r})"


class ToppingGroup(PizzaComponent):
    """A named collection of components, priced as the sum of its parts."""

    def __init__(self, name: str) -> None:
        super().__init__(0, name)
        self._toppings: list[PizzaComponent] = []

    @property
    def toppings(self) -> tuple[PizzaComponent, ...]:
        """The components in the order they were added."""
        return tuple(self._toppings)

    def add(self, component: PizzaComponent | None) -> None:
        """Append a component; ``None`` is ignored."""
        if component is None:
            return
        self._toppings.append(component)

    def remove(self, component: PizzaComponent | None) -> None:
        """Remove every occurrence of this exact component; ``None`` is ignored."""
        if component is None:
            return
        self._toppings = [item for item in self._toppings if item is not component]

    @property
    def name(self) -> str:
        inner = ", ".join(item.name for item in self._toppings)
        return f"{self._name} ({inner})"

    @property
    def price(self) -> float:
        return sum((item.price for item in self._toppings), 0.0)

    def clone(self) -> ToppingGroup:
        duplicate = ToppingGroup(self._name)
        for item in self._toppings:
            duplicate.add(item.clone())
        return duplicate

    def __len__(self) -> int:
        return len(self._toppings)

    def __iter__(self):
        return iter(self._toppings)


class BeefSausage(Topping):
    def __init__(self) -> None:
        super().__init__(25.00, "Beef Sausage")


class Cheese(Topping):
    def __init__(self) -> None:
        super().__init__(15.00, "Cheese")


class FetaCheese(Topping):
    def __init__(self) -> None:
        super().__init__(18.00, "Feta Cheese")


class GreenPeppers(Topping):
    def __init__(self) -> None:
        super().__init__(10.00, "Green Peppers")


class Mushrooms(Topping):
    def __init__(self) -> None:
        super().__init__(12.00, "Mushrooms")


class Olives(Topping):
    def __init__(self) -> None:
        super().__init__(15.00, "Olives")


class Onions(Topping):
    def __init__(self) -> None:
        super().__init__(8.00, "Onions")


class Pepperoni(Topping):
    def __init__(self) -> None:
        super().__init__(20.00, "Pepperoni")


class Salami(Topping):
    def __init__(self) -> None:
        super().__init__(22.00, "Salami")


class TomatoSauce(Topping):
    def __init__(self) -> None:
        super().__init__(5.00, "Tomato Sauce")