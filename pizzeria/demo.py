"""Walk-through of toppings, decorators, menus, observers and ordering."""

from __future__ import annotations

import argparse
import random

from .components import (
    BeefSausage,
    GreenPeppers,
    Mushrooms,
    Onions,
    Pepperoni,
    ToppingGroup,
)
from .customer import Customer
from .menus import PizzaMenu, SpecialMenu
from .pizza import BasePizza, ExtraCheese, StuffedCrust
from .observers import Website


def _show_group(group: ToppingGroup) -> None:
    print(f"{group.name} , Price: R{group.price:g}")


def main(argv: list[str] | None = None) -> int:
    """Run the walk-through, printing to standard output."""
    parser = argparse.ArgumentParser(prog="pizzeria-demo", description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for payment outcomes")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    pepperoni = Pepperoni()
    vegetarian = ToppingGroup("Vegetarian")
    empty_copy = vegetarian.clone()
    deluxe = ToppingGroup("Vegetarian Deluxe")
    vegetarian.add(Mushrooms())
    vegetarian.add(GreenPeppers())
    vegetarian.add(Onions())
    vegetarian.add(None)
    vegetarian.add(pepperoni)
    _show_group(vegetarian)
    vegetarian.remove(pepperoni)
    deluxe.add(empty_copy)
    _show_group(vegetarian)

    print("\nTESTING DECORATOR")
    base = BasePizza(Mushrooms())
    extra_cheese = ExtraCheese(base)
    stuffed = StuffedCrust(extra_cheese)
    stuffed.print_pizza()
    extra_cheese.print_pizza()
    stuffed.print_pizza()
    print("\nTESTING the cloning for Pizza classes")
    print("\n The original")
    stuffed.print_pizza()
    print("\n The clone")
    second_stuffed = stuffed.clone()
    second_stuffed.print_pizza()

    print("\nTesting the Observers")
    first_customer = Customer()
    website = Website()
    second_customer = Customer()
    first_customer.update("Help")
    website.update("More Help")

    print("\nTesting the Menus")
    meat_lovers = ToppingGroup("Meat lovers")
    meat_lovers.add(Pepperoni())
    meat_lovers.add(BeefSausage())
    meat_copy = meat_lovers.clone()
    extras = second_stuffed.clone()
    special = SpecialMenu()
    for observer in (first_customer, website, second_customer):
        special.add_observer(observer)
    special.add_pizza(second_stuffed)
    special.add_pizza(extras)
    special.remove_pizza(extras)
    result = special.menu_index(1)
    result.print_pizza()
    another = BasePizza(meat_copy)
    print("\n Testing the PizzaMenu\n")
    menu = PizzaMenu()
    for observer in (first_customer, website, second_customer):
        menu.add_observer(observer)
    menu.add_pizza(another)
    menu.add_pizza(result)

    print("\n\t Testing the state and strategy design patterns\n\t ****************")
    timmy = Customer(rng=rng)
    timmy.make_order()
    timmy.add_to_order(another.clone())
    timmy.add_to_order(another.clone())
    for _ in range(4):
        timmy.proceed()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())