import io

import pytest

from pizzeria.components import Mushrooms, Pepperoni, ToppingGroup
from pizzeria.pizza import BasePizza, ExtraCheese, Pizza, StuffedCrust


def test_pizza_is_abstract():
    with pytest.raises(TypeError):
        Pizza()


def test_base_pizza_adds_dough():
    toppings = Mushrooms()
    pizza = BasePizza(toppings)
    assert pizza.name == "Mushrooms"
    assert pizza.price == toppings.price + 10


def test_base_pizza_requires_toppings():
    with pytest.raises(TypeError):
        BasePizza(None)


def test_extra_cheese_wraps():
    base = BasePizza(Mushrooms())
    pizza = ExtraCheese(base)
    assert pizza.name == "Extra Cheese Mushrooms"
    assert pizza.price == base.price + 12


def test_extra_cheese_alone():
    pizza = ExtraCheese(None)
    assert pizza.name == "Extra Cheese"
    assert pizza.price == 12


def test_stuffed_crust_wraps():
    inner = ExtraCheese(BasePizza(Mushrooms()))
    pizza = StuffedCrust(inner)
    assert pizza.name == "Stuffed Crust Extra Cheese Mushrooms"
    assert pizza.price == inner.price + 20


def test_stuffed_crust_without_pizza_raises():
    with pytest.raises(ValueError):
        StuffedCrust(None).price


def test_add_only_fills_empty_slot():
    first = BasePizza(Mushrooms())
    second = BasePizza(Pepperoni())
    decorator = ExtraCheese(None)
    decorator.add(None)
    assert decorator.pizza is None
    decorator.add(first)
    decorator.add(second)
    assert decorator.pizza is first
    assert decorator.name == "Extra Cheese Mushrooms"


def test_describe_and_print():
    pizza = BasePizza(Mushrooms())
    assert pizza.describe() == "Pizza : Mushrooms Price (ZAR): 22"
    buffer = io.StringIO()
    pizza.print_pizza(buffer)
    assert buffer.getvalue() == pizza.describe() + "\n"


def test_print_defaults_to_stdout(capsys):
    pizza = ExtraCheese(None)
    pizza.print_pizza()
    assert capsys.readouterr().out == pizza.describe() + "\n"


def test_clone_of_decorated_pizza_matches():
    original = StuffedCrust(ExtraCheese(BasePizza(Mushrooms())))
    duplicate = original.clone()
    assert isinstance(duplicate, StuffedCrust)
    assert duplicate is not original
    assert duplicate.pizza is not original.pizza
    assert (duplicate.name, duplicate.price) == (original.name, original.price)


def test_clone_is_deep():
    group = ToppingGroup("G")
    group.add(Mushrooms())
    original = BasePizza(group)
    duplicate = original.clone()
    group.add(Pepperoni())
    assert duplicate.name == "G (Mushrooms)"
    assert original.price - duplicate.price == Pepperoni().price


def test_clone_of_empty_decorator():
    duplicate = ExtraCheese(None).clone()
    assert duplicate.pizza is None
    assert duplicate.name == "Extra Cheese"