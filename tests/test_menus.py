import pytest

from pizzeria.components import Mushrooms, Pepperoni
from pizzeria.menus import Menu, PizzaMenu, SpecialMenu
from pizzeria.observers import Observer
from pizzeria.pizza import BasePizza, ExtraCheese


class Recorder(Observer):
    def __init__(self):
        self.messages = []

    def update(self, message):
        self.messages.append(message)


class Failing(Observer):
    def update(self, message):
        raise RuntimeError("boom")


@pytest.fixture
def mushroom_pizza():
    return BasePizza(Mushrooms())


def test_menu_is_abstract():
    with pytest.raises(TypeError):
        Menu()


def test_special_menu_add_and_remove_messages(mushroom_pizza):
    menu = SpecialMenu()
    recorder = Recorder()
    menu.add_observer(recorder)
    menu.add_pizza(mushroom_pizza)
    menu.remove_pizza(mushroom_pizza)
    assert recorder.messages == [
        "Mushrooms has been added to the specials",
        "Mushrooms was removed from the specials",
    ]
    assert menu.pizzas == ()


def test_pizza_menu_messages(mushroom_pizza):
    menu = PizzaMenu()
    recorder = Recorder()
    menu.add_observer(recorder)
    menu.add_pizza(mushroom_pizza)
    menu.remove_pizza(mushroom_pizza)
    assert recorder.messages == [
        "Mushrooms has been added to the menu",
        "Mushrooms was removed from the menu",
    ]


def test_none_is_ignored(mushroom_pizza):
    menu = PizzaMenu()
    recorder = Recorder()
    menu.add_observer(recorder)
    menu.add_observer(None)
    menu.remove_observer(None)
    menu.add_pizza(None)
    menu.remove_pizza(None)
    assert menu.observers == (recorder,)
    assert recorder.messages == []


def test_remove_observer_stops_notifications(mushroom_pizza):
    menu = PizzaMenu()
    kept, dropped = Recorder(), Recorder()
    menu.add_observer(kept)
    menu.add_observer(dropped)
    menu.remove_observer(dropped)
    menu.add_pizza(mushroom_pizza)
    assert dropped.messages == []
    assert len(kept.messages) == 1


def test_every_observer_is_notified(mushroom_pizza):
    menu = SpecialMenu()
    first, second, third = Recorder(), Recorder(), Recorder()
    menu.add_observer(first)
    menu.add_observer(second)
    menu.add_observer(third)
    menu.add_pizza(mushroom_pizza)
    expected = ["Mushrooms has been added to the specials"]
    assert first.messages == expected
    assert second.messages == expected
    assert third.messages == expected


def test_failing_observer_is_reported(mushroom_pizza, capsys):
    menu = PizzaMenu()
    after = Recorder()
    menu.add_observer(Failing())
    menu.add_observer(after)
    menu.add_pizza(mushroom_pizza)
    assert "Error notifying observer: boom" in capsys.readouterr().err
    assert after.messages == ["Mushrooms has been added to the menu"]


def test_menu_index_returns_clone(mushroom_pizza):
    menu = SpecialMenu()
    menu.add_pizza(mushroom_pizza)
    menu.add_pizza(ExtraCheese(BasePizza(Pepperoni())))
    first = menu.menu_index(1)
    assert first is not mushroom_pizza
    assert (first.name, first.price) == (mushroom_pizza.name, mushroom_pizza.price)
    assert menu.menu_index(2).name == "Extra Cheese Pepperoni"


@pytest.mark.parametrize("index", [-1, 0, 3, 100])
def test_menu_index_out_of_range(index, mushroom_pizza):
    menu = PizzaMenu()
    menu.add_pizza(mushroom_pizza)
    menu.add_pizza(BasePizza(Pepperoni()))
    assert menu.menu_index(index) is None


def test_menu_index_on_empty_menu():
    assert PizzaMenu().menu_index(1) is None


def test_remove_only_that_pizza():
    menu = PizzaMenu()
    first = BasePizza(Mushrooms())
    second = BasePizza(Mushrooms())
    menu.add_pizza(first)
    menu.add_pizza(second)
    menu.remove_pizza(first)
    assert menu.pizzas == (second,)