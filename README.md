# pizzeria

A small model of a pizzeria, usable as a library. It has no third-party
dependencies.

## What is in it

- **Toppings** (`pizzeria.components`): single toppings with a fixed
  name and price (in rand): `TomatoSauce` (5), `Onions` (8),
  `GreenPeppers` (10), `Mushrooms` (12), `Cheese` (15), `Olives` (15),
  `FetaCheese` (18), `Pepperoni` (20), `Salami` (22) and
  `BeefSausage` (25). `Topping(price, name)` makes any other.
  `ToppingGroup(name)` combines components: its `name` is
  `"<group> (<member>, <member>, ...)"` and its `price` is the sum of its
  members. `add(None)` is ignored; `remove(component)` takes out that
  exact object. Every component has `name`, `price` and `clone()`, which
  copies in depth.
- **Pizzas** (`pizzeria.pizza`): `BasePizza(toppings)` takes a topping
  or topping group, keeps its name and adds R10 for the dough (passing
  `None` raises `TypeError`). `ExtraCheese(pizza)` adds R12 and prefixes
  the name with "Extra Cheese"; with nothing wrapped it is just
  "Extra Cheese" at R12. `StuffedCrust(pizza)` adds R20 and prefixes
  "Stuffed Crust"; with nothing wrapped, reading its name or price raises
  `ValueError`. A decorator's `add(extra)` wraps `extra` only if nothing
  is wrapped yet. Every pizza has `name`, `price`, `clone()`,
  `describe()` (`"Pizza : <name> Price (ZAR): <price>"`) and
  `print_pizza(file=None)`.
- **Observers** (`pizzeria.observers`, `pizzeria.customer`): the
  abstract `Observer` with `update(message)`; `Website(stream=None)` and
  `Customer(stream=None, rng=None)` print the notices they receive.
- **Menus** (`pizzeria.menus`): `PizzaMenu` and `SpecialMenu` hold
  pizzas and observers. `add_pizza` and `remove_pizza` tell every
  observer, e.g. `"<name> has been added to the menu"` or
  `"<name> was removed from the specials"`. An observer that raises is
  reported on standard error and the others are still told.
  `menu_index(i)` returns a copy of the pizza at 1-based position `i`,
  or `None` if there is none.
- **Discounts** (`pizzeria.discounts`): `RegularPrice(total)`,
  `FamilyDiscount(total)` (15% off) and `BulkDiscount(total)` (10% off),
  each with `apply_discount()`.
- **Orders** (`pizzeria.order`): `Order(stream=None, rng=None)` holds
  pizzas (`add_pizza`, `count`, `total_price`) and a state that `next()`
  carries out: `Pick` → `Pay` → `Prepare` → `Finished`. At `Pay`, one
  draw in four (`rng.randrange(4) == 1`) declines the payment and sends
  the order back to `Pick`. An order of five or more pizzas gets the bulk
  discount; a smaller one is charged the regular or the family price at
  random. `Finished` stays finished. Adding `None` to an order raises
  `ValueError`. Pass a seeded `random.Random` as `rng` for repeatable
  outcomes.
- **Customers** (`pizzeria.customer`): `Customer.make_order()` opens
  one order, `add_to_order(pizza)` adds to it and `proceed()` moves it
  on; both do nothing while no order is open.

## Installation

```
pip install .
```

## Example

```python
import random

from pizzeria.components import ToppingGroup, Pepperoni, BeefSausage
from pizzeria.pizza import BasePizza, ExtraCheese
from pizzeria.menus import PizzaMenu
from pizzeria.observers import Website
from pizzeria.customer import Customer

meat = ToppingGroup("Meat lovers")
meat.add(Pepperoni())
meat.add(BeefSausage())

pizza = ExtraCheese(BasePizza(meat))
print(pizza.name)   # Extra Cheese Meat lovers (Pepperoni, Beef Sausage)
print(pizza.price)  # 67.0

menu = PizzaMenu()
menu.add_observer(Website())
menu.add_pizza(pizza)

customer = Customer(rng=random.Random(1))
customer.make_order()
customer.add_to_order(menu.menu_index(1))
customer.proceed()  # pick
customer.proceed()  # pay
```

## Demonstration

A walk-through of toppings, decorators, menus, observers and the order
workflow, printed to standard output:

```
pizzeria-demo
pizzeria-demo --seed 42
```

`--seed` fixes the payment and discount outcomes.

## What it does not do

Everything lives in memory: menus and orders are not stored anywhere.
Payment is simulated by a random draw; no money is handled. There is no
interactive ordering screen or server, only the library and the
demonstration command.

## Running the tests

```
pip install .[test]
pytest
```