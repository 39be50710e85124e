"""Pizzeria model: toppings, decorated pizzas, observable menus, discounts, orders and a demonstration."""

__version__ = "0.1.0"