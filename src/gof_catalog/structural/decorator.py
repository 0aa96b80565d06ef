"""
Decorator - add responsibilities to an object by wrapping it.

Each topping wraps a pizza, extends its name and adds a fixed amount to
its cost. Toppings stack in any order and the cost is always the base
plus every increment.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gof_catalog.harness.sink import OutputSink


class Pizza(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def cost(self) -> int: ...


class ItalianPizza(Pizza):
    def __init__(self) -> None:
        super().__init__("Italian pizza")

    def cost(self) -> int:
        return 10


class BulgarianPizza(Pizza):
    def __init__(self) -> None:
        super().__init__("Bulgarian pizza")

    def cost(self) -> int:
        return 8


class PizzaDecorator(Pizza):
    """Forwards to the wrapped pizza and adds its own increment."""

    increment: int = 0
    topping: str = ""

    def __init__(self, pizza: Pizza):
        super().__init__(f"{pizza.name}, with {self.topping}")
        self.pizza = pizza

    def cost(self) -> int:
        return self.pizza.cost() + self.increment


class TomatoPizza(PizzaDecorator):
    increment = 3
    topping = "tomatoes"


class CheesePizza(PizzaDecorator):
    increment = 5
    topping = "cheese"


def run_scenario(sink: OutputSink) -> None:
    """Order three pizzas with different toppings."""
    orders: list[Pizza] = [
        TomatoPizza(ItalianPizza()),
        CheesePizza(ItalianPizza()),
        CheesePizza(TomatoPizza(BulgarianPizza())),
    ]
    for pizza in orders:
        sink.emit(f"Name: {pizza.name}")
        sink.emit(f"Cost: {pizza.cost()}")
