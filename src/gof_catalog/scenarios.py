"""
Built-in scenarios - every pattern in the catalog, wired into a registry.

Order matters: it is the default run order (creational, structural,
then behavioral, as in the classic catalog).
"""

from __future__ import annotations

from gof_catalog.behavioral import (
    chain,
    command,
    iterator,
    mediator,
    memento,
    observer,
    state,
    strategy,
    template,
    visitor,
)
from gof_catalog.constants import PatternFamily
from gof_catalog.creational import (
    abstract_factory,
    builder,
    factory_method,
    prototype,
    singleton,
)
from gof_catalog.harness.registry import ScenarioRegistry
from gof_catalog.models.scenario import ScenarioSpec
from gof_catalog.structural import (
    adapter,
    bridge,
    composite,
    decorator,
    facade,
    flyweight,
    proxy,
)

_C = PatternFamily.CREATIONAL
_S = PatternFamily.STRUCTURAL
_B = PatternFamily.BEHAVIORAL

BUILTIN_SCENARIOS: tuple[ScenarioSpec, ...] = (
    ScenarioSpec(
        "factory_method",
        _C,
        factory_method.run_scenario,
        "Vehicle model selects the product",
    ),
    ScenarioSpec(
        "abstract_factory",
        _C,
        abstract_factory.run_scenario,
        "Car and engine families per brand",
    ),
    ScenarioSpec(
        "prototype",
        _C,
        prototype.run_scenario,
        "Plane modifications cloned from a prototype",
    ),
    ScenarioSpec(
        "builder",
        _C,
        builder.run_scenario,
        "House assembled from wall and window builders",
    ),
    ScenarioSpec(
        "singleton",
        _C,
        singleton.run_scenario,
        "One lazily created shared instance",
    ),
    ScenarioSpec(
        "adapter",
        _S,
        adapter.run_scenario,
        "A camel adapted to a transport",
    ),
    ScenarioSpec(
        "bridge",
        _S,
        bridge.run_scenario,
        "Programmers working through swappable languages",
    ),
    ScenarioSpec(
        "composite",
        _S,
        composite.run_scenario,
        "File system of files and directories",
    ),
    ScenarioSpec(
        "decorator",
        _S,
        decorator.run_scenario,
        "Pizzas with stacked toppings",
    ),
    ScenarioSpec(
        "facade",
        _S,
        facade.run_scenario,
        "IDE sequencing editor, compiler and runtime",
    ),
    ScenarioSpec(
        "proxy",
        _S,
        proxy.run_scenario,
        "Lazy and protected book stores",
    ),
    ScenarioSpec(
        "flyweight",
        _S,
        flyweight.run_scenario,
        "Shared house types on a street",
    ),
    ScenarioSpec(
        "command",
        _B,
        command.run_scenario,
        "Microwave commands with undo",
    ),
    ScenarioSpec(
        "strategy",
        _B,
        strategy.run_scenario,
        "Car switching its movement strategy",
    ),
    ScenarioSpec(
        "mediator",
        _B,
        mediator.run_scenario,
        "Manager routing between customer, programmer, tester",
    ),
    ScenarioSpec(
        "template_method",
        _B,
        template.run_scenario,
        "School and university following one plan",
    ),
    ScenarioSpec(
        "memento",
        _B,
        memento.run_scenario,
        "Hero saving and restoring the game",
    ),
    ScenarioSpec(
        "observer",
        _B,
        observer.run_scenario,
        "Bank and broker following the stock",
    ),
    ScenarioSpec(
        "iterator",
        _B,
        iterator.run_scenario,
        "Reader walking a library",
    ),
    ScenarioSpec(
        "state",
        _B,
        state.run_scenario,
        "Water changing phase",
    ),
    ScenarioSpec(
        "chain_of_responsibility",
        _B,
        chain.run_scenario,
        "Payment request through Bank, PayPal, Money",
    ),
    ScenarioSpec(
        "visitor",
        _B,
        visitor.run_scenario,
        "Bank accounts rendered as HTML and XML",
    ),
)


def build_default_registry() -> ScenarioRegistry:
    """Create a registry holding every built-in scenario."""
    return ScenarioRegistry(list(BUILTIN_SCENARIOS))
