"""
Behavioral patterns - how objects collaborate and share responsibility.

- command: Requests as reversible objects
- strategy: Swappable algorithms behind one interface
- mediator: Colleagues communicating through a router
- template: Fixed algorithm skeleton with replaceable steps
- memento: Opaque snapshots for save/restore
- observer: Publisher pushing state to subscribers
- iterator: Single-use cursor over a collection
- state: Transition table driving an object's behavior
- chain: Handlers passing a request along
- visitor: Double dispatch over an object structure
"""

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

__all__ = [
    "chain",
    "command",
    "iterator",
    "mediator",
    "memento",
    "observer",
    "state",
    "strategy",
    "template",
    "visitor",
]
