"""
Structural patterns - how objects are composed into larger structures.

- adapter: Fit an incompatible interface
- bridge: Abstraction and implementation varying independently
- composite: Leaves and groups behind one interface
- decorator: Stackable wrappers extending behavior
- facade: One entry point sequencing subsystems
- proxy: Lazy and guarded stand-ins for a real subject
- flyweight: Shared instances from a keyed pool
"""

from gof_catalog.structural import (
    adapter,
    bridge,
    composite,
    decorator,
    facade,
    flyweight,
    proxy,
)

__all__ = [
    "adapter",
    "bridge",
    "composite",
    "decorator",
    "facade",
    "flyweight",
    "proxy",
]
