"""
Creational patterns - how objects get created.

- factory_method: Closed selector mapped to products
- abstract_factory: Families of matching products
- prototype: Deep-copy cloning
- builder: Stepwise assembly with explicit missing parts
- singleton: One lazily created, lock-guarded instance
"""

from gof_catalog.creational import (
    abstract_factory,
    builder,
    factory_method,
    prototype,
    singleton,
)

__all__ = [
    "abstract_factory",
    "builder",
    "factory_method",
    "prototype",
    "singleton",
]
