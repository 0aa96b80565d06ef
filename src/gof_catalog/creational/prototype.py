"""
Prototype - create objects by copying a configured original.

Clones are deep copies: changing a clone, including its nested lists,
never affects the prototype or other clones.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from gof_catalog.harness.sink import OutputSink


@dataclass
class Plane:
    name: str
    wingspan: float
    liveries: list[str] = field(default_factory=list)

    def clone(self) -> Plane:
        return copy.deepcopy(self)


def run_scenario(sink: OutputSink) -> None:
    """Derive three modifications from one prototype."""
    prototype = Plane(name="IL-96", wingspan=60.0, liveries=["Aeroflot"])

    for suffix in ("-400", "-300", "MD"):
        plane = prototype.clone()
        plane.name += suffix
        plane.liveries.append(f"Custom{suffix}")
        sink.emit(repr(plane))

    sink.emit(f"Prototype untouched: {prototype!r}")
