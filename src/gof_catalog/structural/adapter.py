"""
Adapter - make an incompatible object fit an expected interface.

A traveller can only use something that drives. A camel only moves,
so an adapter turns drive() into camel.move().
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gof_catalog.harness.sink import OutputSink


class Driveable(ABC):
    """Target interface."""

    @abstractmethod
    def drive(self) -> None: ...


class Auto(Driveable):
    def __init__(self, sink: OutputSink):
        self.sink = sink

    def drive(self) -> None:
        self.sink.emit("The car is driving on the road")


class Camel:
    """Adaptee with its own, incompatible interface."""

    def __init__(self, sink: OutputSink):
        self.sink = sink

    def move(self) -> None:
        self.sink.emit("The camel is walking on the sand")


class CamelToTransportAdapter(Driveable):
    """Presents a camel as transport. Holds no state of its own."""

    def __init__(self, camel: Camel):
        self.camel = camel

    def drive(self) -> None:
        self.camel.move()


class Traveller:
    """Client."""

    def travel(self, transport: Driveable) -> None:
        transport.drive()


def run_scenario(sink: OutputSink) -> None:
    """Travel by car, then by camel through the adapter."""
    traveller = Traveller()
    traveller.travel(Auto(sink))
    traveller.travel(CamelToTransportAdapter(Camel(sink)))
