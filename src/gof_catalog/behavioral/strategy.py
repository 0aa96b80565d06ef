"""
Strategy - interchangeable algorithms behind a common interface.

The car's way of moving is a swappable reference; reassigning it
changes behavior immediately without touching the car.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from gof_catalog.harness.sink import OutputSink


class Movable(ABC):
    """Strategy interface."""

    @abstractmethod
    def move(self, sink: OutputSink) -> None:
        """Move using this strategy."""


class PetrolMove(Movable):
    def move(self, sink: OutputSink) -> None:
        sink.emit("Moving on petrol")


class ElectricMove(Movable):
    def move(self, sink: OutputSink) -> None:
        sink.emit("Moving on electricity")


@dataclass
class Car:
    """Context holding exactly one movement strategy at a time."""

    passengers: int
    model: str
    strategy: Movable

    def move(self, sink: OutputSink) -> None:
        self.strategy.move(sink)


def run_scenario(sink: OutputSink) -> None:
    """Drive on petrol, switch strategy, drive on electricity."""
    car = Car(passengers=4, model="Volvo", strategy=PetrolMove())
    car.move(sink)
    car.strategy = ElectricMove()
    car.move(sink)
