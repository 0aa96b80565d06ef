"""
Factory Method - a selector decides which product to create.

The selector is a closed enum and the mapping covers every member, so an
unknown vehicle cannot be requested.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from gof_catalog.harness.sink import OutputSink


class Drivable(ABC):
    @abstractmethod
    def drive(self, sink: OutputSink) -> None: ...


class Car(Drivable):
    def drive(self, sink: OutputSink) -> None:
        sink.emit("Drive car!")


class Truck(Drivable):
    def drive(self, sink: OutputSink) -> None:
        sink.emit("Drive truck!")


class Bus(Drivable):
    def drive(self, sink: OutputSink) -> None:
        sink.emit("Drive bus!")


class Vehicle(str, Enum):
    BMW_X5 = "bmw_x5"
    KAMAZ = "kamaz"
    MERCEDES_TOURISMO = "mercedes_tourismo"


_PRODUCTS: dict[Vehicle, type[Drivable]] = {
    Vehicle.BMW_X5: Car,
    Vehicle.KAMAZ: Truck,
    Vehicle.MERCEDES_TOURISMO: Bus,
}

_missing = set(Vehicle) - set(_PRODUCTS)
if _missing:
    raise RuntimeError(f"No product for vehicles: {sorted(v.value for v in _missing)}")


def create_vehicle(vehicle: Vehicle) -> Drivable:
    """Create the product for a vehicle model."""
    return _PRODUCTS[vehicle]()


def run_scenario(sink: OutputSink) -> None:
    """Create and drive one product of every kind."""
    for vehicle in Vehicle:
        create_vehicle(vehicle).drive(sink)
