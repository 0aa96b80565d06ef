"""
Abstract Factory - create families of related products.

Each brand's factory produces a car and a matching engine. A family
built by one call always comes from one factory, so brands never mix.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from gof_catalog.harness.sink import OutputSink


class VehicleDrivable(ABC):
    brand: str = ""

    @abstractmethod
    def drive(self, sink: OutputSink) -> None: ...


class Engine(ABC):
    brand: str = ""

    @abstractmethod
    def describe(self) -> str: ...


class BmwCar(VehicleDrivable):
    brand = "BMW"

    def drive(self, sink: OutputSink) -> None:
        sink.emit("BMW driving")


class BmwEngine(Engine):
    brand = "BMW"

    def describe(self) -> str:
        return "BMW TwinPower Turbo engine"


class MercedesCar(VehicleDrivable):
    brand = "Mercedes"

    def drive(self, sink: OutputSink) -> None:
        sink.emit("Mercedes driving")


class MercedesEngine(Engine):
    brand = "Mercedes"

    def describe(self) -> str:
        return "Mercedes BlueEFFICIENCY engine"


@dataclass(frozen=True)
class CarFamily:
    """Products created together by a single factory."""

    car: VehicleDrivable
    engine: Engine

    @property
    def brand(self) -> str:
        return self.car.brand


class CarFactory(ABC):
    @abstractmethod
    def create_car(self) -> VehicleDrivable: ...

    @abstractmethod
    def create_engine(self) -> Engine: ...

    def create_family(self) -> CarFamily:
        return CarFamily(car=self.create_car(), engine=self.create_engine())


class BmwFactory(CarFactory):
    def create_car(self) -> VehicleDrivable:
        return BmwCar()

    def create_engine(self) -> Engine:
        return BmwEngine()


class MercedesFactory(CarFactory):
    def create_car(self) -> VehicleDrivable:
        return MercedesCar()

    def create_engine(self) -> Engine:
        return MercedesEngine()


class CarBrand(str, Enum):
    BMW = "bmw"
    MERCEDES = "mercedes"

    def factory(self) -> CarFactory:
        return _FACTORIES[self]()


_FACTORIES: dict[CarBrand, type[CarFactory]] = {
    CarBrand.BMW: BmwFactory,
    CarBrand.MERCEDES: MercedesFactory,
}


def run_scenario(sink: OutputSink) -> None:
    """Build one family per brand."""
    for brand in CarBrand:
        family = brand.factory().create_family()
        family.car.drive(sink)
        sink.emit(f"Engine: {family.engine.describe()}")
