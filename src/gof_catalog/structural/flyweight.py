"""
Flyweight - share one instance per kind instead of one per use.

Houses of the same type share their intrinsic data (number of stories);
the location is extrinsic and passed in on every build. The factory's
pool is guarded so concurrent first requests still create one instance.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

from gof_catalog.constants import ErrorMessages
from gof_catalog.errors import InvalidArgumentError
from gof_catalog.harness.sink import OutputSink

logger = logging.getLogger(__name__)


class House(ABC):
    """Flyweight. Intrinsic state only."""

    @property
    @abstractmethod
    def kind(self) -> str: ...

    @property
    @abstractmethod
    def stages(self) -> int: ...

    def build(self, longitude: float, latitude: float, sink: OutputSink) -> None:
        sink.emit(
            f"Built a {self.kind.lower()} house with {self.stages} stories; "
            f"coordinates: {latitude} latitude and {longitude} longitude"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(stages={self.stages})"


class PanelHouse(House):
    kind = "Panel"
    stages = 16


class BrickHouse(House):
    kind = "Brick"
    stages = 5


HOUSE_TYPES: dict[str, type[House]] = {cls.kind: cls for cls in (PanelHouse, BrickHouse)}


class HouseFactory:
    """Pool of shared houses keyed by type name."""

    def __init__(self) -> None:
        self._pool: dict[str, House] = {}
        self._lock = threading.Lock()
        self.created = 0

    def get(self, key: str) -> House:
        """
        Return the shared house for `key`, creating and caching it on a miss.

        Raises:
            InvalidArgumentError: If `key` names no known house type
        """
        house = self._pool.get(key)
        if house is not None:
            return house

        with self._lock:
            house = self._pool.get(key)
            if house is None:
                if key not in HOUSE_TYPES:
                    raise InvalidArgumentError(ErrorMessages.UNKNOWN_HOUSE_TYPE.format(key=key))
                house = HOUSE_TYPES[key]()
                self._pool[key] = house
                self.created += 1
                logger.debug("Created flyweight %r for key %s", house, key)
            return house

    @property
    def pool_size(self) -> int:
        return len(self._pool)


def run_scenario(sink: OutputSink) -> None:
    """Build a street of houses from two shared flyweights."""
    factory = HouseFactory()
    longitude, latitude = 37.61, 55.74

    for _ in range(3):
        factory.get("Panel").build(longitude, latitude, sink)
        latitude = round(latitude + 0.1, 2)

    for _ in range(2):
        factory.get("Brick").build(longitude, latitude, sink)
        longitude = round(longitude + 0.1, 2)

    sink.emit(f"Houses built: 5, flyweights in pool: {factory.pool_size}")
