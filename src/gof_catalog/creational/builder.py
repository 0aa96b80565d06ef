"""
Builder - assemble an object step by step.

Part builders are configured with a callable, then handed to the house
builder. Skipping a step does not produce a silently wrong house: the
result lists exactly which parts are missing.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from gof_catalog.harness.sink import OutputSink


class WallBuilder:
    def __init__(self, configure: Callable[[WallBuilder], None]):
        self.walls: str | None = None
        configure(self)


class WindowsBuilder:
    def __init__(self, configure: Callable[[WindowsBuilder], None]):
        self.windows: str | None = None
        configure(self)


@dataclass(frozen=True)
class House:
    walls: str | None = None
    windows: str | None = None

    @property
    def missing(self) -> tuple[str, ...]:
        """Names of the parts that were never built."""
        return tuple(part for part in ("walls", "windows") if getattr(self, part) is None)

    @property
    def is_complete(self) -> bool:
        return not self.missing


class HouseBuilder:
    def __init__(self) -> None:
        self._walls: str | None = None
        self._windows: str | None = None

    def with_walls(self, builder: WallBuilder | None) -> HouseBuilder:
        if builder is not None:
            self._walls = builder.walls
        return self

    def with_windows(self, builder: WindowsBuilder | None) -> HouseBuilder:
        if builder is not None:
            self._windows = builder.windows
        return self

    def build(self) -> House:
        return House(walls=self._walls, windows=self._windows)


def _set_walls(builder: WallBuilder) -> None:
    builder.walls = "Build walls"


def _set_windows(builder: WindowsBuilder) -> None:
    builder.windows = "Build windows"


def run_scenario(sink: OutputSink) -> None:
    """Build a complete house, then one with the windows step skipped."""
    walls = WallBuilder(_set_walls)
    windows = WindowsBuilder(_set_windows)

    house = HouseBuilder().with_walls(walls).with_windows(windows).build()
    sink.emit(f"Walls: {house.walls}, windows: {house.windows}")
    sink.emit(f"Complete: {house.is_complete}")

    partial = HouseBuilder().with_walls(walls).build()
    sink.emit(f"Walls: {partial.walls}, windows: {partial.windows}")
    sink.emit(f"Complete: {partial.is_complete}, missing: {', '.join(partial.missing)}")
