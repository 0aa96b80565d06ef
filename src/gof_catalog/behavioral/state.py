"""
State - behavior driven by an explicit state and a transition table.

Water moves between solid, liquid and gas when heated or frozen. The
transition function is pure; Water only holds the current state and
reports each change.
"""

from __future__ import annotations

from enum import Enum

from gof_catalog.harness.sink import OutputSink


class WaterState(str, Enum):
    SOLID = "solid"
    LIQUID = "liquid"
    GAS = "gas"


class WaterEvent(str, Enum):
    HEAT = "heat"
    FROST = "frost"


# (state, event) -> (next state, description)
TRANSITIONS: dict[tuple[WaterState, WaterEvent], tuple[WaterState, str]] = {
    (WaterState.SOLID, WaterEvent.HEAT): (WaterState.LIQUID, "Turning ice into liquid"),
    (WaterState.SOLID, WaterEvent.FROST): (WaterState.SOLID, "Continuing to freeze the ice"),
    (WaterState.LIQUID, WaterEvent.HEAT): (WaterState.GAS, "Turning liquid into steam"),
    (WaterState.LIQUID, WaterEvent.FROST): (WaterState.SOLID, "Turning liquid into ice"),
    (WaterState.GAS, WaterEvent.HEAT): (WaterState.GAS, "Raising the steam temperature"),
    (WaterState.GAS, WaterEvent.FROST): (WaterState.LIQUID, "Turning steam into liquid"),
}


def transition(state: WaterState, event: WaterEvent) -> WaterState:
    """Return the state reached from `state` on `event`."""
    return TRANSITIONS[(state, event)][0]


class Water:
    """Context delegating every reaction to its current state."""

    def __init__(self, state: WaterState = WaterState.LIQUID, sink: OutputSink | None = None):
        self.state = state
        self.sink = sink

    def apply(self, event: WaterEvent) -> WaterState:
        next_state, description = TRANSITIONS[(self.state, event)]
        if self.sink is not None:
            self.sink.emit(description)
        self.state = next_state
        return next_state

    def heat(self) -> WaterState:
        return self.apply(WaterEvent.HEAT)

    def frost(self) -> WaterState:
        return self.apply(WaterEvent.FROST)


def run_scenario(sink: OutputSink) -> None:
    """Heat twice, freeze twice, heat once, starting from liquid."""
    water = Water(WaterState.LIQUID, sink)
    for event in (
        WaterEvent.HEAT,
        WaterEvent.HEAT,
        WaterEvent.FROST,
        WaterEvent.FROST,
        WaterEvent.HEAT,
    ):
        water.apply(event)
    sink.emit(f"Final state: {water.state.value}")
