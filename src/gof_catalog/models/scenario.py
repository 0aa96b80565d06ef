"""
Scenario model - what the registry knows about each demo.

A ScenarioSpec binds a name and family to the callable that runs the
scripted demonstration. ScenarioMetadata is the lightweight, serializable
view used for listing.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from gof_catalog.constants import PatternFamily

if TYPE_CHECKING:
    from gof_catalog.harness.sink import OutputSink

ScenarioFn = Callable[["OutputSink"], None]


def normalize_name(name: str) -> str:
    """Canonical scenario name: lowercase, with '-' and spaces as '_'."""
    return name.strip().lower().replace("-", "_").replace(" ", "_")


@dataclass(frozen=True)
class ScenarioSpec:
    """A registered scenario."""

    name: str
    family: PatternFamily
    run: ScenarioFn
    description: str = ""

    def __post_init__(self) -> None:
        normalized = normalize_name(self.name)
        if not normalized or not normalized.replace("_", "").isalnum():
            raise ValueError(f"Invalid scenario name: {self.name}")
        object.__setattr__(self, "name", normalized)


class ScenarioMetadata(BaseModel):
    """
    Lightweight scenario metadata for listing/discovery.
    """

    name: str = Field(..., description="Scenario name")
    family: PatternFamily = Field(..., description="Pattern family")
    description: str = Field("", description="Human-readable description")

    model_config = {"frozen": True}

    @classmethod
    def from_spec(cls, spec: ScenarioSpec) -> ScenarioMetadata:
        """Create metadata from a full scenario spec."""
        return cls(name=spec.name, family=spec.family, description=spec.description)
