"""
Pydantic models for the catalog harness.

This module provides:
- ScenarioSpec: A registered scenario and its run callable
- ScenarioMetadata: Listing view of a scenario
- ScenarioResult: Outcome of running one scenario
- RunReport: Outcome of a whole run
"""

from gof_catalog.models.report import RunReport, ScenarioResult, ScenarioStatus
from gof_catalog.models.scenario import (
    ScenarioFn,
    ScenarioMetadata,
    ScenarioSpec,
    normalize_name,
)

__all__ = [
    "RunReport",
    "ScenarioFn",
    "ScenarioMetadata",
    "ScenarioResult",
    "ScenarioSpec",
    "ScenarioStatus",
    "normalize_name",
]
