"""
Harness - runs the catalog's scenarios and collects their output.

The pipeline:
    selection (names / family) → validated ScenarioSpecs
    → each scenario writes into its own OutputSink
    → ScenarioResult per scenario → RunReport
"""

from gof_catalog.harness.registry import ScenarioRegistry
from gof_catalog.harness.runner import ScenarioRunner, run_scenarios
from gof_catalog.harness.sink import OutputSink
from gof_catalog.harness.validator import (
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    validate_selection,
)

__all__ = [
    "OutputSink",
    "ScenarioRegistry",
    "ScenarioRunner",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "run_scenarios",
    "validate_selection",
]
