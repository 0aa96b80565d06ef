"""
Constants and enums for the pattern catalog.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class PatternFamily(str, Enum):
    """
    The three Gang-of-Four pattern families.

    Every scenario in the catalog belongs to exactly one family.
    """

    CREATIONAL = "creational"  # Object creation
    STRUCTURAL = "structural"  # Object composition
    BEHAVIORAL = "behavioral"  # Object collaboration


class OutputFormat(str, Enum):
    """Report formats understood by the CLI."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


# Environment variable holding a comma-separated scenario selection
SCENARIOS_ENV_VAR = "GOF_CATALOG_SCENARIOS"

# Schema version for serialized run reports
REPORT_SCHEMA = "run_report/v1"


class ErrorMessages:
    """Standardized error messages."""

    SCENARIO_NOT_FOUND = "Scenario '{name}' not found."
    DUPLICATE_SCENARIO = "Scenario '{name}' is already registered."
    INVALID_SELECTION = "Invalid scenario selection: {details}"
    MISSING_SNAPSHOT = "Cannot restore from a missing snapshot."
    UNKNOWN_HOUSE_TYPE = "Unknown house type: '{key}'."


class SuccessMessages:
    """Standardized success messages."""

    SCENARIO_PASSED = "[PASS] {name} ({lines} lines)"
    SCENARIO_FAILED = "[FAIL] {name}: {error}"
    RUN_SUMMARY = "{passed} passed, {failed} failed, {total} total"
