"""
Selection Validator - validates a requested list of scenario names.

Validates:
- Every name refers to a registered scenario
- No scenario is requested twice
- The selection is not empty
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from gof_catalog.constants import ErrorMessages
from gof_catalog.harness.registry import ScenarioRegistry
from gof_catalog.models.scenario import normalize_name


class ValidationSeverity(str, Enum):
    """How much a selection issue matters."""

    ERROR = "error"  # Nothing runs
    WARNING = "warning"  # Runs, with the issue logged
    INFO = "info"


@dataclass(frozen=True)
class ValidationIssue:
    """One problem with one entry of a selection."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    def __str__(self) -> str:
        where = f" ({self.location})" if self.location else ""
        return f"{self.code}{where}: {self.message}"


@dataclass
class ValidationResult:
    """Issues found in a selection, in the order the names were checked."""

    issues: list[ValidationIssue] = field(default_factory=list)

    def add(
        self,
        severity: ValidationSeverity,
        code: str,
        message: str,
        location: str | None = None,
    ) -> None:
        self.issues.append(ValidationIssue(severity, code, message, location))

    def with_severity(self, severity: ValidationSeverity) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == severity]

    @property
    def errors(self) -> list[ValidationIssue]:
        return self.with_severity(ValidationSeverity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return self.with_severity(ValidationSeverity.WARNING)

    @property
    def is_valid(self) -> bool:
        """True if the selection can run (warnings and info allowed)."""
        return not self.errors

    def error_details(self) -> str:
        """All error messages joined into one line."""
        return "; ".join(i.message for i in self.errors)


def validate_selection(names: Sequence[str], registry: ScenarioRegistry) -> ValidationResult:
    """
    Validate a list of requested scenario names against a registry.

    Args:
        names: Requested names, in the order they should run
        registry: Registry the names must resolve against

    Returns:
        ValidationResult with any issues found
    """
    result = ValidationResult()

    if not names:
        result.add(
            ValidationSeverity.INFO, "EMPTY_SELECTION", "No scenarios selected", "selection"
        )
        return result

    seen: set[str] = set()
    for position, name in enumerate(names):
        location = f"selection/{position}"
        normalized = normalize_name(name)

        if normalized not in registry:
            result.add(
                ValidationSeverity.ERROR,
                "UNKNOWN_SCENARIO",
                ErrorMessages.SCENARIO_NOT_FOUND.format(name=name),
                location,
            )
            continue

        if normalized in seen:
            result.add(
                ValidationSeverity.WARNING,
                "DUPLICATE_SCENARIO",
                f"Scenario '{normalized}' is selected more than once",
                location,
            )
        seen.add(normalized)

    return result
