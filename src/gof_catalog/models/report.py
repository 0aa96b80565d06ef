"""
Run report - the result of running a selection of scenarios.

The report is the harness's only output: per-scenario status and
captured lines, plus a summary. It serializes to a plain dict, JSON or
YAML for inspection and golden-file testing.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

import yaml
from pydantic import BaseModel, Field

from gof_catalog.constants import REPORT_SCHEMA, PatternFamily, SuccessMessages


class ScenarioStatus(str, Enum):
    """Outcome of running one scenario."""

    PASSED = "passed"
    FAILED = "failed"


class ScenarioResult(BaseModel):
    """
    Result of one scenario.

    Lines emitted before a failure are kept, so no partial output is lost.
    """

    name: str = Field(..., description="Scenario name")
    family: PatternFamily = Field(..., description="Pattern family")
    status: ScenarioStatus = Field(..., description="Pass/fail status")
    lines: list[str] = Field(default_factory=list, description="Captured output lines")
    error: str | None = Field(None, description="Error type and message if failed")
    duration_ms: float = Field(0.0, ge=0, description="Wall-clock run time")

    @property
    def passed(self) -> bool:
        return self.status == ScenarioStatus.PASSED

    def summary_line(self) -> str:
        if self.passed:
            return SuccessMessages.SCENARIO_PASSED.format(name=self.name, lines=len(self.lines))
        return SuccessMessages.SCENARIO_FAILED.format(name=self.name, error=self.error)


class RunReport(BaseModel):
    """Results of a harness run, in execution order."""

    schema_version: str = Field(REPORT_SCHEMA, alias="schema", description="Schema version")
    results: list[ScenarioResult] = Field(default_factory=list, description="Scenario results")

    model_config = {"populate_by_name": True}

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed

    @property
    def all_passed(self) -> bool:
        """True if no scenario failed (an empty run counts as passed)."""
        return self.failed == 0

    def get(self, name: str) -> ScenarioResult | None:
        for result in self.results:
            if result.name == name:
                return result
        return None

    def summary_lines(self) -> list[str]:
        lines = [r.summary_line() for r in self.results]
        lines.append(
            SuccessMessages.RUN_SUMMARY.format(
                passed=self.passed, failed=self.failed, total=len(self.results)
            )
        )
        return lines

    def to_text(self) -> str:
        """Human-readable report: every scenario's output, then the summary."""
        blocks: list[str] = []
        for result in self.results:
            header = f"== {result.name} ({result.family.value})"
            body = [f"  {line}" for line in result.lines]
            if result.error:
                body.append(f"  !! {result.error}")
            blocks.append("\n".join([header, *body]))
        blocks.append("\n".join(self.summary_lines()))
        return "\n\n".join(blocks)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict with a stable key order."""
        return {
            "schema": self.schema_version,
            "summary": {
                "passed": self.passed,
                "failed": self.failed,
                "total": len(self.results),
            },
            "results": [r.model_dump(mode="json") for r in self.results],
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def to_yaml(self) -> str:
        return yaml.safe_dump(
            self.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True
        )
