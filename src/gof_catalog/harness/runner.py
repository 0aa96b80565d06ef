"""
Scenario Runner - runs a selection of scenarios and collects a report.

The runner:
1. Resolves the selection (all scenarios by default)
2. Validates it against the registry
3. Runs each scenario sequentially with its own output sink
4. Records a failure against the scenario that raised and moves on
5. Returns a RunReport with every scenario's lines and status
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from gof_catalog.constants import ErrorMessages, PatternFamily
from gof_catalog.errors import InvalidArgumentError
from gof_catalog.harness.registry import ScenarioRegistry
from gof_catalog.harness.sink import OutputSink
from gof_catalog.harness.validator import validate_selection
from gof_catalog.models.report import RunReport, ScenarioResult, ScenarioStatus
from gof_catalog.models.scenario import ScenarioSpec, normalize_name

logger = logging.getLogger(__name__)


class ScenarioRunner:
    """
    Runs scenarios from a registry.

    Scenarios run one after another on the calling thread. A scenario
    that raises never stops the rest of the run unless stop_on_failure
    is set.
    """

    def __init__(self, registry: ScenarioRegistry, stop_on_failure: bool = False):
        """
        Initialize the runner.

        Args:
            registry: Registry to resolve scenario names against
            stop_on_failure: Skip the remaining scenarios after the first failure
        """
        self.registry = registry
        self.stop_on_failure = stop_on_failure

    def resolve(
        self,
        names: Sequence[str] | None = None,
        family: PatternFamily | None = None,
    ) -> list[ScenarioSpec]:
        """
        Turn a requested selection into the ordered list of scenarios to run.

        Args:
            names: Scenario names; None means every registered scenario
            family: Optional family filter applied to the selection

        Returns:
            Scenarios in run order, each at most once

        Raises:
            InvalidArgumentError: If any requested name is unknown
        """
        if names is None:
            selected = self.registry.names(family)
        else:
            validation = validate_selection(names, self.registry)
            for issue in validation.warnings:
                logger.warning("%s", issue)
            if not validation.is_valid:
                details = validation.error_details()
                raise InvalidArgumentError(ErrorMessages.INVALID_SELECTION.format(details=details))
            selected = list(dict.fromkeys(normalize_name(n) for n in names))

        specs: list[ScenarioSpec] = []
        for name in selected:
            spec = self.registry.get_scenario(name)
            if spec is not None and (family is None or spec.family == family):
                specs.append(spec)
        return specs

    def run(
        self,
        names: Sequence[str] | None = None,
        family: PatternFamily | None = None,
    ) -> RunReport:
        """
        Run a selection of scenarios.

        Args:
            names: Scenario names; None means every registered scenario
            family: Optional family filter

        Returns:
            RunReport with one result per scenario that ran
        """
        report = RunReport()
        for spec in self.resolve(names, family):
            result = self.run_one(spec)
            report.results.append(result)
            if not result.passed and self.stop_on_failure:
                logger.info("Stopping after failed scenario %s", spec.name)
                break

        logger.info(
            "Run finished: %d passed, %d failed", report.passed, report.failed
        )
        return report

    def run_one(self, spec: ScenarioSpec) -> ScenarioResult:
        """Run a single scenario, capturing its output and any failure."""
        sink = OutputSink(spec.name)
        status = ScenarioStatus.PASSED
        error: str | None = None

        logger.debug("Running scenario %s", spec.name)
        started = time.perf_counter()
        try:
            spec.run(sink)
        except Exception as e:
            logger.exception("Scenario %s failed", spec.name)
            status = ScenarioStatus.FAILED
            error = f"{type(e).__name__}: {e}"
        elapsed_ms = (time.perf_counter() - started) * 1000

        return ScenarioResult(
            name=spec.name,
            family=spec.family,
            status=status,
            lines=sink.lines,
            error=error,
            duration_ms=elapsed_ms,
        )


def run_scenarios(
    registry: ScenarioRegistry,
    names: Sequence[str] | None = None,
    family: PatternFamily | None = None,
    stop_on_failure: bool = False,
) -> RunReport:
    """
    Convenience function to run scenarios.

    Args:
        registry: Registry holding the scenarios
        names: Scenario names; None means all
        family: Optional family filter
        stop_on_failure: Skip the rest after the first failure

    Returns:
        RunReport for the run
    """
    runner = ScenarioRunner(registry, stop_on_failure=stop_on_failure)
    return runner.run(names, family)
