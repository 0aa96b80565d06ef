"""
Gang-of-Four pattern catalog.

Small, self-contained demonstrations of the 22 classic design patterns,
plus a harness that runs them and captures their output:

- creational, structural, behavioral: One module per pattern
- harness: Output sink, scenario registry, selection validation, runner
- models: Scenario metadata and run reports
"""

from gof_catalog.constants import PatternFamily
from gof_catalog.errors import CatalogError, InvalidArgumentError
from gof_catalog.harness import OutputSink, ScenarioRegistry, ScenarioRunner, run_scenarios
from gof_catalog.models import RunReport, ScenarioResult, ScenarioSpec, ScenarioStatus

__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy import of the built-in scenario table to keep the core import light."""
    if name in ("BUILTIN_SCENARIOS", "build_default_registry"):
        from gof_catalog.scenarios import BUILTIN_SCENARIOS, build_default_registry

        return {
            "BUILTIN_SCENARIOS": BUILTIN_SCENARIOS,
            "build_default_registry": build_default_registry,
        }[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "BUILTIN_SCENARIOS",
    "CatalogError",
    "InvalidArgumentError",
    "OutputSink",
    "PatternFamily",
    "RunReport",
    "ScenarioRegistry",
    "ScenarioResult",
    "ScenarioRunner",
    "ScenarioSpec",
    "ScenarioStatus",
    "build_default_registry",
    "run_scenarios",
]
