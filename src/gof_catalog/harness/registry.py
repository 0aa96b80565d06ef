"""
Scenario Registry - discovers and serves the catalog's scenarios.

The registry keeps scenarios in registration order and provides lookup
by name and filtering by pattern family.
"""

from __future__ import annotations

import logging

from gof_catalog.constants import ErrorMessages, PatternFamily
from gof_catalog.models.scenario import (
    ScenarioFn,
    ScenarioMetadata,
    ScenarioSpec,
    normalize_name,
)

logger = logging.getLogger(__name__)


class ScenarioRegistry:
    """
    Holds every runnable scenario.

    Names are normalized on the way in and on lookup, so 'Chain-Of-Responsibility'
    and 'chain_of_responsibility' refer to the same scenario.
    """

    def __init__(self, specs: list[ScenarioSpec] | None = None):
        """
        Initialize the registry.

        Args:
            specs: Optional scenarios to register immediately, in order
        """
        self._specs: dict[str, ScenarioSpec] = {}
        self._metadata_cache: dict[str, ScenarioMetadata] = {}
        for spec in specs or []:
            self.register(spec)

    def register(self, spec: ScenarioSpec) -> str:
        """
        Register a scenario.

        Args:
            spec: Scenario to register

        Returns:
            The normalized scenario name

        Raises:
            ValueError: If a scenario with the same name is already registered
        """
        if spec.name in self._specs:
            raise ValueError(ErrorMessages.DUPLICATE_SCENARIO.format(name=spec.name))

        self._specs[spec.name] = spec
        self._metadata_cache[spec.name] = ScenarioMetadata.from_spec(spec)
        logger.debug("Registered scenario %s (%s)", spec.name, spec.family.value)
        return spec.name

    def register_function(
        self,
        name: str,
        family: PatternFamily,
        run: ScenarioFn,
        description: str = "",
    ) -> str:
        """Register a plain scenario function. Useful for tests and ad-hoc demos."""
        return self.register(
            ScenarioSpec(name=name, family=family, run=run, description=description)
        )

    def get_scenario(self, name: str) -> ScenarioSpec | None:
        """
        Get a scenario by name.

        Args:
            name: Scenario name (any case, '-' or ' ' allowed for '_')

        Returns:
            ScenarioSpec or None if not found
        """
        return self._specs.get(normalize_name(name))

    def get_metadata(self, name: str) -> ScenarioMetadata | None:
        return self._metadata_cache.get(normalize_name(name))

    def list_scenarios(self, family: PatternFamily | None = None) -> list[ScenarioMetadata]:
        """
        List registered scenarios with optional filtering.

        Args:
            family: Filter by pattern family

        Returns:
            Scenario metadata sorted by name
        """
        result = list(self._metadata_cache.values())

        if family:
            result = [m for m in result if m.family == family]

        return sorted(result, key=lambda m: m.name)

    def names(self, family: PatternFamily | None = None) -> list[str]:
        """Scenario names in registration order."""
        return [
            name for name, spec in self._specs.items() if family is None or spec.family == family
        ]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._specs

    def __len__(self) -> int:
        return len(self._specs)
