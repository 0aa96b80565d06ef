"""
Harness configuration.

Resolution order (later wins):
1. Defaults (run everything, text output)
2. Optional YAML config file
3. GOF_CATALOG_SCENARIOS environment variable (comma-separated names)
4. Command-line arguments
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from gof_catalog.constants import SCENARIOS_ENV_VAR, OutputFormat, PatternFamily

logger = logging.getLogger(__name__)


class HarnessConfig(BaseModel):
    """What to run and how to report it."""

    scenarios: list[str] | None = Field(None, description="Scenario names; None means all")
    family: PatternFamily | None = Field(None, description="Only run this pattern family")
    output_format: OutputFormat = Field(OutputFormat.TEXT, description="Report format")
    stop_on_failure: bool = Field(False, description="Stop after the first failed scenario")

    model_config = {"extra": "forbid"}

    @field_validator("scenarios", mode="before")
    @classmethod
    def split_names(cls, v: Any) -> Any:
        """
        Accept a comma-separated string as well as a list.

        Blank entries are dropped. A selection left empty means "run
        everything", the same as no selection at all.
        """
        if isinstance(v, str):
            v = v.split(",")
        if isinstance(v, list):
            names = [name.strip() if isinstance(name, str) else name for name in v]
            names = [name for name in names if name != ""]
            if not names:
                logger.debug("Blank scenario selection, running all scenarios")
                return None
            return names
        return v


def load_config_file(path: Path) -> dict[str, Any]:
    """
    Read a YAML config file.

    Raises:
        ValueError: If the file does not contain a mapping
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_config(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> HarnessConfig:
    """
    Build the effective configuration.

    Args:
        path: Optional YAML config file
        env: Environment to read (defaults to os.environ)
        overrides: Values from the command line; None values are ignored

    Returns:
        Validated HarnessConfig

    Raises:
        pydantic.ValidationError: If the merged values are invalid
    """
    data: dict[str, Any] = {}

    if path is not None:
        data.update(load_config_file(path))
        logger.debug("Loaded config file %s", path)

    environ = os.environ if env is None else env
    env_value = environ.get(SCENARIOS_ENV_VAR)
    if env_value:
        data["scenarios"] = env_value

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    return HarnessConfig.model_validate(data)
