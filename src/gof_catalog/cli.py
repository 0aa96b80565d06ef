#!/usr/bin/env python3
"""
Entry point for the pattern catalog harness.

Runs all scenarios, or a selection, and prints a report with each
scenario's output and a pass/fail summary.

Exit codes:
    0 - every selected scenario passed
    1 - at least one scenario failed
    2 - invalid selection or configuration
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from gof_catalog.config import HarnessConfig, load_config
from gof_catalog.constants import OutputFormat, PatternFamily
from gof_catalog.errors import InvalidArgumentError
from gof_catalog.harness import ScenarioRegistry, ScenarioRunner
from gof_catalog.models.report import RunReport

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gof-catalog",
        description="Run the Gang-of-Four pattern scenarios",
    )
    parser.add_argument(
        "scenarios",
        nargs="*",
        help="Scenario names to run (default: all)",
    )
    parser.add_argument(
        "--family",
        choices=[f.value for f in PatternFamily],
        default=None,
        help="Only run scenarios of this pattern family",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Report format (default: text)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with harness settings",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available scenarios and exit",
    )
    parser.add_argument(
        "--stop-on-failure",
        action="store_true",
        default=None,
        help="Stop after the first failed scenario",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def render_report(report: RunReport, output_format: OutputFormat) -> str:
    if output_format == OutputFormat.JSON:
        return report.to_json()
    if output_format == OutputFormat.YAML:
        return report.to_yaml()
    return report.to_text()


def render_listing(registry: ScenarioRegistry, family: PatternFamily | None) -> str:
    return "\n".join(
        f"{m.name:<26}{m.family.value:<12}{m.description}"
        for m in registry.list_scenarios(family)
    )


def main(argv: list[str] | None = None, registry: ScenarioRegistry | None = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if registry is None:
        # Import after argument parsing so --help stays fast
        from gof_catalog.scenarios import build_default_registry

        registry = build_default_registry()

    try:
        config: HarnessConfig = load_config(
            path=args.config,
            overrides={
                "scenarios": args.scenarios or None,
                "family": args.family,
                "output_format": args.output_format,
                "stop_on_failure": args.stop_on_failure,
            },
        )
    except (OSError, ValueError, ValidationError) as e:
        logger.error("Invalid configuration: %s", e)
        return EXIT_USAGE

    if args.list:
        print(render_listing(registry, config.family))
        return EXIT_OK

    runner = ScenarioRunner(registry, stop_on_failure=config.stop_on_failure)
    try:
        report = runner.run(config.scenarios, config.family)
    except InvalidArgumentError as e:
        logger.error("%s", e)
        return EXIT_USAGE

    print(render_report(report, config.output_format))
    return EXIT_OK if report.all_passed else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
