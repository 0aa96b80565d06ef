#!/usr/bin/env python3
"""
Example: Run the behavioral scenarios and inspect the report.

Usage:
    python examples/run_behavioral.py

Shows how to drive the harness from code instead of the CLI:
1. Build the default registry
2. Run one pattern family
3. Walk the per-scenario results
"""

from gof_catalog import PatternFamily, ScenarioRunner, build_default_registry


def main() -> None:
    registry = build_default_registry()
    runner = ScenarioRunner(registry)

    print("GoF Pattern Catalog - behavioral patterns")
    print("=" * 40)

    report = runner.run(family=PatternFamily.BEHAVIORAL)
    for result in report.results:
        print(f"{result.name}:")
        for line in result.lines:
            print(f"  {line}")
        print()

    for line in report.summary_lines():
        print(line)


if __name__ == "__main__":
    main()
