"""
Tests for configuration loading and the command-line entry point.

Tests cover:
- Config resolution from file, environment and overrides
- Listing scenarios
- Report formats
- Exit codes for success, failure and invalid input
"""

import json

import pytest
import yaml
from pydantic import ValidationError

from gof_catalog.cli import EXIT_FAILED, EXIT_OK, EXIT_USAGE, main
from gof_catalog.config import load_config
from gof_catalog.constants import SCENARIOS_ENV_VAR, OutputFormat, PatternFamily
from gof_catalog.harness import ScenarioRegistry


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a selection in the real environment from leaking into tests."""
    monkeypatch.delenv(SCENARIOS_ENV_VAR, raising=False)


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self) -> None:
        """Nothing configured means run everything as text."""
        config = load_config(env={})
        assert config.scenarios is None
        assert config.family is None
        assert config.output_format == OutputFormat.TEXT
        assert config.stop_on_failure is False

    def test_file(self, temp_dir) -> None:
        """Settings are read from YAML."""
        path = temp_dir / "catalog.yaml"
        path.write_text("scenarios: [observer, state]\noutput_format: json\n")
        config = load_config(path=path, env={})
        assert config.scenarios == ["observer", "state"]
        assert config.output_format == OutputFormat.JSON

    def test_env_overrides_file(self, temp_dir) -> None:
        """The environment selection beats the file."""
        path = temp_dir / "catalog.yaml"
        path.write_text("scenarios: [observer]\n")
        config = load_config(path=path, env={SCENARIOS_ENV_VAR: "state, visitor"})
        assert config.scenarios == ["state", "visitor"]

    def test_overrides_win(self) -> None:
        """Command-line values beat the environment; None values are ignored."""
        config = load_config(
            env={SCENARIOS_ENV_VAR: "state"},
            overrides={"scenarios": ["memento"], "family": None, "stop_on_failure": True},
        )
        assert config.scenarios == ["memento"]
        assert config.stop_on_failure is True

    @pytest.mark.parametrize("value", [",", "   ", " , ,"])
    def test_blank_env_selection_means_all(self, value: str) -> None:
        """A selection with no names in it falls back to running everything."""
        config = load_config(env={SCENARIOS_ENV_VAR: value})
        assert config.scenarios is None

    @pytest.mark.parametrize(
        "content",
        ["scenarios: []\n", 'scenarios: ""\n', "scenarios: [' ']\n"],
    )
    def test_blank_file_selection_means_all(self, temp_dir, content: str) -> None:
        """Empty selections in the config file fall back to running everything."""
        path = temp_dir / "catalog.yaml"
        path.write_text(content)
        assert load_config(path=path, env={}).scenarios is None

    def test_names_are_stripped(self) -> None:
        """Whitespace around listed names is ignored."""
        config = load_config(env={}, overrides={"scenarios": [" observer ", "", "state"]})
        assert config.scenarios == ["observer", "state"]

    def test_unknown_key_rejected(self, temp_dir) -> None:
        """Typos in the config file are not silently ignored."""
        path = temp_dir / "catalog.yaml"
        path.write_text("scenarioz: [observer]\n")
        with pytest.raises(ValidationError):
            load_config(path=path, env={})

    def test_non_mapping_rejected(self, temp_dir) -> None:
        """A YAML list is not a config."""
        path = temp_dir / "catalog.yaml"
        path.write_text("- observer\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path=path, env={})


class TestMain:
    """Tests for the CLI entry point."""

    def test_run_selection(self, capsys: pytest.CaptureFixture) -> None:
        """Running a passing selection exits 0 and prints the output."""
        assert main(["state"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "== state (behavioral)" in out
        assert "Turning ice into liquid" in out
        assert "1 passed, 0 failed, 1 total" in out

    def test_json_format(self, capsys: pytest.CaptureFixture) -> None:
        """JSON output parses and follows the selection."""
        assert main(["--format", "json", "singleton", "facade"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert [r["name"] for r in data["results"]] == ["singleton", "facade"]

    def test_family(self, capsys: pytest.CaptureFixture) -> None:
        """--family limits the run."""
        assert main(["--family", "creational", "--format", "yaml"]) == EXIT_OK
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["summary"]["total"] == 5
        assert {r["family"] for r in data["results"]} == {PatternFamily.CREATIONAL.value}

    def test_list(self, capsys: pytest.CaptureFixture) -> None:
        """--list prints one line per scenario and runs nothing."""
        assert main(["--list"]) == EXIT_OK
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 22
        assert lines[0].startswith("abstract_factory")

    def test_unknown_scenario(self, capsys: pytest.CaptureFixture) -> None:
        """An unknown name is a usage error and prints no report."""
        assert main(["observer", "interpreter"]) == EXIT_USAGE
        assert capsys.readouterr().out == ""

    def test_failure_exit_code(self, capsys: pytest.CaptureFixture) -> None:
        """A failing scenario makes the run exit 1."""

        def fail(sink) -> None:
            raise ValueError("bad")

        registry = ScenarioRegistry()
        registry.register_function("bad", PatternFamily.BEHAVIORAL, fail)
        assert main([], registry=registry) == EXIT_FAILED
        assert "[FAIL] bad: ValueError: bad" in capsys.readouterr().out

    def test_config_file(self, temp_dir, capsys: pytest.CaptureFixture) -> None:
        """Settings from --config apply."""
        path = temp_dir / "catalog.yaml"
        path.write_text("scenarios: iterator\noutput_format: json\n")
        assert main(["--config", str(path)]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["summary"]["total"] == 1

    def test_missing_config_file(self, temp_dir) -> None:
        """A missing config file is a usage error."""
        assert main(["--config", str(temp_dir / "missing.yaml")]) == EXIT_USAGE

    def test_blank_env_selection_runs_everything(
        self, monkeypatch: pytest.MonkeyPatch, capsys
    ) -> None:
        """A blank environment selection runs every scenario."""
        monkeypatch.setenv(SCENARIOS_ENV_VAR, ",")
        assert main(["--format", "json"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["summary"]["total"] == 22

    def test_empty_file_selection_runs_everything(self, temp_dir, capsys) -> None:
        """An empty list in the config file runs every scenario."""
        path = temp_dir / "catalog.yaml"
        path.write_text("scenarios: []\noutput_format: json\n")
        assert main(["--config", str(path)]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["summary"]["total"] == 22

    def test_env_selection(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        """The environment variable selects scenarios."""
        monkeypatch.setenv(SCENARIOS_ENV_VAR, "builder")
        assert main(["--format", "json"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert [r["name"] for r in data["results"]] == ["builder"]
