"""Tests for the miniyaml CLI."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from miniyaml import __version__
from miniyaml.cli import cli


SAMPLE_YAML = """---
name: demo
items:
  - first
  - second
script: |
  echo hi

  echo bye
...
"""


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.yaml"
    path.write_text(SAMPLE_YAML, encoding="utf-8")
    return path


@pytest.fixture
def invalid_file(tmp_path: Path) -> Path:
    path = tmp_path / "invalid.yaml"
    path.write_text("name: demo\n", encoding="utf-8")
    return path


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_dump(runner: CliRunner, sample_file: Path) -> None:
    result = runner.invoke(cli, ["dump", str(sample_file)])

    assert result.exit_code == 0, result.output
    assert result.output == (
        "{items=['first', 'second'], name='demo', script='  echo hi\n  echo bye\n'}\n"
    )


def test_dump_preserving_blank_lines(runner: CliRunner, sample_file: Path) -> None:
    result = runner.invoke(cli, ["--preserve-blank-lines", "dump", str(sample_file)])

    assert result.exit_code == 0, result.output
    assert "script='  echo hi\n\n  echo bye\n'" in result.output


def test_config_file_sets_options(runner: CliRunner, sample_file: Path, tmp_path: Path) -> None:
    config = tmp_path / "pyproject.toml"
    config.write_text("[tool.miniyaml]\npreserve_literal_blank_lines = true\n", encoding="utf-8")

    result = runner.invoke(cli, ["--config", str(config), "dump", str(sample_file)])

    assert result.exit_code == 0, result.output
    assert "\n\n  echo bye" in result.output


def test_environment_sets_options(runner: CliRunner, sample_file: Path) -> None:
    result = runner.invoke(
        cli,
        ["dump", str(sample_file)],
        env={"MINIYAML_PRESERVE_LITERAL_BLANK_LINES": "true"},
    )

    assert result.exit_code == 0, result.output
    assert "\n\n  echo bye" in result.output


def test_json(runner: CliRunner, sample_file: Path) -> None:
    result = runner.invoke(cli, ["json", str(sample_file)])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "items": ["first", "second"],
        "name": "demo",
        "script": "  echo hi\n  echo bye\n",
    }


def test_tree(runner: CliRunner, sample_file: Path) -> None:
    result = runner.invoke(cli, ["tree", str(sample_file)])

    assert result.exit_code == 0, result.output
    assert "sample.yaml (mapping)" in result.output
    assert "items (sequence)" in result.output
    assert "name = 'demo'" in result.output
    assert "- [1] = 'second'" in result.output


def test_check(runner: CliRunner, sample_file: Path) -> None:
    result = runner.invoke(cli, ["check", str(sample_file)])

    assert result.exit_code == 0
    assert result.output.startswith("OK: ")
    assert "(mapping)" in result.output


def test_check_reports_parse_errors(runner: CliRunner, invalid_file: Path) -> None:
    result = runner.invoke(cli, ["check", str(invalid_file)])

    assert result.exit_code == 1
    assert "Document marker not found" in result.output
    assert "FRAMING" in result.output


def test_bad_config_file_fails(runner: CliRunner, sample_file: Path, tmp_path: Path) -> None:
    config = tmp_path / "broken.json"
    config.write_text("{not json", encoding="utf-8")

    result = runner.invoke(cli, ["--config", str(config), "dump", str(sample_file)])

    assert result.exit_code == 1
    assert "Error:" in result.output
