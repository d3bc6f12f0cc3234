"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from csv2json.cli import cli


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional stdin.

    Usage:
        result = invoke(["data.csv"])
        result = invoke(["-a", "-H", "always"], input_data="a,b\\n1,2\\n")
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, [str(a) for a in args], input=input_data)

    return _invoke


@pytest.fixture
def write_file(tmp_path):
    """Write ``data`` to ``tmp_path / name`` and return the path."""

    def _write(name: str, data: str) -> Path:
        path = tmp_path / name
        path.write_text(data, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def test_data():
    """Provide path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def people_csv(test_data):
    """Provide path to people.csv test file."""
    return test_data / "people.csv"


@pytest.fixture
def events_tsv(test_data):
    """Provide path to events.tsv test file."""
    return test_data / "events.tsv"
