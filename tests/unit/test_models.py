"""Unit tests for output mode and run configuration models."""

import pytest
from pydantic import ValidationError

from csv2json.models import HeaderPolicy, OutputMode, RunConfig


@pytest.mark.parametrize(
    "token, expected",
    [
        ("first-file-only", HeaderPolicy.FIRST_FILE_ONLY),
        ("ff", HeaderPolicy.FIRST_FILE_ONLY),
        ("FF", HeaderPolicy.FIRST_FILE_ONLY),
        ("First-File-Only", HeaderPolicy.FIRST_FILE_ONLY),
        ("no", HeaderPolicy.NO),
        ("NO", HeaderPolicy.NO),
        ("always", HeaderPolicy.ALWAYS),
        ("Always", HeaderPolicy.ALWAYS),
    ],
)
def test_header_policy_parse(token, expected):
    assert HeaderPolicy.parse(token) is expected


@pytest.mark.parametrize("token", ["", "yes", "first", "f", "never"])
def test_header_policy_parse_invalid(token):
    with pytest.raises(ValueError):
        HeaderPolicy.parse(token)


def test_emits_for():
    assert [HeaderPolicy.ALWAYS.emits_for(i) for i in range(3)] == [True] * 3
    assert [HeaderPolicy.NO.emits_for(i) for i in range(3)] == [False] * 3
    assert [HeaderPolicy.FIRST_FILE_ONLY.emits_for(i) for i in range(3)] == [
        True,
        False,
        False,
    ]


def test_default_policy_follows_array_flag():
    assert OutputMode.from_flags(True).header_policy is HeaderPolicy.ALWAYS
    assert OutputMode.from_flags(False).header_policy is HeaderPolicy.NO


def test_explicit_policy_wins():
    mode = OutputMode.from_flags(True, HeaderPolicy.NO)
    assert mode.as_array is True
    assert mode.header_policy is HeaderPolicy.NO


def test_output_mode_is_frozen():
    mode = OutputMode()
    with pytest.raises(ValidationError):
        mode.as_array = True


def test_run_config_defaults_to_stdin():
    assert RunConfig().paths == ["-"]
    assert RunConfig(paths=[]).paths == ["-"]
    assert RunConfig(paths=["a.csv", "-"]).paths == ["a.csv", "-"]


def test_run_config_rejects_multibyte_delimiter():
    with pytest.raises(ValidationError):
        RunConfig(delimiter="::")


@pytest.mark.parametrize("token", [" no ", "always ", "\tff"])
def test_header_policy_rejects_padding(token):
    with pytest.raises(ValueError):
        HeaderPolicy.parse(token)
