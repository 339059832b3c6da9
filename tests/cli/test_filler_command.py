# topmark:header:start
#
#   project      : NumStrFmt
#   file         : test_filler_command.py
#   file_relpath : tests/cli/test_filler_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `filler` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_DATA_ERROR,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    output_lines,
    run_cli_in,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_filler_defaults(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["filler"])

    assert_SUCCESS(result)
    assert output_lines(result) == ["-" * 10]


@mark_cli
def test_filler_repeats_chars(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["filler", "=+", "3"])

    assert_SUCCESS(result)
    assert output_lines(result) == ["=+=+=+"]


@mark_cli
def test_filler_with_margins(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path, ["filler", "--left-margin", "[", "--right-margin", "]", "=", "5"]
    )

    assert_SUCCESS(result)
    assert output_lines(result) == ["[=====]"]


@mark_cli
def test_filler_margins_apply_to_configured_filler(tmp_path: Path) -> None:
    (tmp_path / "numstrfmt.toml").write_text(
        '[filler]\nchars = "*"\ncount = 4\n', encoding="utf-8"
    )

    result = run_cli_in(tmp_path, ["filler", "--left-margin", "> "])

    assert_SUCCESS(result)
    assert output_lines(result) == ["> ****"]


@mark_cli
def test_filler_zero_count_is_a_data_error(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["filler", "=", "0"])

    assert_DATA_ERROR(result)
    assert result.stdout == ""


@mark_cli
def test_filler_chars_without_count_is_a_usage_error(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["filler", "="])

    assert_USAGE_ERROR(result)
