# topmark:header:start
#
#   project      : NumStrFmt
#   file         : test_format_command.py
#   file_relpath : tests/cli/test_format_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `format` command output, overrides and config discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_DATA_ERROR,
    assert_SUCCESS,
    output_lines,
    run_cli_in,
)
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_format_uses_default_preset(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["format", "--", "-123.456", "7", "0"])

    assert_SUCCESS(result)
    assert output_lines(result) == ["-123.456", "7", "0"]


@mark_cli
def test_negative_values_without_separator(tmp_path: Path) -> None:
    """Negative numbers are accepted as plain positional arguments."""
    result = run_cli_in(tmp_path, ["format", "--preset", "us-paren", "-5", "5"])

    assert_SUCCESS(result)
    assert output_lines(result) == ["(5)", "5"]


@mark_cli
@parametrize(
    "args, expected",
    [
        (["--currency", "$"], "$ -123.456"),
        (["--currency", "€", "--trailing"], "123.456- €"),
        (["--currency", ""], "-123.456"),
        (["--preset", "eu-currency"], "123.456- €"),
        (["--preset", "US-Currency"], "$ -123.456"),
    ],
)
def test_layout_overrides(tmp_path: Path, args: list[str], expected: str) -> None:
    result = run_cli_in(tmp_path, ["format", *args, "--", "-123.456"])

    assert_SUCCESS(result)
    assert output_lines(result) == [expected]


@mark_cli
def test_field_length_and_justify(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path, ["format", "--field-length", "6", "--justify", "centre", "--", "-1"]
    )

    assert_SUCCESS(result)
    assert output_lines(result) == ["  -1  "]


@mark_cli
def test_verbose_shows_source_and_padding(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["-v", "format", "--field-length", "4", "7"])

    assert_SUCCESS(result)
    assert output_lines(result) == ["7 -> [   7]"]
    assert "Using config: <defaults>" in result.stderr


@mark_cli
def test_invalid_number_is_a_data_error(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["format", "12", "twelve"])

    assert_DATA_ERROR(result)
    assert output_lines(result) == ["12"]
    assert "twelve" in result.stderr


@mark_cli
def test_unknown_preset_is_rejected_by_click(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["format", "--preset", "klingon", "1"])

    assert result.exit_code == 2, result.output


@mark_cli
def test_project_config_is_discovered(tmp_path: Path) -> None:
    (tmp_path / "numstrfmt.toml").write_text('[symbols]\ncurrency = "£"\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["format", "--", "-3"])
    assert_SUCCESS(result)
    assert output_lines(result) == ["£ -3"]

    result = run_cli_in(tmp_path, ["format", "--no-config", "--", "-3"])
    assert_SUCCESS(result)
    assert output_lines(result) == ["-3"]


@mark_cli
def test_pyproject_tool_section_is_discovered(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.numstrfmt.symbols]\npreset = "france"\n',
        encoding="utf-8",
    )

    result = run_cli_in(tmp_path, ["format", "--", "-3"])

    assert_SUCCESS(result)
    assert output_lines(result) == ["3-"]


@mark_cli
def test_explicit_config_wins_over_discovered(tmp_path: Path) -> None:
    (tmp_path / "numstrfmt.toml").write_text("[field]\nlength = 3\n", encoding="utf-8")
    extra = tmp_path / "extra.toml"
    extra.write_text('[field]\nlength = 5\njustify = "left"\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["format", "--config", str(extra), "42"])

    assert_SUCCESS(result)
    assert output_lines(result) == ["42   "]


@mark_cli
def test_config_warning_is_printed_unless_quiet(tmp_path: Path) -> None:
    (tmp_path / "numstrfmt.toml").write_text("[colour]\nname = 'blue'\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["format", "1"])
    assert_SUCCESS(result)
    assert output_lines(result) == ["1"]
    assert "[warning]" in result.stderr
    assert "colour" in result.stderr

    quiet = run_cli_in(tmp_path, ["-q", "format", "1"])
    assert_SUCCESS(quiet)
    assert "[warning]" not in quiet.stderr


@mark_cli
def test_config_error_exits_with_config_error(tmp_path: Path) -> None:
    (tmp_path / "numstrfmt.toml").write_text("[field]\nlength = -5\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["format", "1"])

    assert_CONFIG_ERROR(result)
    assert result.stdout == ""
    assert "field length" in result.stderr


@mark_cli
@parametrize(
    "content",
    [
        b'[symbols]\ncurrency = "\\u0000"\n',
        b'[symbols]\ncurrency = "\xff"\n',
    ],
)
def test_unusable_config_file_exits_with_config_error(tmp_path: Path, content: bytes) -> None:
    (tmp_path / "numstrfmt.toml").write_bytes(content)

    result = run_cli_in(tmp_path, ["format", "5"])

    assert_CONFIG_ERROR(result)
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "[error]" in result.stderr
