# topmark:header:start
#
#   project      : NumStrFmt
#   file         : test_presets_command.py
#   file_relpath : tests/cli/test_presets_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `presets` listing."""

from __future__ import annotations

from numstrfmt.symbols.presets import preset_names
from tests.cli.conftest import assert_SUCCESS, output_lines, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_presets_lists_every_preset_with_samples() -> None:
    result = run_cli(["presets"])

    assert_SUCCESS(result)
    for name in preset_names():
        assert name in result.stdout
    assert "[$ -1234.5]" in result.stdout
    assert "[1234.5- €]" in result.stdout
    assert "[(1234.5)]" in result.stdout


@mark_cli
def test_presets_quiet_prints_names_only() -> None:
    result = run_cli(["-q", "presets"])

    assert_SUCCESS(result)
    assert output_lines(result) == list(preset_names())
