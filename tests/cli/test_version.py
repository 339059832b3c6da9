# topmark:header:start
#
#   project      : NumStrFmt
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `version` command."""

from __future__ import annotations

import pytest
from packaging.version import InvalidVersion, Version

from numstrfmt.constants import NUMSTRFMT_VERSION
from tests.cli.conftest import assert_SUCCESS, output_lines, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_pep440_version() -> None:
    """It should print the installed PEP 440 project version exactly."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert output_lines(result) == [NUMSTRFMT_VERSION]

    try:
        Version(NUMSTRFMT_VERSION)
    except InvalidVersion as exc:
        pytest.fail(f"Not a valid PEP 440 version: {NUMSTRFMT_VERSION!r} ({exc})")
