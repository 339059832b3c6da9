# topmark:header:start
#
#   project      : NumStrFmt
#   file         : test_public_imports.py
#   file_relpath : tests/test_public_imports.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Smoke tests: every entry module imports cleanly into a fresh interpreter state."""

from __future__ import annotations

import importlib
import sys

import pytest

from tests.conftest import parametrize


def _forget_numstrfmt_modules(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop loaded ``numstrfmt`` modules; monkeypatch restores them after the test."""
    for name in [m for m in sys.modules if m == "numstrfmt" or m.startswith("numstrfmt.")]:
        monkeypatch.delitem(sys.modules, name)


@parametrize(
    "module_name",
    [
        "numstrfmt",
        "numstrfmt.cli.main",
        "numstrfmt.config.logging",
        "numstrfmt.config.model",
        "numstrfmt.core.diagnostics",
        "numstrfmt.rendering.number_string",
        "numstrfmt.symbols.types",
        "numstrfmt.symbols.presets",
        "numstrfmt.text.filler",
    ],
)
def test_module_imports_first(monkeypatch: pytest.MonkeyPatch, module_name: str) -> None:
    """Importing any module first must not trip over a circular import."""
    _forget_numstrfmt_modules(monkeypatch)

    module = importlib.import_module(module_name)

    assert module is not None


def test_package_all_is_importable(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every name in ``numstrfmt.__all__`` resolves after a fresh import."""
    _forget_numstrfmt_modules(monkeypatch)

    package = importlib.import_module("numstrfmt")

    missing = [name for name in package.__all__ if not hasattr(package, name)]
    assert not missing, f"Missing from numstrfmt: {missing}"
