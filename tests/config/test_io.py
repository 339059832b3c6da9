# topmark:header:start
#
#   project      : NumStrFmt
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML I/O helpers in numstrfmt.config.io."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import toml
import tomlkit

from numstrfmt.config.io import (
    discover_config_files,
    get_int_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    nest_toml_under_section,
    to_toml,
)
from numstrfmt.core.diagnostics import DiagnosticLevel, DiagnosticLog

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.config


def test_load_defaults_dict_has_known_sections() -> None:
    data = load_defaults_dict()

    assert data["symbols"]["preset"] == "us"
    assert data["field"] == {"length": -1, "justify": "right"}
    assert data["filler"]["chars"] == "-"


def test_typed_getters_warn_on_wrong_type() -> None:
    diags = DiagnosticLog()
    table: dict[str, Any] = {"s": 1, "i": "x", "b": True, "ok_s": "v", "ok_i": 3}

    assert get_string_value_or_none(table, "s", where="t", diagnostics=diags) is None
    assert get_int_value_or_none(table, "i", where="t", diagnostics=diags) is None
    assert get_int_value_or_none(table, "b", where="t", diagnostics=diags) is None
    assert get_string_value_or_none(table, "ok_s", diagnostics=diags) == "v"
    assert get_int_value_or_none(table, "ok_i", diagnostics=diags) == 3
    assert get_string_value_or_none(table, "missing", diagnostics=diags) is None

    assert [d.level for d in diags] == [DiagnosticLevel.WARNING] * 3
    assert "[t].b" in list(diags)[2].message


def test_get_table_value_ignores_non_tables() -> None:
    assert get_table_value({"a": 1}, "a") == {}
    assert get_table_value({"a": {"b": 2}}, "a") == {"b": 2}


def test_load_toml_dict_reports_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "bad.toml"
    path.write_text("[symbols\n", encoding="utf-8")
    diags = DiagnosticLog()

    assert load_toml_dict(path, diagnostics=diags) == {}
    assert diags.has_error()


def test_load_toml_dict_reports_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "numstrfmt.toml"
    path.write_bytes(b"[symbols]\ncurrency = \"\xff\"\n")
    diags = DiagnosticLog()

    assert load_toml_dict(path, diagnostics=diags) == {}
    assert [d.level for d in diags] == [DiagnosticLevel.ERROR]
    assert "UTF-8" in list(diags)[0].message


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    diags = DiagnosticLog()

    assert load_toml_dict(tmp_path / "nope.toml", diagnostics=diags) == {}
    assert diags.has_error()


def test_load_toml_dict_pyproject_uses_tool_section(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text(
        '[project]\nname = "x"\n\n[tool.numstrfmt.field]\nlength = 12\n', encoding="utf-8"
    )

    assert load_toml_dict(path) == {"field": {"length": 12}}


def test_load_toml_dict_pyproject_without_section(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")
    diags = DiagnosticLog()

    assert load_toml_dict(path, diagnostics=diags) == {}
    assert [d.level for d in diags] == [DiagnosticLevel.INFO]


def test_discover_config_files_order(tmp_path: Path) -> None:
    assert discover_config_files(tmp_path) == []

    (tmp_path / "numstrfmt.toml").write_text("", encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")

    assert [p.name for p in discover_config_files(tmp_path)] == [
        "pyproject.toml",
        "numstrfmt.toml",
    ]


def test_to_toml_round_trip() -> None:
    data = {"symbols": {"preset": "us"}, "field": {"length": 8}}

    assert toml.loads(to_toml(data)) == data


def test_nest_toml_under_section_basic() -> None:
    """Nesting keeps the leading comment and wraps keys in [tool.numstrfmt]."""
    source = "# leading comment\n\n[field]\nlength = 4\n"
    wrapped: str = nest_toml_under_section(source, "tool.numstrfmt")

    parsed: Any = tomlkit.parse(wrapped)
    assert parsed["tool"]["numstrfmt"]["field"]["length"] == 4
    assert wrapped.startswith("# leading comment")


def test_nest_toml_under_section_rejects_empty_section() -> None:
    with pytest.raises(ValueError):
        nest_toml_under_section("a = 1\n", "")
    with pytest.raises(ValueError):
        nest_toml_under_section("a = 1\n", "..")


def test_nest_toml_under_section_rejects_invalid_toml() -> None:
    with pytest.raises(RuntimeError):
        nest_toml_under_section("a = \n", "tool.numstrfmt")
