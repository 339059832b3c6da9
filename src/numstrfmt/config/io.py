# topmark:header:start
#
#   project      : NumStrFmt
#   file         : io.py
#   file_relpath : src/numstrfmt/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for the NumStrFmt configuration layer.

The helpers are pure: they read and write TOML and extract typed values, but
never mutate configuration objects.

Typical flow:
    1. Load defaults from the packaged resource (``load_defaults_dict``).
    2. Load user files (``load_toml_dict``); ``pyproject.toml`` contributes its
       ``[tool.numstrfmt]`` table only.
    3. Inspect values with the typed getters, which report bad types into a
       `DiagnosticLog` instead of raising.
    4. Serialize back with ``to_toml`` and, for ``pyproject.toml`` snippets,
       ``nest_toml_under_section``.

Notes:
    ``toml`` handles plain reading and writing; ``tomlkit`` is only used by
    ``nest_toml_under_section`` so that comments survive the nesting.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, TypeGuard, cast

import toml
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.items import Table

from numstrfmt.config.logging import get_logger
from numstrfmt.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    DISCOVERED_CONFIG_NAMES,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from pathlib import Path

    from numstrfmt.config.logging import NumStrLogger
    from numstrfmt.core.diagnostics import DiagnosticLog

logger: NumStrLogger = get_logger(__name__)

TomlTable = dict[str, Any]

__all__: list[str] = [
    "TomlTable",
    "as_toml_table",
    "is_toml_table",
    "get_table_value",
    "get_string_value_or_none",
    "get_int_value_or_none",
    "load_defaults_dict",
    "load_toml_dict",
    "discover_config_files",
    "clean_toml",
    "to_toml",
    "nest_toml_under_section",
]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(val, dict)


def as_toml_table(obj: object) -> TomlTable | None:
    """Return ``obj`` as a TOML table when it is a ``dict``, otherwise ``None``."""
    return obj if is_toml_table(obj) else None


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table, or an empty dict when missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_string_value_or_none(
    table: TomlTable,
    key: str,
    *,
    where: str = "",
    diagnostics: DiagnosticLog | None = None,
) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Section name used in diagnostic messages.
        diagnostics (DiagnosticLog | None): Receives a warning when the value
            is present but not a string.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    if diagnostics is not None:
        diagnostics.add_warning(
            f"Ignoring [{where}].{key}: expected a string, got {type(value).__name__}"
        )
    return None


def get_int_value_or_none(
    table: TomlTable,
    key: str,
    *,
    where: str = "",
    diagnostics: DiagnosticLog | None = None,
) -> int | None:
    """Extract an optional integer value from a TOML table.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Section name used in diagnostic messages.
        diagnostics (DiagnosticLog | None): Receives a warning when the value
            is present but not an integer.

    Returns:
        int | None: The integer value, or ``None`` when absent or not an integer.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if diagnostics is not None:
        diagnostics.add_warning(
            f"Ignoring [{where}].{key}: expected an integer, got {type(value).__name__}"
        )
    return None


def load_defaults_dict() -> TomlTable:
    """Return the packaged default configuration as a Python dict.

    Returns:
        TomlTable: The parsed default configuration.

    Raises:
        RuntimeError: If the bundled resource cannot be read or is invalid TOML.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    logger.debug("Loading defaults from package resource: %s", resource)
    try:
        text: str = resource.read_text(encoding="utf8")
    except OSError as exc:
        raise RuntimeError(
            f"Cannot read bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r}: {exc}"
        ) from exc

    try:
        return toml.loads(text)
    except toml.TomlDecodeError as exc:
        raise RuntimeError(
            f"Bundled default config {DEFAULT_TOML_CONFIG_NAME!r} is invalid TOML: {exc}"
        ) from exc


def _tool_section(data: TomlTable) -> TomlTable:
    node: Any = data
    for key in PYPROJECT_TOOL_SECTION.split("."):
        node = node.get(key) if is_toml_table(node) else None
    return node if is_toml_table(node) else {}


def load_toml_dict(path: Path, *, diagnostics: DiagnosticLog | None = None) -> TomlTable:
    """Load a NumStrFmt configuration table from a TOML file.

    For a file named ``pyproject.toml`` only the ``[tool.numstrfmt]`` table is
    returned.

    Args:
        path (Path): Path to a TOML document.
        diagnostics (DiagnosticLog | None): Receives an error when the file
            cannot be read or parsed.

    Returns:
        TomlTable: The parsed configuration, or an empty dict on failure.
    """
    try:
        data: TomlTable = toml.load(path)
    except OSError as exc:
        logger.error("Error loading TOML from %s: %s", path, exc)
        if diagnostics is not None:
            diagnostics.add_error(f"Cannot read config file {path}: {exc}")
        return {}
    except toml.TomlDecodeError as exc:
        logger.error("Error decoding TOML from %s: %s", path, exc)
        if diagnostics is not None:
            diagnostics.add_error(f"Invalid TOML in {path}: {exc}")
        return {}
    except UnicodeDecodeError as exc:
        logger.error("Config file %s is not valid UTF-8: %s", path, exc)
        if diagnostics is not None:
            diagnostics.add_error(f"Config file {path} is not valid UTF-8: {exc}")
        return {}

    if path.name == "pyproject.toml":
        section = _tool_section(data)
        if not section and diagnostics is not None:
            diagnostics.add_info(f"No [{PYPROJECT_TOOL_SECTION}] table in {path}")
        return section
    return data


def discover_config_files(root: Path) -> list[Path]:
    """Return the project config files present in ``root``, lowest precedence first.

    Only ``pyproject.toml`` and ``numstrfmt.toml`` are considered; a
    ``pyproject.toml`` without a ``[tool.numstrfmt]`` table still counts and is
    reported as an info diagnostic when loaded.
    """
    found: list[Path] = [
        root / name for name in DISCOVERED_CONFIG_NAMES if (root / name).is_file()
    ]
    logger.debug("Discovered config files in %s: %s", root, found)
    return found


def clean_toml(text: str) -> str:
    """Round-trip ``text`` through ``toml`` to drop comments and normalize layout."""
    return toml.dumps(toml.loads(text))


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string."""
    return toml.dumps(toml_dict)


def nest_toml_under_section(toml_doc: str, section_keys: str) -> str:
    r"""Return ``toml_doc`` nested under a dotted section path.

    ``nest_toml_under_section("a = 1\n", "tool.numstrfmt")`` yields a document
    equivalent to::

        [tool.numstrfmt]
        a = 1

    Comments before the first key and after the last key stay at the top and
    bottom of the new document; inline trivia travels with each item.

    Args:
        toml_doc (str): Original TOML document to nest.
        section_keys (str): Dotted section path such as ``"tool.numstrfmt"``.

    Returns:
        str: The nested TOML document.

    Raises:
        ValueError: If ``section_keys`` has no non-empty component.
        RuntimeError: If the document cannot be parsed or a path component
            clashes with a non-table.
    """
    keys: list[str] = [k for k in section_keys.split(".") if k]
    if not keys:
        raise ValueError("section_keys must contain at least one non-empty component")

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(toml_doc)
    except TomlkitParseError as exc:
        raise RuntimeError(f"Error parsing TOML document: {exc}") from exc

    keyed = [i for i, (key, _) in enumerate(doc.body) if key is not None]
    first = keyed[0] if keyed else len(doc.body)
    last = keyed[-1] if keyed else len(doc.body) - 1
    preamble = doc.body[:first]
    postamble = doc.body[last + 1 :]

    new_doc: tomlkit.TOMLDocument = tomlkit.document()
    new_doc.body.extend(preamble)

    level: tomlkit.TOMLDocument | Table = new_doc
    for key in keys:
        if key not in level:
            level.add(key, tomlkit.table())
        child = level[key]
        if not isinstance(child, Table):
            raise RuntimeError(
                f"Cannot nest configuration under [{section_keys}]: [{key}] is not a table."
            )
        level = child

    for item_key, item_value in cast("dict[str, Any]", doc).items():
        level.add(item_key, item_value)

    new_doc.body.extend(postamble)
    return new_doc.as_string()
