# topmark:header:start
#
#   project      : NumStrFmt
#   file         : constants.py
#   file_relpath : src/numstrfmt/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrFmt Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

NUMSTRFMT_VERSION: str = get_version("numstrfmt")

# Name of the bundled default config inside the package `numstrfmt.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "numstrfmt.config"
DEFAULT_TOML_CONFIG_NAME: str = "numstrfmt-default.toml"

# Section used when the configuration lives in pyproject.toml:
PYPROJECT_TOOL_SECTION: str = "tool.numstrfmt"

# Project files looked up in the working directory, lowest precedence first:
DISCOVERED_CONFIG_NAMES: tuple[str, ...] = ("pyproject.toml", "numstrfmt.toml")

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: str = "NUMSTRFMT_LOG_LEVEL"

# Bounds for the number of times a filler field repeats its characters:
MIN_FILLER_REPEAT_COUNT: int = 1
MAX_FILLER_REPEAT_COUNT: int = 1_000_000

# A field length of -1 means "as wide as the content":
AUTO_FIELD_LENGTH: int = -1

VALUE_NOT_SET: str = "<not set>"
