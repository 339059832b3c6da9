# topmark:header:start
#
#   project      : NumStrFmt
#   file         : keys.py
#   file_relpath : src/numstrfmt/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML section and key names used by the NumStrFmt configuration."""

from __future__ import annotations

from typing import Final


class Toml:
    """Namespace for TOML section and key names."""

    # [symbols]
    SECTION_SYMBOLS: Final[str] = "symbols"
    KEY_PRESET: Final[str] = "preset"
    KEY_CURRENCY: Final[str] = "currency"
    KEY_CURRENCY_LEADING: Final[str] = "currency_leading"
    SIGN_TABLES: Final[tuple[str, ...]] = ("positive", "negative", "zero")

    # [field]
    SECTION_FIELD: Final[str] = "field"
    KEY_LENGTH: Final[str] = "length"
    KEY_JUSTIFY: Final[str] = "justify"

    # [filler]
    SECTION_FILLER: Final[str] = "filler"
    KEY_CHARS: Final[str] = "chars"
    KEY_COUNT: Final[str] = "count"
    KEY_LEFT_MARGIN: Final[str] = "left_margin"
    KEY_RIGHT_MARGIN: Final[str] = "right_margin"
