# topmark:header:start
#
#   project      : NumStrFmt
#   file         : __init__.py
#   file_relpath : src/numstrfmt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrFmt package.

NumStrFmt models how numeric strings are decorated when rendered as text:
leading and trailing sign and currency symbols for positive, negative and zero
values, and repeated-character filler fields used for padding and rulers. It
exposes a typed API, TOML-backed configuration and a small CLI.
"""

from __future__ import annotations

from numstrfmt.core.errors import (
    InvalidFillerError,
    InvalidNumberStringError,
    InvalidSymbolSpecError,
    NumStrFmtError,
    UnknownPresetError,
)
from numstrfmt.rendering.number_string import format_number_string
from numstrfmt.symbols.number_symbol_spec import NumberSymbolSpec
from numstrfmt.symbols.sign_specs import NegativeNumberSymbolsSpec, PositiveNumberSymbolsSpec
from numstrfmt.symbols.symbols_spec import NumberSymbolsSpec
from numstrfmt.symbols.types import (
    CurrencyNumSignRelativePosition,
    NumberFieldSymbolPosition,
    NumSignValue,
    TextJustify,
)
from numstrfmt.text.filler import TextFillerField
from numstrfmt.text.filler_format import TextFillerFieldFormat

__all__: list[str] = [
    "CurrencyNumSignRelativePosition",
    "InvalidFillerError",
    "InvalidNumberStringError",
    "InvalidSymbolSpecError",
    "NegativeNumberSymbolsSpec",
    "NumSignValue",
    "NumStrFmtError",
    "NumberFieldSymbolPosition",
    "NumberSymbolSpec",
    "NumberSymbolsSpec",
    "PositiveNumberSymbolsSpec",
    "TextFillerField",
    "TextFillerFieldFormat",
    "TextJustify",
    "UnknownPresetError",
    "format_number_string",
]
