# topmark:header:start
#
#   project      : NumStrFmt
#   file         : errors.py
#   file_relpath : src/numstrfmt/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the NumStrFmt library layer.

These are UI-agnostic. The CLI maps them onto `click` exceptions with exit
codes (see `numstrfmt.cli.errors`).

Every value error also derives from `ValueError` so callers that do not care
about NumStrFmt specifics can catch the builtin.
"""

from __future__ import annotations


class NumStrFmtError(Exception):
    """Base class for all NumStrFmt library errors."""


class InvalidSymbolSpecError(NumStrFmtError, ValueError):
    """A symbol specification has invalid symbols or an invalid field position."""


class InvalidFillerError(NumStrFmtError, ValueError):
    """A filler field has invalid characters or an out-of-range repeat count."""


class InvalidNumberStringError(NumStrFmtError, ValueError):
    """A value cannot be interpreted as a plain numeric string."""


class UnknownPresetError(NumStrFmtError, KeyError):
    """No symbol preset is registered under the requested name."""

    def __init__(self, name: str, known: tuple[str, ...] = ()) -> None:
        self.name = name
        self.known = known
        hint = f" (known: {', '.join(known)})" if known else ""
        super().__init__(f"Unknown symbol preset {name!r}{hint}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
