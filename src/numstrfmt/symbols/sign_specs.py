# topmark:header:start
#
#   project      : NumStrFmt
#   file         : sign_specs.py
#   file_relpath : src/numstrfmt/symbols/sign_specs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Leading/trailing sign symbols for positive and negative values.

`PositiveNumberSymbolsSpec` and `NegativeNumberSymbolsSpec` carry only the
sign characters, without field positions or currency information. They convert
into a full `NumberSymbolSpec` with `to_number_symbol_spec()` when placed in a
`NumberSymbolsSpec`.

Example:
    ```python
    neg = NegativeNumberSymbolsSpec.new_leading_trailing("(", ")")
    assert neg.to_number_symbol_spec().decorate("12") == "(12)"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from numstrfmt.config.logging import get_logger
from numstrfmt.core.errors import InvalidSymbolSpecError
from numstrfmt.symbols.number_symbol_spec import (
    NumberSymbolSpec,
    Symbols,
    check_field_position,
    normalize_symbols,
)
from numstrfmt.symbols.types import NumberFieldSymbolPosition

if TYPE_CHECKING:
    from numstrfmt.config.logging import NumStrLogger

logger: NumStrLogger = get_logger(__name__)

_S = TypeVar("_S", bound="_SignSymbolsSpec")


@dataclass(eq=False)
class _SignSymbolsSpec:
    """Shared state and behavior of the per-sign symbol specs."""

    leading_symbols: str = ""
    trailing_symbols: str = ""

    def __post_init__(self) -> None:
        self.leading_symbols = normalize_symbols(self.leading_symbols, what="Leading symbols")
        self.trailing_symbols = normalize_symbols(self.trailing_symbols, what="Trailing symbols")

    @classmethod
    def new_leading(cls: type[_S], symbols: Symbols) -> _S:
        """Return a spec with leading symbols only."""
        spec = cls()
        spec.set_leading(symbols)
        return spec

    @classmethod
    def new_trailing(cls: type[_S], symbols: Symbols) -> _S:
        """Return a spec with trailing symbols only."""
        spec = cls()
        spec.set_trailing(symbols)
        return spec

    def set_leading(self, symbols: Symbols) -> None:
        """Replace the leading symbols; empty ``symbols`` clears them."""
        self.leading_symbols = normalize_symbols(symbols, what="Leading symbols")

    def set_trailing(self, symbols: Symbols) -> None:
        """Replace the trailing symbols; empty ``symbols`` clears them."""
        self.trailing_symbols = normalize_symbols(symbols, what="Trailing symbols")

    def leading_str(self) -> str:
        return self.leading_symbols

    def trailing_str(self) -> str:
        return self.trailing_symbols

    def is_nop(self) -> bool:
        """Return True when neither leading nor trailing symbols are configured."""
        return not self.leading_symbols and not self.trailing_symbols

    def empty(self) -> None:
        self.leading_symbols = ""
        self.trailing_symbols = ""

    def empty_leading(self) -> None:
        self.leading_symbols = ""

    def empty_trailing(self) -> None:
        self.trailing_symbols = ""

    def equal(self, other: _SignSymbolsSpec) -> bool:
        """Return True if ``other`` is the same kind of spec with the same symbols."""
        return (
            type(self) is type(other)
            and self.leading_symbols == other.leading_symbols
            and self.trailing_symbols == other.trailing_symbols
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _SignSymbolsSpec):
            return NotImplemented
        return self.equal(other)

    __hash__ = None  # type: ignore[assignment]

    def copy_in(self: _S, other: _S) -> None:
        """Overwrite this spec with the symbols of ``other``.

        Raises:
            InvalidSymbolSpecError: If ``other`` is a different kind of spec or holds
                invalid symbols; this spec is left unchanged.
        """
        if type(self) is not type(other):
            raise InvalidSymbolSpecError(
                f"Cannot copy a {type(other).__name__} into a {type(self).__name__}"
            )
        leading = normalize_symbols(other.leading_symbols, what="Leading symbols")
        trailing = normalize_symbols(other.trailing_symbols, what="Trailing symbols")
        self.leading_symbols = leading
        self.trailing_symbols = trailing
        logger.trace("Copied %s: %r", type(self).__name__, self)

    def copy_out(self: _S) -> _S:
        """Return an independent copy of this spec."""
        return type(self)(
            leading_symbols=self.leading_symbols,
            trailing_symbols=self.trailing_symbols,
        )

    def to_number_symbol_spec(
        self,
        position: NumberFieldSymbolPosition = NumberFieldSymbolPosition.INSIDE_NUM_FIELD,
    ) -> NumberSymbolSpec:
        """Return a `NumberSymbolSpec` with these symbols on both sides at ``position``."""
        check_field_position(position, what="Sign symbol")
        spec = NumberSymbolSpec()
        spec.set_leading(self.leading_symbols, position)
        spec.set_trailing(self.trailing_symbols, position)
        return spec


@dataclass(eq=False)
class PositiveNumberSymbolsSpec(_SignSymbolsSpec):
    """Leading and trailing symbols for positive values (e.g. ``"+"``)."""


@dataclass(eq=False)
class NegativeNumberSymbolsSpec(_SignSymbolsSpec):
    """Leading and trailing symbols for negative values (e.g. ``"-"`` or ``"("``/``")"``)."""

    @classmethod
    def new_leading_trailing(
        cls,
        leading: Symbols,
        trailing: Symbols,
    ) -> NegativeNumberSymbolsSpec:
        """Return a negative sign spec with symbols on both sides, such as parentheses."""
        spec = cls()
        spec.set_leading(leading)
        spec.set_trailing(trailing)
        return spec
