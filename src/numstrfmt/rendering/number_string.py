# topmark:header:start
#
#   project      : NumStrFmt
#   file         : number_string.py
#   file_relpath : src/numstrfmt/rendering/number_string.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Place configured sign and currency symbols around the digits of a number.

This is deliberately a thin layer: the digits are taken as given (no rounding,
grouping or decimal separator conversion). Placement rules:

1. The sign class of the value selects the positive, negative or zero spec.
2. Symbols positioned ``INSIDE_NUM_FIELD`` are attached to the digits.
3. The result is justified into ``field_length`` columns (when wider than
   the content).
4. Symbols positioned ``OUTSIDE_NUM_FIELD`` wrap the justified field.

Examples (field length 8):

    | negative spec                  | justify | output         |
    |--------------------------------|---------|----------------|
    | ``"-"`` inside                 | right   | ``" -123.45"``   |
    | ``"-"`` outside                | right   | ``"-  123.45"``  |
    | ``"("``/``")"`` outside        | center  | ``"( 123.45 )"`` |
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import TYPE_CHECKING, Union

from numstrfmt.config.logging import get_logger
from numstrfmt.constants import AUTO_FIELD_LENGTH
from numstrfmt.core.errors import InvalidNumberStringError
from numstrfmt.symbols.types import NumberFieldSymbolPosition, NumSignValue, TextJustify

if TYPE_CHECKING:
    from numstrfmt.config.logging import NumStrLogger
    from numstrfmt.symbols.symbols_spec import NumberSymbolsSpec

logger: NumStrLogger = get_logger(__name__)

NumberLike = Union[str, int, Decimal]

_NUMBER_RE = re.compile(r"^(?P<sign>[+-]?)(?P<digits>[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")

_INSIDE = NumberFieldSymbolPosition.INSIDE_NUM_FIELD


def classify_sign(value: NumberLike) -> tuple[NumSignValue, str]:
    """Split ``value`` into its sign class and unsigned digits.

    Args:
        value (NumberLike): Plain numeric text (``"-123.45"``), an ``int`` or a
            finite ``Decimal``.

    Returns:
        tuple[NumSignValue, str]: The sign class and the digits without sign.
            Values whose digits are all zero classify as ``ZERO``.

    Raises:
        InvalidNumberStringError: If ``value`` is not a plain finite number.
    """
    if isinstance(value, bool):
        raise InvalidNumberStringError(f"Not a number: {value!r}")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidNumberStringError(f"Not a finite number: {value!r}")
        text = format(value, "f")
    elif isinstance(value, int):
        text = str(value)
    elif isinstance(value, str):
        text = value.strip()
    else:
        raise InvalidNumberStringError(f"Unsupported number type: {type(value).__name__}")

    m = _NUMBER_RE.match(text)
    if m is None:
        raise InvalidNumberStringError(f"Not a plain numeric string: {value!r}")

    digits = m.group("digits")
    if not any(ch in "123456789" for ch in digits):
        return NumSignValue.ZERO, digits
    if m.group("sign") == "-":
        return NumSignValue.NEGATIVE, digits
    return NumSignValue.POSITIVE, digits


def format_number_string(
    value: NumberLike,
    symbols: NumberSymbolsSpec,
    *,
    field_length: int = AUTO_FIELD_LENGTH,
    justify: TextJustify = TextJustify.RIGHT,
) -> str:
    """Render ``value`` with the symbols configured for its sign class.

    Args:
        value (NumberLike): The number to render.
        symbols (NumberSymbolsSpec): Positive, negative and zero symbols.
        field_length (int): Width of the number field; ``-1`` sizes the field to
            its content.
        justify (TextJustify): Justification of the content within the field.

    Returns:
        str: The decorated number string.

    Raises:
        InvalidNumberStringError: If ``value`` is not a plain finite number.
        ValueError: If ``field_length`` is less than ``-1``.
    """
    if field_length < AUTO_FIELD_LENGTH:
        raise ValueError(f"field_length must be -1 or greater, got {field_length}")

    sign, digits = classify_sign(value)
    spec = symbols.spec_for(sign)

    inner_lead = outer_lead = inner_trail = outer_trail = ""
    if spec.leading_symbols:
        if spec.leading_field_position is _INSIDE:
            inner_lead = spec.leading_symbols
        else:
            outer_lead = spec.leading_symbols
    if spec.trailing_symbols:
        if spec.trailing_field_position is _INSIDE:
            inner_trail = spec.trailing_symbols
        else:
            outer_trail = spec.trailing_symbols

    content = f"{inner_lead}{digits}{inner_trail}"
    if field_length != AUTO_FIELD_LENGTH:
        content = justify.apply(content, field_length)
    result = f"{outer_lead}{content}{outer_trail}"
    logger.trace("Rendered %r (%s) as %r", value, sign.key, result)
    return result
