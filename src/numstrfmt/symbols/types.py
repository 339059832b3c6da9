# topmark:header:start
#
#   project      : NumStrFmt
#   file         : types.py
#   file_relpath : src/numstrfmt/symbols/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enumerations shared by the symbol specifications and the renderer."""

from __future__ import annotations

from numstrfmt.core.enum_mixins import KeyedStrEnum


class NumberFieldSymbolPosition(KeyedStrEnum):
    """Where a leading or trailing symbol sits relative to the number field.

    With a field of 8 characters, right-justified, and a minus sign:

    - ``INSIDE_NUM_FIELD``:  ``" -123.45"``
    - ``OUTSIDE_NUM_FIELD``: ``"-  123.45"``

    ``NONE`` is the zero value and is not a valid position for a symbol.
    """

    NONE = ("none", "Not set")
    INSIDE_NUM_FIELD = ("inside_num_field", "Inside the number field", ("inside",))
    OUTSIDE_NUM_FIELD = ("outside_num_field", "Outside the number field", ("outside",))

    @property
    def is_valid(self) -> bool:
        return self is not NumberFieldSymbolPosition.NONE


class CurrencyNumSignRelativePosition(KeyedStrEnum):
    """Placement of a currency symbol relative to a number sign.

    - ``OUTSIDE_NUM_SIGN``: ``"$ -123.45"`` / ``"123.45- €"``
    - ``INSIDE_NUM_SIGN``:  ``"-$ 123.45"`` / ``"123.45 €-"``

    ``NONE`` marks a symbol spec that carries no currency.
    """

    NONE = ("none", "No currency")
    OUTSIDE_NUM_SIGN = ("outside_num_sign", "Currency outside the number sign", ("outside",))
    INSIDE_NUM_SIGN = ("inside_num_sign", "Currency inside the number sign", ("inside",))

    @property
    def is_currency(self) -> bool:
        return self is not CurrencyNumSignRelativePosition.NONE


class NumSignValue(KeyedStrEnum):
    """Sign class of a numeric value."""

    NEGATIVE = ("negative", "Less than zero", ("neg", "minus"))
    ZERO = ("zero", "Equal to zero")
    POSITIVE = ("positive", "Greater than zero", ("pos", "plus"))


class TextJustify(KeyedStrEnum):
    """Justification of text inside a fixed-width field."""

    LEFT = ("left", "Left-justified")
    RIGHT = ("right", "Right-justified")
    CENTER = ("center", "Centered", ("centre",))

    def apply(self, text: str, width: int) -> str:
        """Pad ``text`` with spaces to ``width`` characters.

        Text that is already as wide as ``width`` (or wider) is returned as is.
        Centering puts the extra space of an odd padding on the right.
        """
        if width <= len(text):
            return text
        if self is TextJustify.LEFT:
            return text.ljust(width)
        if self is TextJustify.RIGHT:
            return text.rjust(width)
        pad = width - len(text)
        left = pad // 2
        return " " * left + text + " " * (pad - left)
