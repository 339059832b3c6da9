# topmark:header:start
#
#   project      : NumStrFmt
#   file         : filler.py
#   file_relpath : src/numstrfmt/text/filler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Filler text fields: a short character sequence repeated N times.

Filler fields are used for padding, separator lines and rulers:

    ```python
    TextFillerField.new("-*", 3).get_formatted_text()  # "-*-*-*"
    ```

Validity:
    * ``filler_chars`` is non-empty and contains no NUL character.
    * ``1 <= repeat_count <= 1_000_000``.

An emptied instance (``empty()``) is invalid until new values are set.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from numstrfmt.config.logging import get_logger
from numstrfmt.constants import MAX_FILLER_REPEAT_COUNT, MIN_FILLER_REPEAT_COUNT
from numstrfmt.core.errors import InvalidFillerError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from numstrfmt.config.logging import NumStrLogger

logger: NumStrLogger = get_logger(__name__)


def check_filler_chars(chars: object) -> str:
    """Return ``chars`` as a validated string of filler characters.

    Args:
        chars (object): A string or a sequence of single characters.

    Returns:
        str: The filler characters.

    Raises:
        InvalidFillerError: If the characters are empty, not text, or contain NUL.
    """
    if isinstance(chars, str):
        text = chars
    elif isinstance(chars, Sequence) and all(isinstance(c, str) for c in chars):
        text = "".join(chars)
    else:
        raise InvalidFillerError(f"Filler characters must be text, got {chars!r}")
    if not text:
        raise InvalidFillerError("Filler characters are empty")
    if "\x00" in text:
        raise InvalidFillerError(
            f"Filler characters contain a NUL character at index {text.index(chr(0))}"
        )
    return text


def check_repeat_count(count: object) -> int:
    """Return ``count`` if it is an integer within the allowed repeat range.

    Raises:
        InvalidFillerError: If ``count`` is not an int or is out of range.
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidFillerError(f"Filler repeat count must be an integer, got {count!r}")
    if count < MIN_FILLER_REPEAT_COUNT:
        raise InvalidFillerError(f"Filler repeat count is less than one: {count}")
    if count > MAX_FILLER_REPEAT_COUNT:
        raise InvalidFillerError(
            f"Filler repeat count is greater than {MAX_FILLER_REPEAT_COUNT:,}: {count}"
        )
    return count


@dataclass(eq=False)
class TextFillerField:
    """A text field made of ``filler_chars`` repeated ``repeat_count`` times.

    Attributes:
        filler_chars (str): Characters to repeat.
        repeat_count (int): Number of repetitions.
    """

    filler_chars: str = ""
    repeat_count: int = 0

    @classmethod
    def new(cls, chars: str, count: int) -> TextFillerField:
        """Return a validated filler field.

        Raises:
            InvalidFillerError: If ``chars`` or ``count`` is invalid.
        """
        field = cls()
        field.set_text_filler(chars, count)
        return field

    @classmethod
    def new_from_char(cls, char: str, count: int) -> TextFillerField:
        """Return a filler field repeating a single character.

        Raises:
            InvalidFillerError: If ``char`` is not exactly one character or ``count``
                is invalid.
        """
        if not isinstance(char, str) or len(char) != 1:
            raise InvalidFillerError(f"Expected a single filler character, got {char!r}")
        return cls.new(char, count)

    @classmethod
    def new_from_chars(cls, chars: Sequence[str], count: int) -> TextFillerField:
        """Return a filler field from a sequence of characters."""
        return cls.new(check_filler_chars(chars), count)

    def set_text_filler(self, chars: str | Sequence[str], count: int) -> None:
        """Replace the filler characters and repeat count.

        Raises:
            InvalidFillerError: If either value is invalid; the field is left unchanged.
        """
        text = check_filler_chars(chars)
        n = check_repeat_count(count)
        self.filler_chars = text
        self.repeat_count = n

    def set_filler_char(self, char: str, count: int) -> None:
        """Replace the field with a single repeated character."""
        if not isinstance(char, str) or len(char) != 1:
            raise InvalidFillerError(f"Expected a single filler character, got {char!r}")
        self.set_text_filler(char, count)

    def get_filler_chars(self) -> str:
        return self.filler_chars

    def get_repeat_count(self) -> int:
        return self.repeat_count

    @property
    def length(self) -> int:
        """Length of the formatted text (0 for an invalid field)."""
        if not self.is_valid_instance():
            return 0
        return len(self.filler_chars) * self.repeat_count

    def is_valid_instance(self) -> bool:
        """Return True when `validate()` would succeed."""
        try:
            self.validate()
        except InvalidFillerError:
            return False
        return True

    def validate(self) -> None:
        """Check the filler characters and repeat count.

        Raises:
            InvalidFillerError: If either is invalid.
        """
        check_filler_chars(self.filler_chars)
        check_repeat_count(self.repeat_count)

    def get_formatted_text(self) -> str:
        """Return the filler characters repeated ``repeat_count`` times.

        Raises:
            InvalidFillerError: If the field is invalid.
        """
        self.validate()
        return self.filler_chars * self.repeat_count

    def __str__(self) -> str:
        return self.get_formatted_text()

    def equal(self, other: TextFillerField) -> bool:
        return (
            self.filler_chars == other.filler_chars and self.repeat_count == other.repeat_count
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextFillerField):
            return NotImplemented
        return self.equal(other)

    __hash__ = None  # type: ignore[assignment]

    def copy_in(self, other: TextFillerField) -> None:
        """Overwrite this field with the values of ``other``.

        Raises:
            InvalidFillerError: If ``other`` is invalid; this field is left unchanged.
        """
        other.validate()
        self.filler_chars = other.filler_chars
        self.repeat_count = other.repeat_count
        logger.trace("Copied filler field: %r", self)

    def copy_out(self) -> TextFillerField:
        """Return an independent copy of this field.

        Raises:
            InvalidFillerError: If this field is invalid.
        """
        self.validate()
        return TextFillerField(filler_chars=self.filler_chars, repeat_count=self.repeat_count)

    def empty(self) -> None:
        """Clear the filler characters and reset the repeat count to zero."""
        self.filler_chars = ""
        self.repeat_count = 0

    def to_toml_table(self) -> dict[str, Any]:
        return {"chars": self.filler_chars, "count": self.repeat_count}

    @classmethod
    def from_toml_table(cls, tbl: Mapping[str, Any]) -> TextFillerField:
        """Create a validated field from a ``{"chars": ..., "count": ...}`` table.

        Raises:
            InvalidFillerError: If the table holds invalid values.
        """
        return cls.new(tbl.get("chars", ""), tbl.get("count", 0))
