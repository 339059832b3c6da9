# topmark:header:start
#
#   project      : NumStrFmt
#   file         : filler_format.py
#   file_relpath : src/numstrfmt/text/filler_format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""A filler field surrounded by optional left and right margins.

    ```python
    fmt = TextFillerFieldFormat(left_margin="  ", filler=TextFillerField.new("=", 5))
    fmt.get_formatted_text()  # "  ====="
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from numstrfmt.core.errors import InvalidFillerError
from numstrfmt.text.filler import TextFillerField


def _check_margin(margin: object, *, side: str) -> str:
    if not isinstance(margin, str):
        raise InvalidFillerError(f"{side} margin must be a string, got {margin!r}")
    if "\x00" in margin:
        raise InvalidFillerError(f"{side} margin contains a NUL character")
    return margin


@dataclass(eq=False)
class TextFillerFieldFormat:
    """Left margin + filler field + right margin.

    Attributes:
        left_margin (str): Text placed before the filler; may be empty.
        filler (TextFillerField): The repeated filler characters.
        right_margin (str): Text placed after the filler; may be empty.
    """

    left_margin: str = ""
    filler: TextFillerField = field(default_factory=TextFillerField)
    right_margin: str = ""

    @classmethod
    def new(
        cls,
        chars: str,
        count: int,
        *,
        left_margin: str = "",
        right_margin: str = "",
    ) -> TextFillerFieldFormat:
        """Return a validated format built from filler characters and margins.

        Raises:
            InvalidFillerError: If any component is invalid.
        """
        fmt = cls(
            left_margin=_check_margin(left_margin, side="Left"),
            filler=TextFillerField.new(chars, count),
            right_margin=_check_margin(right_margin, side="Right"),
        )
        return fmt

    def validate(self) -> None:
        """Raise `InvalidFillerError` if the margins or the filler are invalid."""
        _check_margin(self.left_margin, side="Left")
        _check_margin(self.right_margin, side="Right")
        self.filler.validate()

    def is_valid_instance(self) -> bool:
        try:
            self.validate()
        except InvalidFillerError:
            return False
        return True

    def get_formatted_text(self) -> str:
        """Return the margins and the expanded filler as one string.

        Raises:
            InvalidFillerError: If the format is invalid.
        """
        self.validate()
        return f"{self.left_margin}{self.filler.get_formatted_text()}{self.right_margin}"

    def __str__(self) -> str:
        return self.get_formatted_text()

    def equal(self, other: TextFillerFieldFormat) -> bool:
        return (
            self.left_margin == other.left_margin
            and self.right_margin == other.right_margin
            and self.filler.equal(other.filler)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextFillerFieldFormat):
            return NotImplemented
        return self.equal(other)

    __hash__ = None  # type: ignore[assignment]

    def copy_in(self, other: TextFillerFieldFormat) -> None:
        """Overwrite this format with copies of the values in ``other``.

        Raises:
            InvalidFillerError: If ``other`` is invalid; this format is left unchanged.
        """
        other.validate()
        self.left_margin = other.left_margin
        self.right_margin = other.right_margin
        self.filler = other.filler.copy_out()

    def copy_out(self) -> TextFillerFieldFormat:
        """Return an independent copy.

        Raises:
            InvalidFillerError: If this format is invalid.
        """
        self.validate()
        return TextFillerFieldFormat(
            left_margin=self.left_margin,
            filler=self.filler.copy_out(),
            right_margin=self.right_margin,
        )

    def empty(self) -> None:
        self.left_margin = ""
        self.right_margin = ""
        self.filler.empty()

    def to_toml_table(self) -> dict[str, Any]:
        tbl = self.filler.to_toml_table()
        tbl["left_margin"] = self.left_margin
        tbl["right_margin"] = self.right_margin
        return tbl
