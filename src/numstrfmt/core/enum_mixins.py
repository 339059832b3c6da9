# topmark:header:start
#
#   project      : NumStrFmt
#   file         : enum_mixins.py
#   file_relpath : src/numstrfmt/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keyed string enums used for the symbol position and justification settings.

A `KeyedStrEnum` member carries a stable machine key (its ``.value``, used in
TOML and on the command line), a human label, and parse aliases. Keep UI
libraries out of this module.

Example:
    ```python
    class Side(KeyedStrEnum):
        LEADING = ("leading", "Before the digits", ("prefix",))
        TRAILING = ("trailing", "After the digits", ("suffix",))

    assert Side.parse("Prefix") is Side.LEADING
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def norm_token(s: str) -> str:
    """Normalize an identifier-like string to match config keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        """Return the machine keys of all members in definition order."""
        return tuple(m.key for m in cls)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches the stable key, the member name or any alias. Matching is
        case-insensitive and treats '-' and ' ' as '_'.

        Args:
            raw (str | None): Token to parse.

        Returns:
            _KS | None: The matching member, or None when nothing matches.
        """
        if raw is None:
            return None
        token: str = norm_token(raw)

        for m in cls:
            if token in (norm_token(m.value), norm_token(m.name)):
                return m
            if any(token == norm_token(a) for a in m.aliases):
                return m
        return None
