# topmark:header:start
#
#   project      : NumStrFmt
#   file         : presets.py
#   file_relpath : src/numstrfmt/symbols/presets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locale defaults for currency and signed-number symbols.

Two families of builders live here:

* Currency builders return a single currency `NumberSymbolSpec`
  (``currency_defaults_us()`` is ``"$ "`` leading, outside the number sign).
* Signed builders return a `NumberSymbolsSpec` where only the negative class
  carries symbols (``signed_defaults_us_paren()`` is ``"("``/``")"``).

`combine_currency_and_signs()` merges the two, honoring the currency's
position relative to the number sign:

    | currency placement | US (leading ``"$ "``) | EU (trailing ``" €"``) |
    |--------------------|-----------------------|------------------------|
    | outside the sign   | ``"$ -123.45"``       | ``"123.45- €"``        |
    | inside the sign    | ``"-$ 123.45"``       | ``"123.45 €-"``        |

The `PRESETS` registry names the combinations exposed through configuration
(``[symbols] preset = "..."``) and the CLI (``--preset``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from numstrfmt.config.logging import get_logger
from numstrfmt.core.enum_mixins import norm_token
from numstrfmt.core.errors import InvalidSymbolSpecError, UnknownPresetError
from numstrfmt.symbols.number_symbol_spec import (
    NumberSymbolSpec,
    Symbols,
    check_field_position,
    normalize_symbols,
)
from numstrfmt.symbols.symbols_spec import NumberSymbolsSpec
from numstrfmt.symbols.types import CurrencyNumSignRelativePosition, NumberFieldSymbolPosition

if TYPE_CHECKING:
    from collections.abc import Callable

    from numstrfmt.config.logging import NumStrLogger

logger: NumStrLogger = get_logger(__name__)

_INSIDE = NumberFieldSymbolPosition.INSIDE_NUM_FIELD


def _rel_pos(currency_inside_num_sign: bool) -> CurrencyNumSignRelativePosition:
    if currency_inside_num_sign:
        return CurrencyNumSignRelativePosition.INSIDE_NUM_SIGN
    return CurrencyNumSignRelativePosition.OUTSIDE_NUM_SIGN


# ---- currency builders ----


def currency_basic(
    leading: Symbols,
    trailing: Symbols,
    *,
    currency_inside_num_sign: bool = False,
    position: NumberFieldSymbolPosition = _INSIDE,
) -> NumberSymbolSpec:
    """Return a currency spec from explicit leading and/or trailing symbols.

    Args:
        leading (Symbols): Leading currency symbols, e.g. ``"$ "``.
        trailing (Symbols): Trailing currency symbols, e.g. ``" €"``.
        currency_inside_num_sign (bool): Put the currency inside the number sign
            (``"-$ 1"``) instead of outside it (``"$ -1"``).
        position (NumberFieldSymbolPosition): Position relative to the number field.

    Returns:
        NumberSymbolSpec: The currency spec.

    Raises:
        InvalidSymbolSpecError: If both ``leading`` and ``trailing`` are empty or
            ``position`` is ``NONE``.
    """
    lead = normalize_symbols(leading, what="Leading currency symbols")
    trail = normalize_symbols(trailing, what="Trailing currency symbols")
    if not lead and not trail:
        raise InvalidSymbolSpecError("Leading and trailing currency symbols are both empty")
    return NumberSymbolSpec.new_currency_leading_trailing(
        lead, trail, position, _rel_pos(currency_inside_num_sign)
    )


def currency_simple(symbols: Symbols, *, leading: bool = True) -> NumberSymbolSpec:
    """Return a currency spec, adding a separating space when ``symbols`` lacks one.

    ``"$"`` becomes ``"$ "`` when leading, ``"€"`` becomes ``" €"`` when trailing.
    The currency sits outside the number sign, inside the number field.

    Raises:
        InvalidSymbolSpecError: If ``symbols`` is empty.
    """
    text = normalize_symbols(symbols, what="Currency symbols")
    if not text:
        raise InvalidSymbolSpecError("Currency symbols are empty")
    if leading:
        if not text.endswith(" "):
            text = f"{text} "
        return currency_basic(text, "")
    if not text.startswith(" "):
        text = f" {text}"
    return currency_basic("", text)


def currency_defaults_us() -> NumberSymbolSpec:
    """Leading dollar sign outside the minus: ``"$ -123.45"``."""
    return currency_basic("$ ", "", currency_inside_num_sign=False)


def currency_defaults_eu() -> NumberSymbolSpec:
    """Trailing euro sign outside the minus: ``"123.45- €"``."""
    return currency_basic("", " €", currency_inside_num_sign=False)


def currency_defaults_uk_minus_inside() -> NumberSymbolSpec:
    """Leading pound sign with the minus inside it: ``"£ -123.45"``."""
    return currency_basic("£ ", "", currency_inside_num_sign=False)


def currency_defaults_uk_minus_outside() -> NumberSymbolSpec:
    """Leading pound sign with the minus outside it: ``"-£ 123.45"``."""
    return currency_basic("£ ", "", currency_inside_num_sign=True)


# ---- signed number builders ----


def signed_basic(
    leading_negative: Symbols,
    trailing_negative: Symbols,
    *,
    position: NumberFieldSymbolPosition = _INSIDE,
) -> NumberSymbolsSpec:
    """Return a spec where only negative values carry symbols.

    Raises:
        InvalidSymbolSpecError: If both negative symbol strings are empty or
            ``position`` is ``NONE``.
    """
    check_field_position(position, what="Negative symbol")
    lead = normalize_symbols(leading_negative, what="Leading negative symbols")
    trail = normalize_symbols(trailing_negative, what="Trailing negative symbols")
    if not lead and not trail:
        raise InvalidSymbolSpecError("Leading and trailing negative symbols are both empty")
    spec = NumberSymbolsSpec.new_nop()
    spec.set_negative_symbols(lead, trail, position)
    return spec


def signed_simple(*, leading_minus: bool = True) -> NumberSymbolsSpec:
    """Return a plain minus sign, before (``"-123"``) or after (``"123-"``) the digits."""
    return NumberSymbolsSpec.new_simple_signed_number(leading=leading_minus)


def signed_defaults_us_minus() -> NumberSymbolsSpec:
    """Leading minus: ``"-123.45"``."""
    return signed_basic("-", "")


def signed_defaults_us_paren() -> NumberSymbolsSpec:
    """Surrounding parentheses: ``"(123.45)"``."""
    return signed_basic("(", ")")


def signed_defaults_france() -> NumberSymbolsSpec:
    """Trailing minus: ``"123,45-"``."""
    return signed_basic("", "-")


def signed_defaults_germany() -> NumberSymbolsSpec:
    """Trailing minus: ``"123,45-"``."""
    return signed_basic("", "-")


# ---- combination ----


def _merge_sign_and_currency(
    sign: NumberSymbolSpec, currency: NumberSymbolSpec
) -> NumberSymbolSpec:
    inside = currency.currency_num_sign_rel_pos is CurrencyNumSignRelativePosition.INSIDE_NUM_SIGN
    if inside:
        leading = sign.leading_symbols + currency.leading_symbols
        trailing = currency.trailing_symbols + sign.trailing_symbols
    else:
        leading = currency.leading_symbols + sign.leading_symbols
        trailing = sign.trailing_symbols + currency.trailing_symbols

    lead_pos = (
        currency.leading_field_position if currency.leading_symbols else sign.leading_field_position
    )
    trail_pos = (
        currency.trailing_field_position
        if currency.trailing_symbols
        else sign.trailing_field_position
    )
    merged = NumberSymbolSpec()
    merged.set_leading_trailing(leading, lead_pos, trailing, trail_pos)
    merged.currency_num_sign_rel_pos = currency.currency_num_sign_rel_pos
    return merged


def combine_currency_and_signs(
    currency: NumberSymbolSpec,
    signs: NumberSymbolsSpec,
) -> NumberSymbolsSpec:
    """Merge a currency spec into each sign class of ``signs``.

    Args:
        currency (NumberSymbolSpec): A currency spec (its relative position must
            not be ``NONE``).
        signs (NumberSymbolsSpec): Sign symbols for positive, negative and zero.

    Returns:
        NumberSymbolsSpec: A new spec; the inputs are not modified.

    Raises:
        InvalidSymbolSpecError: If ``currency`` is not a currency spec.
    """
    currency.validate()
    if not currency.is_currency:
        raise InvalidSymbolSpecError("Symbol spec does not describe a currency")
    signs.validate()
    return NumberSymbolsSpec(
        positive=_merge_sign_and_currency(signs.positive, currency),
        negative=_merge_sign_and_currency(signs.negative, currency),
        zero=_merge_sign_and_currency(signs.zero, currency),
    )


# ---- registry ----


@dataclass(frozen=True, slots=True)
class SymbolPreset:
    """A named symbol layout.

    Attributes:
        name (str): Registry key (``"us-currency"``).
        description (str): One-line description for listings.
        factory (Callable[[], NumberSymbolsSpec]): Builds a fresh spec on each call.
    """

    name: str
    description: str
    factory: Callable[[], NumberSymbolsSpec]

    def build(self) -> NumberSymbolsSpec:
        return self.factory()


PRESETS: dict[str, SymbolPreset] = {
    p.name: p
    for p in (
        SymbolPreset("us", "Leading minus sign", signed_defaults_us_minus),
        SymbolPreset("us-paren", "Negative values in parentheses", signed_defaults_us_paren),
        SymbolPreset("france", "Trailing minus sign (France)", signed_defaults_france),
        SymbolPreset("germany", "Trailing minus sign (Germany)", signed_defaults_germany),
        SymbolPreset("simple-leading", "Simple leading minus", signed_simple),
        SymbolPreset(
            "simple-trailing",
            "Simple trailing minus",
            lambda: signed_simple(leading_minus=False),
        ),
        SymbolPreset(
            "us-currency",
            "Leading dollar sign outside the minus",
            lambda: combine_currency_and_signs(currency_defaults_us(), signed_defaults_us_minus()),
        ),
        SymbolPreset(
            "eu-currency",
            "Trailing euro sign outside a trailing minus",
            lambda: combine_currency_and_signs(currency_defaults_eu(), signed_defaults_germany()),
        ),
        SymbolPreset(
            "uk-currency-minus-inside",
            "Leading pound sign, minus inside the currency",
            lambda: combine_currency_and_signs(
                currency_defaults_uk_minus_inside(), signed_defaults_us_minus()
            ),
        ),
        SymbolPreset(
            "uk-currency-minus-outside",
            "Leading pound sign, minus outside the currency",
            lambda: combine_currency_and_signs(
                currency_defaults_uk_minus_outside(), signed_defaults_us_minus()
            ),
        ),
    )
}


def preset_names() -> tuple[str, ...]:
    return tuple(PRESETS)


def get_preset(name: str) -> NumberSymbolsSpec:
    """Return a fresh spec for the preset ``name``.

    Lookup is case-insensitive and treats ``_`` and ``-`` alike.

    Raises:
        UnknownPresetError: If no preset is registered under ``name``.
    """
    wanted = norm_token(name)
    for preset in PRESETS.values():
        if norm_token(preset.name) == wanted:
            logger.debug("Resolved symbol preset %r", preset.name)
            return preset.build()
    raise UnknownPresetError(name, preset_names())
