# topmark:header:start
#
#   project      : NumStrFmt
#   file         : test_spec_properties.py
#   file_relpath : tests/symbols/test_spec_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the copy/equal/empty invariants and symbol placement."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from numstrfmt.rendering.number_string import classify_sign, format_number_string
from numstrfmt.symbols.number_symbol_spec import NumberSymbolSpec
from numstrfmt.symbols.symbols_spec import NumberSymbolsSpec
from numstrfmt.symbols.types import NumberFieldSymbolPosition, TextJustify
from numstrfmt.text.filler import TextFillerField
from tests.conftest import mark_symbols
from tests.strategies_numstrfmt import (
    s_filler_field,
    s_number_symbol_spec,
    s_number_symbols_spec,
    s_numeric_string,
)


@mark_symbols
@given(spec=s_number_symbol_spec())
def test_copy_out_equals_and_is_independent(spec: NumberSymbolSpec) -> None:
    copy = spec.copy_out()

    assert copy.equal(spec)
    copy.empty()
    assert copy.is_nop()
    assert copy.equal(NumberSymbolSpec.new_nop())
    assert spec.is_valid()


@mark_symbols
@given(source=s_number_symbols_spec(), target=s_number_symbols_spec())
def test_copy_in_makes_equal(source: NumberSymbolsSpec, target: NumberSymbolsSpec) -> None:
    target.copy_in(source)

    assert target.equal(source)
    target.set_nop()
    assert target.is_nop()


@mark_symbols
@given(field=s_filler_field())
def test_filler_length_matches_text(field: TextFillerField) -> None:
    text = field.get_formatted_text()

    assert len(text) == field.length
    assert text == field.get_filler_chars() * field.get_repeat_count()
    assert field.copy_out() == field


@pytest.mark.hypothesis_slow
@settings(max_examples=500, deadline=None)
@given(
    value=s_numeric_string,
    symbols=s_number_symbols_spec(),
    field_length=st.integers(min_value=-1, max_value=30),
    justify=st.sampled_from(list(TextJustify)),
)
def test_rendered_string_contains_digits_and_symbols(
    value: str,
    symbols: NumberSymbolsSpec,
    field_length: int,
    justify: TextJustify,
) -> None:
    """Symbols wrap the digits; padding only ever widens the result to the field."""
    sign, digits = classify_sign(value)
    spec = symbols.spec_for(sign)

    result = format_number_string(value, symbols, field_length=field_length, justify=justify)
    bare = spec.decorate(digits)

    if field_length == -1:
        assert result == bare
        return

    outside = NumberFieldSymbolPosition.OUTSIDE_NUM_FIELD
    outer = 0
    if spec.leading_field_position is outside:
        outer += len(spec.leading_symbols)
    if spec.trailing_field_position is outside:
        outer += len(spec.trailing_symbols)

    assert len(result) == outer + max(len(bare) - outer, field_length)
    assert result.replace(" ", "") == bare.replace(" ", "")
