# topmark:header:start
#
#   project      : NumStrFmt
#   file         : test_filler_format.py
#   file_relpath : tests/text/test_filler_format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `TextFillerFieldFormat` (filler field with margins)."""

from __future__ import annotations

import pytest

from numstrfmt.core.errors import InvalidFillerError
from numstrfmt.text.filler import TextFillerField
from numstrfmt.text.filler_format import TextFillerFieldFormat


def test_margins_surround_filler() -> None:
    fmt = TextFillerFieldFormat.new("=", 5, left_margin="[", right_margin="]")

    assert fmt.get_formatted_text() == "[=====]"
    assert str(fmt) == "[=====]"


def test_direct_construction() -> None:
    fmt = TextFillerFieldFormat(left_margin="  ", filler=TextFillerField.new("=", 5))

    assert fmt.get_formatted_text() == "  ====="


def test_invalid_margin_rejected() -> None:
    with pytest.raises(InvalidFillerError):
        TextFillerFieldFormat.new("-", 1, right_margin="\x00")


def test_default_instance_is_invalid() -> None:
    fmt = TextFillerFieldFormat()

    assert not fmt.is_valid_instance()
    with pytest.raises(InvalidFillerError):
        fmt.get_formatted_text()


def test_copy_out_is_deep() -> None:
    original = TextFillerFieldFormat.new("-", 2, left_margin="<")
    copy = original.copy_out()

    copy.filler.set_text_filler("+", 4)

    assert original.get_formatted_text() == "<--"
    assert copy.get_formatted_text() == "<++++"
    assert not original.equal(copy)


def test_copy_in_and_empty() -> None:
    source = TextFillerFieldFormat.new("*", 3, left_margin="(", right_margin=")")
    target = TextFillerFieldFormat.new("-", 1)

    target.copy_in(source)
    assert target == source
    assert target.filler is not source.filler

    target.empty()
    assert target.left_margin == ""
    assert target.right_margin == ""
    assert not target.is_valid_instance()

    with pytest.raises(InvalidFillerError):
        source.copy_in(target)
    assert source.get_formatted_text() == "(***)"


def test_to_toml_table() -> None:
    fmt = TextFillerFieldFormat.new("-", 10, left_margin="# ")

    assert fmt.to_toml_table() == {
        "chars": "-",
        "count": 10,
        "left_margin": "# ",
        "right_margin": "",
    }
