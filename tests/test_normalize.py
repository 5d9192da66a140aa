import pytest

from modules.base_convert.core.normalize import (
    is_literal,
    notation_base,
    prefix_base,
    strip_base_hint,
    strip_padding,
)


def test_strip_padding_default_characters(settings):
    assert strip_padding("1_000,000.5 0", settings) == "100000050"
    assert strip_padding("___", settings) == ""
    assert strip_padding("0xFF", settings) == "0xFF"


def test_strip_padding_custom_characters(settings):
    custom = settings.override(padding="'")
    assert strip_padding("1'000_0", custom) == "1000_0"
    assert strip_padding("1_0", settings.override(padding="")) == "1_0"


@pytest.mark.parametrize(
    "literal, expected",
    [
        ("0x1A", "1A"),
        ("0b101", "101"),
        ("0o17", "17"),
        ("0d99", "99"),
        ("0t12", "12"),
        ("0X1A", "0X1A"),
        ("16:FF", "FF"),
        ("3:2:1", "2:1"),
        (":5", ":5"),
        ("1234", "1234"),
        ("0", "0"),
    ],
)
def test_strip_base_hint(literal, expected):
    assert strip_base_hint(literal) == expected


def test_strip_base_hint_keeps_padding():
    assert strip_base_hint("0x_FF") == "_FF"


def test_declared_bases():
    assert prefix_base("0x10") == 16
    assert prefix_base("0B10") is None
    assert prefix_base("10") is None
    assert notation_base("7:16") == 7
    assert notation_base("0x7:1") is None
    assert notation_base("16") is None


@pytest.mark.parametrize(
    "literal",
    ["0x1A", "3:21", "1_000", "a b", "12x", "ZZ", ":5", "007"],
)
def test_is_literal_accepts(literal, settings):
    assert is_literal(literal, settings)


@pytest.mark.parametrize(
    "literal",
    ["", "3:", "1:2:3", "-5", "+5", "1;2", "x:1", "ä"],
)
def test_is_literal_rejects(literal, settings):
    assert not is_literal(literal, settings)


def test_strict_mode_forbids_padding(settings):
    strict = settings.override(strict=True)
    assert is_literal("1000", strict)
    assert not is_literal("1_000", strict)
    assert not is_literal("1 000", strict)
