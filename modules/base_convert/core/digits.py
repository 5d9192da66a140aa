from __future__ import annotations

from typing import Dict

from modules.base_convert.core.errors import (
    BaseTooLargeError,
    BaseUnrepresentableError,
    DigitExceedsBaseError,
    InvalidDigitError,
)
from modules.base_convert.core.settings import GLYPH_BASE_LIMIT


DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_VALUES: Dict[str, int] = {
    glyph: index
    for index, char in enumerate(DIGITS)
    for glyph in (char, char.lower())
}


def digit_value(char: str) -> int:
    try:
        return _VALUES[char]
    except KeyError:
        raise InvalidDigitError(char) from None


def digit_char(value: int, base: int | None = None, *, max_base: int = GLYPH_BASE_LIMIT) -> str:
    """Glyph for ``value``, checked against ``base`` and ``max_base`` when a base is given."""
    if base is None:
        if value < 0 or value >= GLYPH_BASE_LIMIT:
            raise DigitExceedsBaseError(value, GLYPH_BASE_LIMIT)
        return DIGITS[value]

    if base > GLYPH_BASE_LIMIT:
        raise BaseUnrepresentableError(base)
    if base > max_base:
        raise BaseTooLargeError(base, max_base)
    if value < 0 or value >= base:
        raise DigitExceedsBaseError(value, base)
    return DIGITS[value]
