from __future__ import annotations

import re

from modules.base_convert.core.digits import digit_value
from modules.base_convert.core.errors import (
    BaseExceedsMaximumError,
    BaseTooSmallError,
    NotANumberError,
)
from modules.base_convert.core.normalize import (
    notation_base,
    prefix_base,
    strip_base_hint,
    strip_padding,
)
from modules.base_convert.core.settings import ConvertSettings, resolve_settings


def _shape(padding: str) -> "re.Pattern[str]":
    return re.compile(rf"(?:[0-9]+:|0[bodtx])?[0-9A-Za-z{re.escape(padding)}]+")


def highest_base(payload: str) -> int:
    """Smallest base able to represent every digit of ``payload``."""
    highest = 0
    for char in payload:
        value = digit_value(char)
        if value > highest:
            highest = value
    return highest + 1


def infer_base(literal: str, settings: ConvertSettings | None = None) -> int:
    """
    Work out the base of a padding-stripped literal that still carries its hint.

    Symbolic prefixes win, then ``n:`` notation. Without either, digits that fit
    in base 10 read as decimal and digits that fit in base 16 read as hex
    (each heuristic can be switched off); otherwise the smallest base that holds
    every digit is used.
    """
    settings = resolve_settings(settings)
    if not _shape(settings.padding).fullmatch(literal):
        raise NotANumberError(literal)

    payload = strip_padding(strip_base_hint(literal), settings)
    highest = highest_base(payload)
    if highest > settings.max_base:
        raise BaseExceedsMaximumError(highest, settings.max_base)

    base = prefix_base(literal)
    if base is not None:
        return base

    base = notation_base(literal)
    if base is not None:
        if base < 2:
            raise BaseTooSmallError(base)
        if base > settings.max_base:
            raise BaseExceedsMaximumError(base, settings.max_base)
        return base

    if settings.clamp_ten and highest <= 10:
        return 10
    if settings.clamp_hex and highest <= 16:
        return 16
    return max(highest, 2)
