from __future__ import annotations

import re
import string
from typing import Dict

from modules.base_convert.core.settings import ConvertSettings, resolve_settings


BASE_HINTS: Dict[str, int] = {
    "0b": 2,
    "0t": 3,
    "0o": 8,
    "0d": 10,
    "0x": 16,
}

ALNUM = frozenset(string.ascii_letters + string.digits)

_NOTATION_RE = re.compile(r"^([0-9]+):")


def strip_padding(literal: str, settings: ConvertSettings | None = None) -> str:
    padding = resolve_settings(settings).padding
    if not padding:
        return literal
    return "".join(char for char in literal if char not in padding)


def prefix_base(literal: str) -> int | None:
    return BASE_HINTS.get(literal[:2])


def notation_base(literal: str) -> int | None:
    match = _NOTATION_RE.match(literal)
    if match is None:
        return None
    return int(match.group(1))


def strip_base_hint(literal: str) -> str:
    """Drop a ``0x``-style prefix or a leading ``n:`` from ``literal``."""
    if prefix_base(literal) is not None:
        return literal[2:]
    match = _NOTATION_RE.match(literal)
    if match is not None:
        return literal[match.end():]
    return literal


def is_literal(literal: str, settings: ConvertSettings | None = None) -> bool:
    """
    Check ``literal`` against ``([0-9]*:?|0[bxodt])?[0-9A-Za-z<padding>]+``.

    The ``0[bxodt]`` prefix is alphanumeric and is therefore covered by the body.
    Padding is only allowed outside strict mode.
    """
    settings = resolve_settings(settings)
    allowed = ALNUM if settings.strict else ALNUM | set(settings.padding)

    head, colon, body = literal.partition(":")
    if not colon:
        head, body = "", literal

    for char in head:
        if char not in string.digits:
            return False
    if not body:
        return False
    for char in body:
        if char not in allowed:
            return False
    return True
