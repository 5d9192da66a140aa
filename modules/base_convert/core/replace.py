from __future__ import annotations

import re
from typing import Tuple

from modules.base_convert.core.base import convert
from modules.base_convert.core.errors import InvalidInputError, NotANumberError
from modules.base_convert.core.settings import ConvertSettings, resolve_settings

Bounds = Tuple[int, int]


def token_pattern(settings: ConvertSettings | None = None) -> "re.Pattern[str]":
    """Run of digits, letters, ``n:`` and the non-blank padding characters."""
    padding = "".join(char for char in resolve_settings(settings).padding if not char.isspace())
    return re.compile(rf"[0-9A-Za-z:{re.escape(padding)}]+")


def number_bounds(
    text: str, cursor: int, settings: ConvertSettings | None = None
) -> Bounds | None:
    """Span of the token touching ``cursor``, or None when the cursor sits on whitespace/punctuation."""
    if cursor < 0 or cursor > len(text):
        return None
    for match in token_pattern(settings).finditer(text):
        if match.start() > cursor:
            break
        if match.start() <= cursor <= match.end():
            return match.span()
    return None


def convert_and_replace(
    text: str,
    bounds: Bounds | None = None,
    target_base: int | None = None,
    *,
    cursor: int | None = None,
    source_base: int | None = None,
    settings: ConvertSettings | None = None,
) -> Tuple[str, Bounds]:
    if bounds is None:
        if cursor is None:
            raise InvalidInputError("Either bounds or cursor is required.")
        bounds = number_bounds(text, cursor, settings)
        if bounds is None:
            raise NotANumberError("")

    start, end = bounds
    if start < 0 or end > len(text) or start >= end:
        raise InvalidInputError(
            f"Invalid bounds {start}:{end} for text of length {len(text)}."
        )

    replacement = convert(
        text[start:end], target_base, source_base=source_base, settings=settings
    )
    # zero formats as "", which would delete the token
    replacement = replacement or "0"
    return text[:start] + replacement + text[end:], (start, start + len(replacement))
