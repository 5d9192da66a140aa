from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from modules.base_convert.core.digits import digit_char, digit_value
from modules.base_convert.core.errors import (
    BaseConvertError,
    BaseTooLargeError,
    BaseTooSmallError,
    BaseUnrepresentableError,
    InvalidDigitError,
    NotANumberError,
)
from modules.base_convert.core.infer import infer_base
from modules.base_convert.core.normalize import is_literal, strip_base_hint, strip_padding
from modules.base_convert.core.settings import (
    GLYPH_BASE_LIMIT,
    ConvertSettings,
    resolve_settings,
)
from universe.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Conversion:
    literal: str
    source_base: int
    target_base: int
    value: int
    digits: str


def parse_digits(digits: str, base: int) -> int:
    if base < 2:
        raise BaseTooSmallError(base)
    value = 0
    for char in digits:
        digit = digit_value(char)
        if digit >= base:
            raise InvalidDigitError(char, base)
        value = value * base + digit
    return value


def format_number(value: int, base: int, *, max_base: int = GLYPH_BASE_LIMIT) -> str:
    """
    Render ``value`` in ``base``.

    Zero renders as the empty string; display callers substitute ``"0"``.
    Negative values are not supported.
    """
    if base < 2:
        raise BaseTooSmallError(base)
    if base > GLYPH_BASE_LIMIT:
        raise BaseUnrepresentableError(base)
    if base > max_base:
        raise BaseTooLargeError(base, max_base)

    digits = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(digit_char(remainder, base, max_base=max_base))
    return "".join(reversed(digits))


def _check_source_base(base: int, settings: ConvertSettings) -> int:
    if base < 2:
        raise BaseTooSmallError(base)
    if base > settings.max_base:
        raise BaseTooLargeError(base, settings.max_base)
    return base


def convert_literal(
    literal: str,
    target_base: int | None = None,
    *,
    source_base: int | None = None,
    settings: ConvertSettings | None = None,
) -> Conversion:
    settings = resolve_settings(settings)
    if not is_literal(literal, settings):
        raise NotANumberError(literal)

    unpadded = strip_padding(literal, settings)
    payload = strip_base_hint(unpadded)
    if source_base is None:
        source_base = infer_base(unpadded, settings)
    else:
        _check_source_base(source_base, settings)

    if target_base is None:
        target_base = settings.default_base

    value = parse_digits(payload, source_base)
    digits = format_number(value, target_base)
    logger.debug(
        "base_convert.converted",
        literal=literal,
        source_base=source_base,
        target_base=target_base,
    )
    return Conversion(
        literal=literal,
        source_base=source_base,
        target_base=target_base,
        value=value,
        digits=digits,
    )


def convert(
    literal: str,
    target_base: int | None = None,
    *,
    source_base: int | None = None,
    settings: ConvertSettings | None = None,
) -> str:
    """Convert ``literal`` to ``target_base`` (the configured default when omitted)."""
    return convert_literal(
        literal, target_base, source_base=source_base, settings=settings
    ).digits


def _parse_base(value: object, *, label: str) -> Tuple[int | None, str | None]:
    if value is None:
        return None, None
    raw = str(value).strip()
    if not raw:
        return None, None
    try:
        base = int(raw)
    except ValueError:
        return None, f"{label} must be a number."
    if base < 2 or base > GLYPH_BASE_LIMIT:
        return None, f"{label} must be between 2 and {GLYPH_BASE_LIMIT}."
    return base, None


def convert_base(
    value: object,
    base_from: object = None,
    base_to: object = None,
    settings: ConvertSettings | None = None,
) -> Tuple[Dict[str, object] | None, str | None]:
    if value is None or not str(value).strip():
        return None, "Value is required."
    literal = str(value).strip()

    from_base, error = _parse_base(base_from, label="From base")
    if error:
        return None, error

    to_base, error = _parse_base(base_to, label="To base")
    if error:
        return None, error

    try:
        result = convert_literal(
            literal, to_base, source_base=from_base, settings=settings
        )
    except BaseConvertError as exc:
        return None, str(exc)

    return {
        "input": literal,
        "base_from": result.source_base,
        "base_to": result.target_base,
        "decimal": str(result.value),
        "converted": result.digits or "0",
    }, None
