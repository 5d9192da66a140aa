"""Base converter exception hierarchy."""

from __future__ import annotations


class BaseConvertError(ValueError):
    """Base exception for all conversion errors."""

    kind = "BaseConvertError"


class InvalidInputError(BaseConvertError):
    """Caller arguments around the literal (bounds, cursor, form fields) are unusable."""

    kind = "InvalidInput"


class NotANumberError(BaseConvertError):
    """Literal does not match the numeric literal grammar."""

    kind = "NotANumber"

    def __init__(self, literal: str) -> None:
        self.literal = literal
        super().__init__(f"Not a number: {literal!r}")


class InvalidDigitError(BaseConvertError):
    """Character is not a digit, or is not a digit of the base in use."""

    kind = "InvalidDigit"

    def __init__(self, char: str, base: int | None = None) -> None:
        self.char = char
        self.base = base
        if base is None:
            super().__init__(f"Invalid digit: {char!r}")
        else:
            super().__init__(f"Invalid digit for base {base}: {char}")


class BaseTooSmallError(BaseConvertError):
    kind = "BaseTooSmall"

    def __init__(self, base: int) -> None:
        self.base = base
        super().__init__(f"Base must be at least 2, got {base}.")


class BaseTooLargeError(BaseConvertError):
    """Requested base is above the configured maximum."""

    kind = "BaseTooLarge"

    def __init__(self, base: int, max_base: int) -> None:
        self.base = base
        self.max_base = max_base
        super().__init__(f"Base {base} exceeds the maximum base {max_base}.")


class BaseExceedsMaximumError(BaseTooLargeError):
    """Inferred base is above the configured maximum."""

    kind = "BaseExceedsMaximum"


class BaseUnrepresentableError(BaseConvertError):
    """Base has more digits than there are glyphs (0-9, A-Z)."""

    kind = "BaseUnrepresentable"

    def __init__(self, base: int) -> None:
        self.base = base
        super().__init__(f"Base {base} cannot be written with digits 0-9 and A-Z.")


class DigitExceedsBaseError(BaseConvertError):
    kind = "DigitExceedsBase"

    def __init__(self, value: int, base: int) -> None:
        self.value = value
        self.base = base
        super().__init__(f"Digit value {value} is out of range for base {base}.")
