from __future__ import annotations

import string
from functools import lru_cache
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# 0-9 then A-Z
GLYPH_BASE_LIMIT = 36


class ConvertSettings(BaseSettings):
    """
    Options consulted by inference and normalization.

    Read from ``BASE_CONVERT_*`` environment variables; instances are frozen,
    use :meth:`override` for a per-call variant.
    """

    model_config = SettingsConfigDict(
        env_prefix="BASE_CONVERT_",
        env_file=None,
        extra="ignore",
        frozen=True,
    )

    strict: bool = False
    padding: str = " _,."
    clamp_ten: bool = True
    clamp_hex: bool = True
    max_base: int = 16
    default_base: int = 10

    @field_validator("max_base", "default_base")
    @classmethod
    def _check_base(cls, v: int) -> int:
        if v < 2 or v > GLYPH_BASE_LIMIT:
            raise ValueError(f"must be between 2 and {GLYPH_BASE_LIMIT}")
        return v

    @field_validator("padding")
    @classmethod
    def _check_padding(cls, v: str) -> str:
        reserved = set(string.ascii_letters + string.digits + ":")
        clashing = sorted(set(v) & reserved)
        if clashing:
            raise ValueError(f"padding may not contain {''.join(clashing)!r}")
        return v

    def override(self, **changes: Any) -> "ConvertSettings":
        return type(self)(**{**self.model_dump(), **changes})


@lru_cache()
def get_settings() -> ConvertSettings:
    """Default settings shared by every entry point that is not given its own."""
    return ConvertSettings()


def resolve_settings(settings: ConvertSettings | None) -> ConvertSettings:
    return settings if settings is not None else get_settings()
