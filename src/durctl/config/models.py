"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, durctl.toml only contains overrides.
A shop needs at most ``[engine] timezone``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from durctl.domain.starts import coerce_epoch_digits

CalendarChoice = Literal["auto", "zoneinfo", "naive"]


class EngineConfig(BaseModel):
    """[engine] section."""

    model_config = {"frozen": True}

    timezone: str = "UTC"
    calendar: CalendarChoice = "auto"
    default_start: int | str | None = None

    @field_validator("default_start")
    @classmethod
    def _epoch_digits(cls, value: int | str | None) -> object:
        return coerce_epoch_digits(value)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=40)
    color: bool = True
