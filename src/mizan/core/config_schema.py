"""Pydantic models for config validation.

Opt-in schema validation for ``Config.config_data``.  Call
``Config.validated()`` to obtain a typed, validated ``MizanConfig``
instance.  Existing dict-based access continues to work unchanged.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, field_validator

from mizan.zakat.nisab import GOLD_NISAB_GRAMS, SILVER_NISAB_GRAMS, NisabStandard

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """loguru sink settings."""

    level: str = "WARNING"
    file: str | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}; expected one of {sorted(_LOG_LEVELS)}")
        return level


class ZakatConfig(BaseModel):
    """Nisab weights, zakat rate and the default threshold standard."""

    currency: str = "USD"
    nisab_standard: NisabStandard = NisabStandard.LOWER
    gold_nisab_grams: Decimal = GOLD_NISAB_GRAMS
    silver_nisab_grams: Decimal = SILVER_NISAB_GRAMS
    rate: Decimal = Decimal("0.025")

    @field_validator("currency")
    @classmethod
    def _currency_code(cls, v: str) -> str:
        code = v.strip().upper()
        if len(code) != 3 or not code.isascii() or not code.isalpha():
            raise ValueError(f"currency must be a three-letter code, got {v!r}")
        return code

    @field_validator("gold_nisab_grams", "silver_nisab_grams")
    @classmethod
    def _positive_weight(cls, v: Decimal) -> Decimal:
        if not v.is_finite() or v <= 0:
            raise ValueError("nisab weight must be a positive number of grams")
        return v

    @field_validator("rate")
    @classmethod
    def _rate_fraction(cls, v: Decimal) -> Decimal:
        if not v.is_finite() or not 0 < v <= 1:
            raise ValueError("zakat rate must be a fraction in (0, 1]")
        return v


class RemindersConfig(BaseModel):
    """Reminder window before a due date."""

    lead_days: int = 30

    @field_validator("lead_days")
    @classmethod
    def _non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("lead_days cannot be negative")
        return v


class MizanConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so consumers can bolt on custom sections
    without touching this schema.
    """

    model_config = ConfigDict(extra="allow")

    logging: LoggingConfig = LoggingConfig()
    zakat: ZakatConfig = ZakatConfig()
    reminders: RemindersConfig = RemindersConfig()
