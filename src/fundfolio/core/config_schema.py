"""Pydantic models for config validation.

Opt-in schema validation for ``Config.config_data``. Call
``Config.validated()`` to obtain a typed, validated ``FundFolioConfig``
instance. Dict-based access through ``Config.get`` keeps working unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from fundfolio.financial.enums import Currency

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class PathsConfig(BaseModel):
    """File-system paths used by the application."""

    data_dir: Path
    storage_dir: Path | None = None
    log_dir: Path | None = None

    @field_validator("data_dir", "storage_dir", "log_dir", mode="before")
    @classmethod
    def _expand_user(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Path(v).expanduser()
        if isinstance(v, Path):
            return v.expanduser()
        return v


class CurrencyConfig(BaseModel):
    """Display currency and exchange-rate table overrides."""

    default: Currency = Currency.AUD
    fallback_rate: float = 1.0
    strict: bool = False
    rates: dict[str, float] = {}

    @field_validator("fallback_rate")
    @classmethod
    def _positive_fallback(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("fallback_rate must be positive")
        return v

    @field_validator("rates")
    @classmethod
    def _valid_rate_keys(cls, v: dict[str, float]) -> dict[str, float]:
        # Env overrides arrive lowercased
        v = {key.upper(): rate for key, rate in v.items()}
        for key, rate in v.items():
            parts = key.split("_")
            if len(parts) != 2:
                raise ValueError(f"rate key {key!r} must look like 'AUD_INR'")
            for code in parts:
                Currency(code)
            if rate <= 0:
                raise ValueError(f"rate for {key!r} must be positive")
        return v


class BootstrapConfig(BaseModel):
    """First-run behaviour."""

    sample_data: bool = True


class LoansConfig(BaseModel):
    """EMI payment policy."""

    allow_unresolved_link: bool = False


class LoggingConfig(BaseModel):
    """loguru sink settings."""

    level: str = "WARNING"
    file: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _known_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.upper()
            if v not in _LOG_LEVELS:
                raise ValueError(f"unknown log level {v!r}")
        return v


class FundFolioConfig(BaseModel):
    """Root configuration model.

    Uses ``extra="allow"`` so callers can bolt on custom sections
    without touching this schema.
    """

    model_config = ConfigDict(extra="allow")

    paths: PathsConfig
    currency: CurrencyConfig = CurrencyConfig()
    bootstrap: BootstrapConfig = BootstrapConfig()
    loans: LoansConfig = LoansConfig()
    logging: LoggingConfig = LoggingConfig()
