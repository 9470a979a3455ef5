"""Static configuration of the report generator."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_TRUE_VALUES = {"1", "true", "yes", "on", "y", "t"}
_FALSE_VALUES = {"0", "false", "no", "off", "n", "f"}


def _get_env_flag(name: str, default: bool = False) -> bool:
    """Return a boolean read from an environment variable."""

    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _get_env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _get_env_text(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class Settings:
    """Global settings read from the environment."""

    REPORT_DEBUG: bool = False
    OUTPUT_PATH: Path = Path("rapporto_cassette.pdf")
    DEFAULT_REVISION: str = "Rev.05"
    EXPIRY_WARNING_DAYS: int = 30
    COMPANY_NAME: str = "ISOKIT Srl"
    LOG_DIR: Path = Path("logs")


def load_settings() -> Settings:
    return Settings(
        REPORT_DEBUG=_get_env_flag("REPORT_DEBUG", default=False),
        OUTPUT_PATH=Path(_get_env_text("REPORT_OUTPUT_PATH", "rapporto_cassette.pdf")),
        DEFAULT_REVISION=_get_env_text("REPORT_DEFAULT_REVISION", "Rev.05"),
        EXPIRY_WARNING_DAYS=_get_env_int("REPORT_EXPIRY_WARNING_DAYS", 30),
        COMPANY_NAME=_get_env_text("REPORT_COMPANY_NAME", "ISOKIT Srl"),
        LOG_DIR=Path(_get_env_text("REPORT_LOG_DIR", str(Path.cwd() / "logs"))),
    )


settings = load_settings()
