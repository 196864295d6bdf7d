"""Pydantic models for toolkit settings."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

if TYPE_CHECKING:
    from pathlib import Path

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(command)s] %(message)s"
DEFAULT_TRACER_NAME = "command_toolkit.dispatch"
_VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class Settings(BaseModel, frozen=True):
    """Runtime configuration loaded from environment variables."""

    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    log_outcomes: bool = True
    tracer_name: str = DEFAULT_TRACER_NAME

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _VALID_LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(_VALID_LOG_LEVELS)}, got {value!r}"
            raise ValueError(msg)
        return level

    @field_validator("tracer_name")
    @classmethod
    def _require_tracer_name(cls, value: str) -> str:
        if not value.strip():
            msg = "tracer_name must be non-empty"
            raise ValueError(msg)
        return value.strip()

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for ``log_level``."""
        return logging.getLevelName(self.log_level)


def _parse_bool(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    msg = f"{name} must be a boolean (true/false), got {raw!r}"
    raise ValueError(msg)


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Load settings from environment variables with defaults.

    Args:
        env_file: Optional dotenv file; defaults to the nearest `.env` found by python-dotenv.

    Raises:
        ValueError: If a variable holds an unusable value.
    """
    load_dotenv(env_file)

    return Settings(
        log_level=os.getenv("COMMAND_TOOLKIT_LOG_LEVEL", "INFO"),
        log_format=os.getenv("COMMAND_TOOLKIT_LOG_FORMAT") or DEFAULT_LOG_FORMAT,
        log_outcomes=_parse_bool("COMMAND_TOOLKIT_LOG_OUTCOMES", default=True),
        tracer_name=os.getenv("COMMAND_TOOLKIT_TRACER_NAME", DEFAULT_TRACER_NAME),
    )
