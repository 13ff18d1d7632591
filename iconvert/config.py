"""Configuration sourced from environment variables."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from iconvert.units.registry import UnitConversionError, get_category

ENV_LOG_LEVEL = "ICONVERT_LOG_LEVEL"
ENV_DEFAULT_CATEGORY = "ICONVERT_DEFAULT_CATEGORY"
ENV_PRECISION = "ICONVERT_PRECISION"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_CATEGORY = "Distance"
DEFAULT_PRECISION = 6
MAX_PRECISION = 15


@dataclass(frozen=True)
class Settings:
    """Runtime configuration."""

    log_level: str = DEFAULT_LOG_LEVEL
    default_category: str = DEFAULT_CATEGORY
    precision: int = DEFAULT_PRECISION  # significant digits in readable output


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{ENV_LOG_LEVEL}: unknown log level {raw!r}")
    return level


def _parse_precision(raw: str) -> int:
    try:
        precision = int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PRECISION}: expected an integer, got {raw!r}") from None
    if not 0 <= precision <= MAX_PRECISION:
        raise ValueError(f"{ENV_PRECISION}: must be between 0 and {MAX_PRECISION}")
    return precision


def _parse_category(raw: str) -> str:
    try:
        return get_category(raw.strip()).name
    except UnitConversionError as e:
        raise ValueError(f"{ENV_DEFAULT_CATEGORY}: {e}") from None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from ``environ`` (defaults to ``os.environ``).

    Raises:
        ValueError: naming the variable whose value is invalid
    """
    env = os.environ if environ is None else environ
    return Settings(
        log_level=_parse_log_level(env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)),
        default_category=_parse_category(env.get(ENV_DEFAULT_CATEGORY, DEFAULT_CATEGORY)),
        precision=_parse_precision(env.get(ENV_PRECISION, str(DEFAULT_PRECISION))),
    )
