from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

LOG_LEVEL_ENV = "COMPOUNDCASE_LOG_LEVEL"
LEGACY_LOG_LEVEL_ENV = "LOG_LEVEL"
LOG_COLORS_ENV = "COMPOUNDCASE_LOG_COLORS"

TRACE = 5

_LEVELS = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_colors: bool = True

    @property
    def level(self) -> int:
        return _LEVELS.get(self.log_level.upper(), logging.INFO)


def _is_enabled(raw: str | None, default: bool = True) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "off", "no"}


def load_settings() -> Settings:
    """
    Read settings from the environment, after merging any ``.env`` file.
    ``COMPOUNDCASE_LOG_LEVEL`` wins over the generic ``LOG_LEVEL``.
    """
    load_dotenv()
    raw_level = os.getenv(LOG_LEVEL_ENV) or os.getenv(LEGACY_LOG_LEVEL_ENV) or "INFO"
    return Settings(
        log_level=raw_level.strip().upper(),
        log_colors=_is_enabled(os.getenv(LOG_COLORS_ENV)),
    )


__all__ = ["Settings", "load_settings", "TRACE"]
