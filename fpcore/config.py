# fpcore/config.py
# Environment driven settings. Read once, cached, immutable.

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

LOG_LEVEL_ENV = "FPCORE_LOG_LEVEL"
SHOW_LIMIT_ENV = "FPCORE_SHOW_LIMIT"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SHOW_LIMIT = 200

_KNOWN_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class Settings:
    """
    Настройки библиотеки.
    log_level  - имя уровня для logger'а "fpcore"
    show_limit - максимальная длина строки, которую возвращает show()
    """

    log_level: str = DEFAULT_LOG_LEVEL
    show_limit: int = DEFAULT_SHOW_LIMIT

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def _parse_level(raw: Optional[str]) -> str:
    if not raw:
        return DEFAULT_LOG_LEVEL
    name = raw.strip().upper()
    return name if name in _KNOWN_LEVELS else DEFAULT_LOG_LEVEL


def _parse_limit(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_SHOW_LIMIT
    try:
        limit = int(raw.strip())
    except ValueError:
        return DEFAULT_SHOW_LIMIT
    return limit if limit > 0 else DEFAULT_SHOW_LIMIT


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Собирает Settings из переменных окружения (или переданного словаря)"""
    env = os.environ if environ is None else environ
    return Settings(
        log_level=_parse_level(env.get(LOG_LEVEL_ENV)),
        show_limit=_parse_limit(env.get(SHOW_LIMIT_ENV)),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Кэшированные настройки процесса, сброс через get_settings.cache_clear()"""
    return load_settings()
