# fpcore/logging_config.py
# Настройка логирования пакета fpcore. Сама библиотека пишет только DEBUG;
# повторный вызов configure_logging меняет уровень, но не добавляет второй handler.

from __future__ import annotations

import logging
from typing import Optional, Union

from .config import get_settings

LOGGER_NAME = "fpcore"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_TAG = "_fpcore_logging_handler"


def _tagged_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _HANDLER_TAG, False)]


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        return get_settings().log_level_number
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(level: Union[int, str, None] = None) -> logging.Logger:
    """Один StreamHandler на логгер fpcore и уровень из аргумента или настроек"""
    logger = logging.getLogger(LOGGER_NAME)
    numeric_level = _resolve_level(level)

    handlers = _tagged_handlers(logger)
    if not handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(handler, _HANDLER_TAG, True)
        logger.addHandler(handler)
        handlers = [handler]

    for handler in handlers:
        handler.setLevel(numeric_level)
    logger.setLevel(numeric_level)
    return logger


def reset_logging() -> None:
    """Снимает handler, установленный configure_logging"""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in _tagged_handlers(logger):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def current_handler() -> Optional[logging.Handler]:
    handlers = _tagged_handlers(logging.getLogger(LOGGER_NAME))
    return handlers[0] if handlers else None


__all__ = ["configure_logging", "reset_logging", "current_handler", "LOGGER_NAME"]
