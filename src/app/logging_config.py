"""Настройка логирования для приложения."""
from __future__ import annotations

import logging
from logging import Logger

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVEL = logging.INFO
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def init_logging(level: int = LOG_LEVEL) -> None:
    """Инициализировать логирование для сервиса сниппетов и Uvicorn."""

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[logging.StreamHandler()])
    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(level)
    # Диагностика неоднозначных аргументов включается только явной настройкой логгера
    logging.getLogger("snippets.argument_scanner").setLevel(max(level, logging.INFO))


def get_logger(name: str) -> Logger:
    """Получить настроенный логгер по имени."""

    return logging.getLogger(name)
