"""
Logger — настройка логирования клиентского слоя данных

Все модули используют logging.getLogger(__name__); этот модуль только
подключает handler к корневому логгеру пакета.
"""

import logging
import sys
from pathlib import Path
from typing import Final, Optional

# Корневой логгер пакета: модули логируют через getLogger(__name__)
ROOT_LOGGER_NAME: Final[str] = "src"

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Настройка и возврат логгера.

    Повторный вызов не добавляет handler'ы повторно.

    Args:
        name: Имя логгера
        level: Уровень логирования
        log_file: Путь к файлу лога (None = только stderr)

    Returns:
        Настроенный логгер
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    log.setLevel(level)
    fmt = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(fmt)
    log.addHandler(handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(fmt)
        log.addHandler(file_handler)

    return log


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Логгер приложения (после вызова setup_logger)."""
    return logging.getLogger(name)
