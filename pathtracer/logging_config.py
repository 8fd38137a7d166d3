"""Настройка логирования для path tracer."""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    name: str = "pathtracer",
    level: str = "INFO",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Настройка логирования.

    Повторный вызов только меняет уровень, обработчики добавляются один раз.

    Параметры:
        name: имя логгера
        level: уровень (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: путь к файлу лога с ротацией (необязательно)

    Возвращает настроенный логгер.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    formatter = logging.Formatter(LOG_FORMAT)

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    console_handlers = [h for h in logger.handlers
                        if isinstance(h, logging.StreamHandler) and h not in file_handlers]

    # Вывод в консоль
    if not console_handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # Файл с ротацией
    if log_file is not None and not any(
        h.baseFilename == os.path.abspath(log_file) for h in file_handlers
    ):
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10485760,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for handler in logger.handlers:
        handler.setLevel(log_level)

    return logger
