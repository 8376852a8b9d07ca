"""Настройка логирования пакета"""

import logging
import os

LOG_LEVEL_ENV = "TESTALLUXIOIO_LOG_LEVEL"


def set_logger(log_name="alluxio_io", level=None):
    """Настройка логгера пакета; уровень берется из TESTALLUXIOIO_LOG_LEVEL"""
    logger = logging.getLogger(log_name)
    if logger.handlers:
        return logger

    stream_handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s")
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    level = level or os.getenv(LOG_LEVEL_ENV, "WARNING")
    logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))

    return logger
