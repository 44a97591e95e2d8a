"""Structured logger setup shared across the callable functions."""

import logging
from pythonjsonlogger import jsonlogger

from config.settings import get_settings


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    Context such as event ids and correlation ids goes through ``extra=``
    so it lands as top-level JSON fields in CloudWatch.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(get_settings().log_level)
    logger.propagate = False
    return logger
