"""Logging configuration helpers."""

import logging

_LOGGER_NAME = "nutrition_diary"


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the package logger.

    Repeat calls only adjust the level.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
