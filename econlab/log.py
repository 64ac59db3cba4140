# MIT License
"""Logging configuration for the explorer.

Modules log through ``logging.getLogger(__name__)``; this helper attaches
one stream handler to the ``econlab`` package logger so the Streamlit app
and scripts share a format.
"""
from __future__ import annotations

import logging
from typing import Union

LOGGER_NAME = "econlab"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Configure the ``econlab`` logger; repeated calls only update the level."""
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
    if not any(getattr(h, "_econlab", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._econlab = True
        logger.addHandler(handler)
    return logger
