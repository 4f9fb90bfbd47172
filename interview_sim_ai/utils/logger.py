"""Logging configuration for the InterviewSim CV analysis core."""

import logging
import sys
from typing import Optional, Union

from interview_sim_ai.config import LOG_LEVEL


def _resolve_level(level: Union[int, str, None]) -> int:
    if isinstance(level, int):
        return level
    name = (level or LOG_LEVEL or "INFO").strip().upper()
    return getattr(logging, name, logging.INFO)


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Get a configured logger instance (stdout handler, LOG_LEVEL by default)."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(level))
    elif level is not None:
        logger.setLevel(_resolve_level(level))
    return logger
