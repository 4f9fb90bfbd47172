"""Utility exports."""

from .helpers import contains_any, starts_with_bullet, strip_bullet, unique_sorted
from .logger import get_logger

__all__ = [
    "get_logger",
    "contains_any",
    "starts_with_bullet",
    "strip_bullet",
    "unique_sorted",
]
