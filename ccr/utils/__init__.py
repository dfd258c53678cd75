"""Utility helpers shared across CCR modules."""

from .get_logger import get_logger
from .logger import configure_logging

__all__ = ["configure_logging", "get_logger"]
