"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and the custom Rich handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, logger, setup_logger
from .handlers import EventRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "EventRichHandler",
    "logger",
    "setup_logger",
]
