"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the library logger, setup helper, and custom Rich handler.
Why: Provide a single canonical import path for logging concerns.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import RpcRichHandler

__all__ = [
    "LOGGER_NAME",
    "RpcRichHandler",
    "logger",
    "setup_logger",
]
