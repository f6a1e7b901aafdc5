"""Configuration loading and default settings."""

from .config import Config

__all__ = ["Config"]
