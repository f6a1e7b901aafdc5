"""Configuration management for aurrpc."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from aurrpc.config.settings import (
    DEFAULT_APP_NAME,
    DEFAULT_APP_VERSION,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_CONTACT,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_RPC_URL,
)
from aurrpc.platform.logging import logger, setup_logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Client configuration loaded from an explicit TOML file."""

    # RPC endpoint
    rpc_url: str = DEFAULT_RPC_URL

    # Transport timeouts in seconds
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT

    # User-Agent identity
    app_name: str = DEFAULT_APP_NAME
    app_version: str = DEFAULT_APP_VERSION
    contact: str = DEFAULT_CONTACT

    # Log file path
    log_file: Path | None = _path_field()

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Config":
        """Build a configuration from parsed TOML values.

        Args:
            data: Mapping of option names to values.

        Returns:
            Config: Validated configuration.

        Raises:
            ValueError: On unknown keys or values of the wrong type.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

        for key in ("rpc_url", "app_name", "app_version", "contact", "log_file"):
            if key in data and not isinstance(data[key], str):
                raise ValueError(f"Configuration value '{key}' must be a string")
        for key in ("connect_timeout", "read_timeout"):
            if key not in data:
                continue
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ValueError(f"Configuration value '{key}' must be a positive number")

        values = dict(data)
        for key in ("connect_timeout", "read_timeout"):
            if key in values:
                values[key] = float(values[key])
        return cls(**values)

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load configuration from a TOML file.

        Args:
            path: TOML file to read.

        Returns:
            Config: Loaded configuration object.
        """
        try:
            with open(path, "rb") as f:
                config_dict = tomllib.load(f)
            instance = cls.from_mapping(config_dict)
        except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
            logger.error("Failed to load configuration from %s: %s", path, e)
            raise

        logger.debug("Configuration loaded from %s", path)
        return instance

    def setup_logging(self, console_level: int = logging.INFO) -> logging.Logger:
        """Configure the library logger, writing to ``log_file`` when it is set.

        Args:
            console_level: Logging level for console output.

        Returns:
            logging.Logger: The configured ``aurrpc`` logger.
        """
        return setup_logger(log_file=self.log_file, console_level=console_level)

    def save(self, path: Path) -> None:
        """Save configuration to a TOML file, creating parent directories."""

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            _ = path.write_text(self._render_toml(config_dict), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", path)

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# aurrpc configuration file")
        lines.append("")

        lines.append("# RPC endpoint queried by every operation")
        lines.append(f"rpc_url = {self._format_toml_value(config['rpc_url'])}")
        lines.append("")

        lines.append("# Transport timeouts in seconds")
        lines.append(f"connect_timeout = {self._format_toml_value(config['connect_timeout'])}")
        lines.append(f"read_timeout = {self._format_toml_value(config['read_timeout'])}")
        lines.append("")

        lines.append("# User-Agent identity sent with each request")
        lines.append(f"app_name = {self._format_toml_value(config['app_name'])}")
        lines.append(f"app_version = {self._format_toml_value(config['app_version'])}")
        lines.append(f"contact = {self._format_toml_value(config['contact'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/aurrpc.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)


__all__ = ["Config"]
