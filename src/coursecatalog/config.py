"""Configuration loading for the Course Catalog service."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

DEFAULT_DB_PATH = "coursecatalog.db"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]

# Environment variable -> AppConfig field
ENV_OVERRIDES = {
    "COURSECATALOG_DB_PATH": "db_path",
    "COURSECATALOG_HOST": "host",
    "COURSECATALOG_PORT": "port",
    "COURSECATALOG_LOG_DIR": "log_dir",
    "COURSECATALOG_LOG_LEVEL": "log_level",
}


class ConfigError(Exception):
    """Raised when configuration is invalid or unreadable."""


@dataclass
class AppConfig:
    """Service configuration.

    Values come from defaults, then an optional YAML file, then environment
    variables (highest precedence).
    """

    db_path: str = DEFAULT_DB_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_dir: str | None = None
    log_level: str | None = None
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AppConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If a field has the wrong type or is unknown.
        """
        known = {f for f in cls.__dataclass_fields__}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration fields: {', '.join(unknown)}")

        origins = data.get("cors_origins", DEFAULT_CORS_ORIGINS)
        if not isinstance(origins, list) or not all(isinstance(o, str) for o in origins):
            raise ConfigError("cors_origins must be a list of strings")

        return cls(
            db_path=str(data.get("db_path", DEFAULT_DB_PATH)),
            host=str(data.get("host", DEFAULT_HOST)),
            port=_parse_port(data.get("port", DEFAULT_PORT)),
            log_dir=data.get("log_dir"),
            log_level=data.get("log_level"),
            cors_origins=list(origins),
        )

    def with_env_overrides(self, environ: dict[str, str] | None = None) -> AppConfig:
        """Return a copy with COURSECATALOG_* environment variables applied."""
        env = os.environ if environ is None else environ
        changes: dict[str, Any] = {}
        for var, attr in ENV_OVERRIDES.items():
            if var in env:
                changes[attr] = _parse_port(env[var]) if attr == "port" else env[var]
        return replace(self, **changes)


def _parse_port(value: Any) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid port: {value!r}") from e
    if not 0 < port < 65536:
        raise ConfigError(f"Port out of range: {port}")
    return port


def load_config(path: Path | str | None = None) -> AppConfig:
    """Load configuration from a YAML file and the environment.

    Args:
        path: YAML file to read. When None only defaults and environment apply.

    Returns:
        The resolved configuration.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    if path is None:
        return AppConfig().with_env_overrides()

    config_path = Path(path)
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    return AppConfig.from_dict(data).with_env_overrides()
