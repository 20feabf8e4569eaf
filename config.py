"""
config.py
---------
Centralised configuration management for the auto-create-table tool.

Loads settings from environment variables (with .env file support via
python-dotenv). Provides typed settings as frozen dataclasses so the
configuration is immutable at runtime.

Only process-level knobs live here. Job-level settings (endpoints, table
names, credentials) come from the job configuration tree, see
``models/configuration.py``.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(dotenv_path=_env_path)


@dataclass(frozen=True)
class DatabaseConfig:
    """Connection defaults applied when the JDBC URL does not set them."""
    charset: str = field(default_factory=lambda: os.getenv("DB_CHARSET", "utf8mb4"))
    connect_timeout: int = field(
        default_factory=lambda: int(os.getenv("DB_CONNECT_TIMEOUT", "10"))
    )
    default_port: int = field(
        default_factory=lambda: int(os.getenv("DB_DEFAULT_PORT", "3306"))
    )


@dataclass(frozen=True)
class AppConfig:
    """Root application configuration."""
    db: DatabaseConfig = field(default_factory=DatabaseConfig)
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper()
    )
    log_file: str | None = field(
        default_factory=lambda: os.getenv("LOG_FILE")  # None → log to stderr only
    )
    app_name: str = "MySQL Auto Create Table"
    app_version: str = "1.0.0"


def load_config() -> AppConfig:
    """
    Build and return the application configuration.

    Example::

        cfg = load_config()
        print(cfg.db.connect_timeout)  # 10
    """
    return AppConfig()


# Module-level singleton used throughout the application
CONFIG: AppConfig = load_config()


def get_log_level() -> int:
    """Convert string log level from config to logging module constant."""
    level = getattr(logging, CONFIG.log_level, None)
    if not isinstance(level, int):
        return logging.INFO
    return level
