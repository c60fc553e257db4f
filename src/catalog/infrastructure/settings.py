"""Runtime settings read from the environment.

Values may also come from a ``.env`` file in the working directory.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_DATABASE_URL = f"sqlite+aiosqlite:///{_DATA_DIR / 'catalog.db'}"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


class ConfigurationError(Exception):
    """Raised when a setting is present but cannot be parsed."""


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    sql_echo: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> Settings:
        if load_dotenv_file:
            load_dotenv()
        return cls(
            database_url=os.environ.get("CATALOG_DATABASE_URL") or DEFAULT_DATABASE_URL,
            sql_echo=_parse_bool("CATALOG_SQL_ECHO", os.environ.get("CATALOG_SQL_ECHO", "false")),
            log_level=_parse_log_level(os.environ.get("CATALOG_LOG_LEVEL", "WARNING")),
        )


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"CATALOG_LOG_LEVEL is not a logging level: {raw!r}")
    return level
