"""Settings loaded from environment variables (+ optional .env)."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .models import DEFAULT_FILE

ENV_PREFIX = "TASKLIST"
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_str(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return raw.strip()


def _env_path(name: str, default: Optional[str]) -> Optional[str]:
    raw = _env_str(name)
    if raw is None:
        return default
    return os.path.expanduser(raw)


def _env_log_level(name: str, default: str) -> str:
    raw = (_env_str(name) or default).upper()
    if not isinstance(logging.getLevelName(raw), int):
        return default
    return raw


@dataclass(frozen=True)
class Settings:
    tasks_file: str = DEFAULT_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)


def get_settings(*, dotenv: bool = True) -> Settings:
    """Read settings from the environment.

    With dotenv=True a .env file in the working directory is loaded first;
    variables already set in the environment win.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings(
        tasks_file=_env_path(_k("FILE"), DEFAULT_FILE),
        log_level=_env_log_level(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL),
        log_file=_env_path(_k("LOG_FILE"), None),
    )
