# src/task_reporter/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

One Settings object for the whole app, read once at import time. Malformed
values fall back to their defaults instead of failing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_REPORTER"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- Tasks ----
    append_delay_seconds: float
    seed_defaults: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-reporter").strip() or "task-reporter"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/task_reporter"))

        append_delay_seconds = max(0.0, _env_float(_k("APPEND_DELAY_SECONDS"), 1.0))
        seed_defaults = _env_bool(_k("SEED_DEFAULTS"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            append_delay_seconds=append_delay_seconds,
            seed_defaults=seed_defaults,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
