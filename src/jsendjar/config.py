"""Runtime settings read from the environment (and an optional ``.env`` file)."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

import dotenv

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIR = "log"
DEFAULT_ROWS_KEY = "rows"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    # empty string disables the per-logger file handlers
    log_dir: str = DEFAULT_LOG_DIR
    # bucket that untyped collection rows are concatenated into
    rows_key: str = DEFAULT_ROWS_KEY


def load_settings(env_file: str | None = ".env") -> Settings:
    """Build a fresh ``Settings`` from the process environment.

    Values already present in the environment win over the ``.env`` file.
    """
    if env_file:
        dotenv.load_dotenv(env_file, override=False)
    rows_key = os.getenv("JSENDJAR_ROWS_KEY", DEFAULT_ROWS_KEY).strip() or DEFAULT_ROWS_KEY
    return Settings(
        log_level=os.getenv("JSENDJAR_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
        log_dir=os.getenv("JSENDJAR_LOG_DIR", DEFAULT_LOG_DIR).strip(),
        rows_key=rows_key,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
