"""
attendly/config.py

Runtime settings, read from the environment (and a local .env file if present).
Every setting is optional: without an API key the dashboard still runs and the
AI panels show the offline fallback text.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv


DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    openai_api_key: Optional[str]
    model: str = DEFAULT_MODEL
    log_level: str = DEFAULT_LOG_LEVEL
    data_dir: Path = Path("data")


def _log_level(name: str) -> str:
    """Known level name, upper-cased; anything else falls back to INFO."""
    level = name.strip().upper()
    # getLevelName maps a registered name to its number and anything else to a string
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Unknown ATTENDLY_LOG_LEVEL %r; using %s.", name, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        model=os.getenv("ATTENDLY_MODEL", DEFAULT_MODEL),
        log_level=_log_level(os.getenv("ATTENDLY_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        data_dir=Path(os.getenv("ATTENDLY_DATA_DIR", "data")),
    )
