"""Environment-driven settings for the moderation service."""
import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


LOG_LEVEL = os.getenv("MODERATION_LOG_LEVEL", "INFO").upper()
# Include the matched word in detection warnings
LOG_MATCHES = _env_flag("MODERATION_LOG_MATCHES", True)

# Longest text the HTTP service accepts; bounds the cost of a single check
MAX_TEXT_CHARS = _env_int("MODERATION_MAX_TEXT_CHARS", 5000)

HOST = os.getenv("MODERATION_HOST", "0.0.0.0")
PORT = _env_int("MODERATION_PORT", 8080)


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging once, for entry points only"""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
