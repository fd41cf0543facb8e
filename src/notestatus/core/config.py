"""Configuration management for note-status."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def get_env(key: str, default: str | None = None) -> str | None:
    """Get environment variable with optional default."""
    value = os.getenv(key)
    if value is None:
        if default is not None:
            logger.debug(f"{key} not set, falling back to default value")
        return default
    return value


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean."""
    value = os.getenv(key, "").lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    return default


# Vault root: notes given on the command line resolve against it
NOTESTATUS_VAULT = Path(get_env("NOTESTATUS_VAULT", os.getcwd()) or os.getcwd())

# Timestamp properties (started, waiting-since, completed) are ISO dates
DATE_FORMAT = "%Y-%m-%d"

# Logging
LOG_LEVEL = get_env("LOG_LEVEL", "INFO") or "INFO"
DEBUG = get_env_bool("NOTESTATUS_DEBUG", False)


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure and return logger."""
    level = logging.DEBUG if debug or DEBUG else None
    if level is None:
        level = getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )
    return logging.getLogger(__name__)
