"""
Configuration - Environment settings shared by the CLI and the API.

    FLIP7_DATA_DIR        directory holding the saved game
    FLIP7_STORE_KEY       name of the save slot
    FLIP7_WIN_THRESHOLD   points needed to win
    FLIP7_LOG_LEVEL       logging level name
    ALLOWED_ORIGINS       comma-separated CORS origins for the API
"""

import logging
import os

from .engine_core.constants import WIN_THRESHOLD
from .storage import DEFAULT_KEY, JsonFileStore

# Environment configuration
FLIP7_DATA_DIR = os.getenv("FLIP7_DATA_DIR", None)
FLIP7_STORE_KEY = os.getenv("FLIP7_STORE_KEY", DEFAULT_KEY)
FLIP7_WIN_THRESHOLD = int(os.getenv("FLIP7_WIN_THRESHOLD", WIN_THRESHOLD))
FLIP7_LOG_LEVEL = os.getenv("FLIP7_LOG_LEVEL", "INFO")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")


def default_store(data_dir=None) -> JsonFileStore:
    """File store at the configured location."""
    return JsonFileStore(data_dir or FLIP7_DATA_DIR, key=FLIP7_STORE_KEY)


def configure_logging(level: str | None = None):
    """Configure root logging once for the CLI or the server."""
    logging.basicConfig(
        level=(level or FLIP7_LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
