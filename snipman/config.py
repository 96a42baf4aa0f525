"""
snipman configuration.
Settings are read from the environment (and an optional .env file).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_TRUTHY = ("1", "true", "yes", "on")


def get_settings() -> "Settings":
    """Return settings freshly read from the environment."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    SNIPMAN_DATA_DIR: Path
    SNIPMAN_FILENAME: str = "items.txt"

    # Show a progress bar while loading the snippets file
    SNIPMAN_PROGRESS: bool = False

    def __init__(self):
        self.SNIPMAN_DATA_DIR = Path((os.environ.get("SNIPMAN_DATA_DIR") or "data").strip())
        self.SNIPMAN_FILENAME = (os.environ.get("SNIPMAN_FILENAME") or "items.txt").strip()
        self.SNIPMAN_PROGRESS = (os.environ.get("SNIPMAN_PROGRESS") or "").strip().lower() in _TRUTHY
