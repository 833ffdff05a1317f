#!/usr/bin/env python3
"""
Configuration for the user cards page: API endpoint, fetch timeout, logging.
"""
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# -----------------------------------------------------------------------------
# Load overrides from .env (one directory above this file)
# -----------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")
# Values already present in the environment win over the .env file.

# ---------- RandomUser endpoint -----------------------------------------------
RANDOMUSER_BASE_URL = os.environ.get("RANDOMUSER_BASE_URL", "https://randomuser.me/api")
RANDOMUSER_NAT = os.environ.get("RANDOMUSER_NAT", "GB")
RANDOMUSER_RESULTS = int(os.environ.get("RANDOMUSER_RESULTS", "10"))


def _optional_float(key: str) -> Optional[float]:
    value = os.environ.get(key, "").strip()
    if not value:
        return None
    return float(value)


RANDOMUSER_TIMEOUT = _optional_float("RANDOMUSER_TIMEOUT")
# Unset means requests waits forever, the same as a browser fetch() with no abort signal.

CARDS_LOG_LEVEL = os.environ.get("CARDS_LOG_LEVEL", "INFO").upper()

# ---------- Page contract -----------------------------------------------------
CONTENT_ID = "content"
EMAIL_INPUT_ID = "emailInput"
CONTAINER_CLASS = "container"
ITEM_CLASS = "item"
HIGHLIGHT_COLOR = "yellow"
DEFAULT_COLOR = "white"


def build_api_url(nat: str = RANDOMUSER_NAT, results: int = RANDOMUSER_RESULTS,
                  base_url: str = RANDOMUSER_BASE_URL) -> str:
    # -> https://randomuser.me/api?nat=GB&results=10
    return f"{base_url}?nat={nat}&results={results}"


API_URL = build_api_url()


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=level or CARDS_LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
