"""Configuration for the product catalog.

Settings come from the environment so the same install can point at
different data directories (tests, demos, real use).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

# When installed in editable mode the project root is the repo root.
ROOT = Path(__file__).resolve().parents[2]

DATA_DIR_ENV = "CATALOG_DATA_DIR"
LOG_LEVEL_ENV = "CATALOG_LOG_LEVEL"
STORAGE_ENV = "CATALOG_STORAGE"

JSON_STORAGE = "json"
MEMORY_STORAGE = "memory"

PRODUCTS_FILE = "products.json"


def get_data_dir() -> Path:
    """Directory holding the catalog's data files.

    Uses ``CATALOG_DATA_DIR`` when set, otherwise ``<project root>/data``.
    """
    if value := os.environ.get(DATA_DIR_ENV):
        return Path(value).expanduser()
    return ROOT / "data"


def get_log_level() -> int:
    """Console log level from ``CATALOG_LOG_LEVEL`` (default WARNING).

    Unknown level names fall back to WARNING.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_storage() -> str:
    """Storage backend from ``CATALOG_STORAGE``: ``json`` (default) or ``memory``.

    The memory backend keeps nothing between runs. Unknown values fall
    back to ``json``.
    """
    name = os.environ.get(STORAGE_ENV, JSON_STORAGE).strip().lower()
    return MEMORY_STORAGE if name == MEMORY_STORAGE else JSON_STORAGE
