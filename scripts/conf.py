"""Catalog store - Central path configuration."""

import os
from pathlib import Path

USER_HOME = Path.home()
CATALOG_HOME = Path(os.environ.get("CATALOG_HOME") or USER_HOME / ".catalog")

# <storage-root>/<record-type>.json, one JSON array per collection
STORAGE_ROOT = Path(os.environ.get("CATALOG_STORAGE_ROOT") or CATALOG_HOME / "json")

# Shared collection of per-type descriptors: <storage-root>/type.json
TYPE_COLLECTION = "type"

LOG_FILE = CATALOG_HOME / "store.log"
