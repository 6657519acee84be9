"""
Folder Viewer - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.
"""

from __future__ import annotations
import os
from pathlib import Path


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR  = Path(__file__).resolve().parent
ROOT_DIR  = Path(os.environ.get("FOLDERVIEW_ROOT", "/Users/DangLong/apps/mfiles/list-f"))

# ── Server ─────────────────────────────────────────────────────────────
HOST   = os.environ.get("FOLDERVIEW_HOST", "0.0.0.0")
PORT   = int(os.environ.get("FOLDERVIEW_PORT", os.environ.get("PORT", "9100")))
DEBUG  = os.environ.get("FOLDERVIEW_DEBUG", "0") == "1"

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL  = os.environ.get("FOLDERVIEW_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# ── Limits ─────────────────────────────────────────────────────────────
MAX_SCAN_DEPTH         = 10
MAX_FOLDER_NAME_LENGTH = 50

# ── UI ─────────────────────────────────────────────────────────────────
PAGE_TITLE = "Quản lý thư mục"
