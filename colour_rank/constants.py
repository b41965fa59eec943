# colour_rank/constants.py
"""
Defaults and fixed option sets shared by the engine and the CLI.
"""
from __future__ import annotations

from typing import Tuple

# =========================
# Scaling
# =========================
ALLOWED_SCALES: Tuple[str, ...] = ("1/1", "1/2", "1/4", "1/8", "1/12", "1/16", "1/32")
DEFAULT_SCALE = "1/4"

# =========================
# Engine
# =========================
DEFAULT_WORKERS = 20
DEFAULT_TOP_K = 10
DEFAULT_OFFSET = 0  # 0 or 1 -> exact colour keys

MERGE_STRATEGIES: Tuple[str, ...] = ("lock", "tree")
DEFAULT_MERGE = "lock"

# =========================
# Input
# =========================
IMAGE_EXTS: Tuple[str, ...] = (".png", ".jpg", ".jpeg", ".webp", ".gif", ".bmp")
