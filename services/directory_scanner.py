"""
services.directory_scanner - Build a DirectoryNode tree from disk.

Every entry is stat'ed once; the stat result is reused for sorting,
classification and the node itself.  Nodes deeper than max_depth are
omitted, and entries that fail to stat or list are logged and pruned.
"""

from __future__ import annotations

import logging
import os
import stat as stat_mod
import unicodedata
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import config
from services.directory_node import DirectoryNode, DIRECTORY, FILE

logger = logging.getLogger(__name__)


class DirectoryScanner:

    def __init__(self, max_depth: int = config.MAX_SCAN_DEPTH):
        self.max_depth = max_depth

    def scan(self, path, base_root=None) -> Optional[DirectoryNode]:
        """
        Scan `path` and return its tree, or None if it cannot be read.

        When `base_root` is given every node gets a POSIX relative_path
        computed against it.
        """
        path = Path(path)
        try:
            st = path.stat()
        except OSError as exc:
            logger.error(f"Error scanning {path}: {exc}")
            return None
        base = Path(base_root) if base_root is not None else None
        return self._build(path, st, base, depth=0)

    def _build(self, path: Path, st: os.stat_result,
               base: Optional[Path], depth: int) -> Optional[DirectoryNode]:
        if depth > self.max_depth:
            return None

        node = DirectoryNode(
            name=path.name,
            kind=DIRECTORY if stat_mod.S_ISDIR(st.st_mode) else FILE,
            absolute_path=path,
            relative_path=_relative(path, base),
        )

        if not node.is_dir:
            node.size_bytes = st.st_size
            node.modified_at = datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)
            return node

        try:
            entries = self._stat_entries(path)
        except OSError as exc:
            logger.error(f"Error scanning {path}: {exc}")
            return None

        node.children = []
        for child_path, child_st in entries:
            child = self._build(child_path, child_st, base, depth + 1)
            if child is not None:
                node.children.append(child)
        return node

    @staticmethod
    def _stat_entries(path: Path) -> list[tuple[Path, os.stat_result]]:
        """List `path`, stat each entry once, sort dirs first then by name_key."""
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                try:
                    entries.append((Path(entry.path), entry.stat()))
                except OSError as exc:
                    logger.error(f"Error scanning {entry.path}: {exc}")
        entries.sort(key=lambda e: (not stat_mod.S_ISDIR(e[1].st_mode), name_key(e[0].name)))
        return entries


def _relative(path: Path, base: Optional[Path]) -> Optional[str]:
    if base is None:
        return None
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.name


def name_key(name: str) -> tuple[str, str, str]:
    """Locale-style ordering: letters compare alphabetically ignoring
    accents, then accents, then lowercase before uppercase."""
    folded = name.casefold()
    base = "".join(c for c in unicodedata.normalize("NFKD", folded)
                   if not unicodedata.combining(c))
    return base, folded, name.swapcase()
