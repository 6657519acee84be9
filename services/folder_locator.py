"""
services.folder_locator - Find a folder by name under the root.

Depth-first, pre-order, case-insensitive.  The first readable match in
directory-listing order wins; no sorting is applied while searching.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from services.errors import AccessDenied

logger = logging.getLogger(__name__)


class FolderLocator:

    def __init__(self, root: Path):
        self.root = Path(root)

    def locate(self, name: str) -> Optional[Path]:
        """
        Return the path of the first directory named `name` (any case),
        or None when there is none.

        Raises AccessDenied when the matching directory is not readable;
        the search stops there and siblings are not tried.  An OSError
        while listing the root itself propagates.
        """
        if not self.root.is_dir():
            logger.info(f"Search root does not exist: {self.root}")
            return None

        target = name.casefold()
        with os.scandir(self.root) as it:
            entries = list(it)
        return self._search(entries, target, name)

    def _search(self, entries, target: str, name: str) -> Optional[Path]:
        for entry in entries:
            try:
                if not entry.is_dir():
                    continue
                is_link = entry.is_symlink()
            except OSError as exc:
                logger.warning(f"Cannot stat {entry.path}: {exc}")
                continue

            path = Path(entry.path)
            if entry.name.casefold() == target:
                if not os.access(path, os.R_OK):
                    logger.warning(f"No read access to folder: {path}")
                    raise AccessDenied(name)
                return path

            # Matched by name above, but never descended into
            if is_link:
                continue

            found = self._search_dir(path, target, name)
            if found is not None:
                return found
        return None

    def _search_dir(self, path: Path, target: str, name: str) -> Optional[Path]:
        try:
            with os.scandir(path) as it:
                entries = list(it)
        except OSError as exc:
            logger.warning(f"Error searching in {path}: {exc}")
            return None
        return self._search(entries, target, name)
