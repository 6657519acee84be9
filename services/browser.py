"""
services.browser - Validate, locate and scan a folder in one call.

Shared by the HTML page and the JSON API so both apply the same rules.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from services.directory_node import DirectoryNode
from services.directory_scanner import DirectoryScanner
from services.errors import (
    FolderNotFound, FolderViewError, InvalidFolderName, PathNotFound, from_os_error,
)
from services.folder_locator import FolderLocator
from services.folder_name import is_valid_folder_name

logger = logging.getLogger(__name__)


@dataclass
class BrowseResult:
    node: DirectoryNode
    path: Path
    relative_path: str

    @property
    def is_empty(self) -> bool:
        return self.node.child_count == 0


class FolderBrowser:

    def __init__(self, root: Path, scanner: Optional[DirectoryScanner] = None):
        self.root = Path(root)
        self.locator = FolderLocator(self.root)
        self.scanner = scanner or DirectoryScanner()

    def browse(self, folder_name: str) -> BrowseResult:
        """
        Find `folder_name` under the root and scan it.

        Raises InvalidFolderName, FolderNotFound, AccessDenied, or the
        OSError-derived error for failures at the top level.
        """
        if not is_valid_folder_name(folder_name):
            raise InvalidFolderName(folder_name)

        try:
            path = self.locator.locate(folder_name)
        except FolderViewError:
            raise
        except OSError as exc:
            logger.error(f"Error searching for folder {folder_name!r}: {exc}")
            raise from_os_error(exc, folder_name) from exc

        if path is None:
            raise FolderNotFound(folder_name)

        node = self.scanner.scan(path, base_root=self.root)
        if node is None:
            raise PathNotFound(folder_name)

        logger.info(f"Scanned {path}: {node.child_count} entries")
        return BrowseResult(node=node, path=path,
                            relative_path=path.relative_to(self.root).as_posix())
