"""
services.file_gateway - Resolve a request path to a PDF under the root.

Checks run in order and each one fails closed: escape from the root,
existence, regular file, .pdf extension.
"""

from __future__ import annotations

import logging
from pathlib import Path

from services.errors import FileNotFound, NotAFile, WrongFileType, PathOutsideRoot

logger = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"


class FileGateway:

    def __init__(self, root: Path):
        self.root = Path(root).resolve()

    def resolve(self, relative_path: str) -> Path:
        """Return the absolute path of a servable PDF or raise."""
        try:
            target = (self.root / relative_path).resolve()
        except (ValueError, RuntimeError) as exc:
            # NUL byte in the path, or a symlink loop on older Pythons
            logger.warning(f"Cannot resolve {relative_path!r}: {exc}")
            raise FileNotFound(relative_path, cause=exc) from exc

        if target != self.root and self.root not in target.parents:
            logger.warning(f"Rejected path outside root: {relative_path!r}")
            raise PathOutsideRoot(relative_path)
        if not target.exists():
            raise FileNotFound(relative_path)
        if not target.is_file():
            raise NotAFile(relative_path)
        if target.suffix.lower() != PDF_SUFFIX:
            raise WrongFileType(relative_path)
        return target
