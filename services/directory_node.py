"""
services.directory_node - In-memory directory tree.

A node is either a directory (children + child_count) or a file
(size_bytes + modified_at), never both.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

DIRECTORY = "directory"
FILE = "file"


@dataclass
class DirectoryNode:
    name: str
    kind: str
    absolute_path: Path
    relative_path: Optional[str] = None
    children: Optional[list[DirectoryNode]] = None
    size_bytes: Optional[int] = None
    modified_at: Optional[datetime] = None

    @property
    def is_dir(self) -> bool:
        return self.kind == DIRECTORY

    @property
    def child_count(self) -> int:
        return len(self.children or [])

    @property
    def is_pdf(self) -> bool:
        return self.kind == FILE and self.name.lower().endswith(".pdf")

    def to_dict(self) -> dict:
        """JSON shape.  The absolute path is only emitted when no
        relative path is tracked."""
        d = {
            "name": self.name,
            "type": self.kind,
            "path": self.relative_path if self.relative_path is not None
                    else str(self.absolute_path),
        }
        if self.is_dir:
            d["children"] = [c.to_dict() for c in self.children]
            d["size"] = self.child_count
        else:
            d["size"] = self.size_bytes
            d["modified"] = (self.modified_at.isoformat()
                             if self.modified_at else None)
        return d
