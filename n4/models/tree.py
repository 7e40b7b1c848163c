# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class FsEntryMeta(BaseModel):
    """
    Stat data captured once per scan (seconds since the Unix epoch).
    """
    created: float = 0.0
    modified: float = 0.0
    size: int = Field(default=0, ge=0)

    model_config = {"frozen": True}


class DirectoryNode(BaseModel):
    """
    One scanned directory. Files are keyed by stem, so `index.md` and
    `index.json` in the same directory collapse to a single `index` entry.
    """
    absolute_path: str = ""
    relative_path: str = ""
    meta: FsEntryMeta = Field(default_factory=FsEntryMeta)
    files: Dict[str, FsEntryMeta] = Field(default_factory=dict)
    subdirectories: Dict[str, DirectoryNode] = Field(default_factory=dict)

    def files_in_tree(self) -> List[str]:
        """Every file in the tree as "<relative_path>/<stem>"."""
        out = [f"{self.relative_path}/{name}" for name in self.files]
        for child in self.subdirectories.values():
            out.extend(child.files_in_tree())
        return out

    def depth(self) -> int:
        if not self.subdirectories:
            return 1
        return 1 + max(child.depth() for child in self.subdirectories.values())
