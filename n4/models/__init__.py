# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

# Re-export commonly used models for convenience
from .tree import DirectoryNode, FsEntryMeta
from .metadata import PageMetadata, SectionMetadata
from .navigation import MenuNode, SitemapRecord
from .page import BodyContent, Page

__all__ = [
    "DirectoryNode",
    "FsEntryMeta",
    "PageMetadata",
    "SectionMetadata",
    "MenuNode",
    "SitemapRecord",
    "BodyContent",
    "Page",
]
