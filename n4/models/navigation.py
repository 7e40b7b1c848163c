# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from datetime import datetime
from typing import Dict

from pydantic import BaseModel, Field

from .metadata import SectionMetadata


class MenuNode(BaseModel):
    """
    Navigation entry for one directory. Files are counted, not listed.
    """
    section_metadata: SectionMetadata = Field(default_factory=SectionMetadata.default)
    file_count: int = Field(default=0, ge=0)
    relative_path: str = ""
    children: Dict[str, MenuNode] = Field(default_factory=dict)


class SitemapRecord(BaseModel):
    """
    One public URL for sitemap.xml consumers.
    """
    location: str
    last_modified: datetime
    priority: str = "0.64"
