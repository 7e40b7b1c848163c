# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from ..utils.time import epoch
from .metadata import PageMetadata, SectionMetadata


class BodyContent(BaseModel):
    """
    One body variant of a page (markdown rendered to HTML, raw HTML or raw JSON).
    """
    created: datetime = Field(default_factory=epoch)
    modified: datetime = Field(default_factory=epoch)
    body: str = "Default value"


class Page(BaseModel):
    """
    A fully resolved content page. `embedded_pages` come from the page's
    `content_list`, resolved recursively and ordered by weight.
    """
    markdown_body: BodyContent = Field(default_factory=BodyContent)
    html_body: Optional[BodyContent] = None
    json_body: Optional[BodyContent] = None
    embedded_pages: List[Page] = Field(default_factory=list)
    page_metadata: PageMetadata = Field(default_factory=PageMetadata.default)
    section_metadata: SectionMetadata = Field(default_factory=SectionMetadata.default)

    @computed_field
    @property
    def weight(self) -> int:
        return self.page_metadata.weight
