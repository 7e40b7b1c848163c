# SPDX-License-Identifier: Apache-2.0
"""
Sidecar metadata models.

Fields carry no defaults on purpose: a sidecar missing any key fails
validation and is replaced by the store with `default()`. Unknown keys
are ignored.
"""
from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field

_PAGE_DEFAULTS: Dict[str, Any] = {
    "title": "Default ContentMeta struct title",
    "path": "/",
    "content_icon": "/static/images/content_default_icon.svg",
    "description": "Default description value",
    "weight": 100,
    "author": "Default",
    "license": "cc-by-sa",
    "content_list": [],
    "content_type": "page",
    "content_class": "basic-page",
    "template_override": "",
    "javascript_include": [],
    "javascript_inline": "",
    "css_include": [],
    "css_inline": "",
    "created_time_default": "markdown",
    "modified_time_default": "markdown",
}

_SECTION_DEFAULTS: Dict[str, Any] = {
    "menu_icon": "/static/images/menu_default_icon.svg",
    "description": "Menu default description.",
    "weight": 100,
    "section_template": "article",
    "template_override": "",
    "content_type": "directory",
    "section_class": "section",
    "content_class": "directory-page",
    "section_javascript_include": [],
    "javascript_include": [],
    "javascript_inline": "",
    "section_css_include": [],
    "css_include": [],
    "css_inline": "",
}


class PageMetadata(BaseModel):
    """
    `<stem>.content_meta`: descriptor for one content item.
    """
    title: str
    path: str = Field(description="Web path of the content item")
    content_icon: str
    description: str
    weight: int = Field(ge=0, description="Sort key among siblings, lower first")
    author: str
    license: str
    content_list: List[str] = Field(description="Web paths of embedded pages")
    content_type: str
    content_class: str
    template_override: str
    javascript_include: List[str]
    javascript_inline: str
    css_include: List[str]
    css_inline: str
    created_time_default: str
    modified_time_default: str

    model_config = {"extra": "ignore"}

    @classmethod
    def default(cls, **overrides: Any) -> PageMetadata:
        values = {k: (list(v) if isinstance(v, list) else v) for k, v in _PAGE_DEFAULTS.items()}
        values.update(overrides)
        return cls(**values)

    @classmethod
    def parse_error_default(cls, error: Exception | str) -> PageMetadata:
        return cls.default(
            title="Error parsing metadata file",
            description=f"JSON Parse Error: {error}",
        )


class SectionMetadata(BaseModel):
    """
    `<dirname>.menu_meta`: descriptor for a directory. `section_*` values are
    inherited by the directory's content; the others apply to its index page.
    """
    menu_icon: str
    description: str
    weight: int = Field(ge=0)
    section_template: str
    template_override: str
    content_type: str
    section_class: str
    content_class: str
    section_javascript_include: List[str]
    javascript_include: List[str]
    javascript_inline: str
    section_css_include: List[str]
    css_include: List[str]
    css_inline: str

    model_config = {"extra": "ignore"}

    @classmethod
    def default(cls, **overrides: Any) -> SectionMetadata:
        values = {k: (list(v) if isinstance(v, list) else v) for k, v in _SECTION_DEFAULTS.items()}
        values.update(overrides)
        return cls(**values)

    @classmethod
    def parse_error_default(cls, error: Exception | str) -> SectionMetadata:
        return cls.default()
