# SPDX-License-Identifier: Apache-2.0
"""
Content resolution: assemble a Page for one web path.

Steps, each tolerant of missing optional files:
1. section metadata from the parent directory's `.menu_meta` (or defaults)
2. page metadata from `.content_meta` (created on first read)
3. markdown body rendered to HTML, or a "does not exist" placeholder
4. raw HTML and raw JSON bodies, or None
5. pages named in `content_list`, resolved recursively, missing ones
   skipped, the rest ordered by weight

Every call does fresh filesystem I/O; nothing is cached between calls.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

from ..config import SiteConfig
from ..errors import ContentNotFoundError, CycleDetectedError, FilesystemError
from ..models.metadata import PageMetadata
from ..models.page import BodyContent, Page
from ..utils.fs import read_text, webpath_to_localpath, with_extension
from ..utils.text import markdown_to_html
from ..utils.time import created_timestamp, modified_timestamp, unix_to_datetime
from .metadata_store import get_or_create_page_metadata, read_parent_section_metadata

log = logging.getLogger("n4.services.content")

MARKDOWN_EXT = "md"
HTML_EXT = "html"
JSON_EXT = "json"
BODY_EXTENSIONS = (MARKDOWN_EXT, HTML_EXT, JSON_EXT)
INDEX_STEM = "index"


def _normalize(web_path: str) -> str:
    return "/" + (web_path or "").strip().strip("/")


def _content_key(web_path: str) -> str:
    # the site root is served by its index page
    key = _normalize(web_path)
    return f"/{INDEX_STEM}" if key == "/" else key


def _read_body(path: Path, render_markdown: bool = False) -> Optional[BodyContent]:
    if not path.is_file():
        return None
    try:
        st = os.stat(path)
    except OSError as e:
        raise FilesystemError(f"Couldn't get file metadata: {path}: {e}", path) from e
    text = read_text(path)
    return BodyContent(
        created=unix_to_datetime(created_timestamp(st)),
        modified=unix_to_datetime(modified_timestamp(st)),
        body=markdown_to_html(text) if render_markdown else text,
    )


class ContentResolver:
    """
    Resolves web paths against `config.local_path`.

    persist_metadata=False turns off the create-on-first-read write of
    `.content_meta` files (read-only dry runs).
    """

    def __init__(
        self,
        config: SiteConfig,
        *,
        persist_metadata: bool = True,
        max_depth: Optional[int] = None,
    ) -> None:
        self.config = config
        self.persist_metadata = persist_metadata
        self.max_depth = max_depth or config.max_content_depth
        self.content_root = Path(config.local_path)

    # ------------------------------ Paths ------------------------------

    def local_path(self, web_path: str) -> Path:
        return webpath_to_localpath(web_path, self.content_root)

    def content_path(self, web_path: str) -> Path:
        """Extension-less local path of a content item; "/" maps to the root index."""
        return self.local_path(_content_key(web_path))

    def content_exists(self, web_path: str) -> bool:
        """True if a .md, .html or .json file exists for the web path."""
        try:
            base = self.content_path(web_path)
        except ContentNotFoundError:
            return False
        return any(with_extension(base, ext).is_file() for ext in BODY_EXTENSIONS)

    def directory_exists(self, web_path: str) -> bool:
        try:
            return self.local_path(web_path).is_dir()
        except ContentNotFoundError:
            return False

    # ------------------------------ Bodies ------------------------------

    def markdown_body(self, full_path: Path) -> BodyContent:
        md_path = with_extension(full_path, MARKDOWN_EXT)
        body = _read_body(md_path, render_markdown=True)
        if body is None:
            return BodyContent(body=f"Markdown file does not exist: {md_path}")
        return body

    def html_body(self, full_path: Path) -> Optional[BodyContent]:
        return _read_body(with_extension(full_path, HTML_EXT))

    def json_body(self, full_path: Path) -> Optional[BodyContent]:
        return _read_body(with_extension(full_path, JSON_EXT))

    # ------------------------------ Pages ------------------------------

    def resolve_page(self, web_path: str) -> Page:
        """
        Assemble the page for `web_path` ("/blog/post1"). The site root "/"
        resolves to its index page ("/index").

        Raises ContentNotFoundError if the path escapes the content root and
        CycleDetectedError if content lists reference each other in a loop
        or nest deeper than `max_depth`.
        """
        return self._resolve(web_path, ())

    def _resolve(self, web_path: str, trail: Tuple[str, ...]) -> Page:
        key = _content_key(web_path)
        if key in trail:
            raise CycleDetectedError(
                f"Content list cycle: {' -> '.join(trail + (key,))}", trail=list(trail + (key,))
            )
        if len(trail) >= self.max_depth:
            raise CycleDetectedError(
                f"Content list nesting deeper than {self.max_depth} at {key}", trail=list(trail)
            )

        full_path = self.local_path(key)
        section_meta = read_parent_section_metadata(full_path)
        page_meta = get_or_create_page_metadata(
            full_path, self.content_root, persist=self.persist_metadata
        )
        page = Page(
            section_metadata=section_meta,
            page_metadata=page_meta,
            markdown_body=self.markdown_body(full_path),
            html_body=self.html_body(full_path),
            json_body=self.json_body(full_path),
        )

        # NOTE: list order in the metadata is not display order; weight is.
        if page_meta.content_list:
            page.embedded_pages = self.resolve_content_list(page_meta.content_list, trail + (key,))
        return page

    def resolve_content_list(
        self, content_list: List[str], trail: Tuple[str, ...] = ()
    ) -> List[Page]:
        pages: List[Page] = []
        for item in content_list:
            if not self.content_exists(item):
                log.warning("Content list entry does not exist, skipping: %s", item, extra={"trail": list(trail)})
                continue
            pages.append(self._resolve(item, trail))
        pages.sort(key=lambda p: p.page_metadata.weight)
        return pages

    # ------------------------------ Listings ------------------------------

    def read_directory_pages(self, web_dir: str) -> List[PageMetadata]:
        """
        Page metadata for each distinct content stem in a directory, sidecars
        and subdirectories excluded, ordered by weight.
        """
        directory = self.local_path(web_dir)
        try:
            with os.scandir(directory) as entries:
                names = sorted(entry.name for entry in entries if not entry.is_dir())
        except OSError as e:
            raise FilesystemError(f"Dir can't be read: {directory}: {e}", directory) from e

        seen: set[str] = set()
        metas: List[PageMetadata] = []
        for name in names:
            if name.endswith("meta"):
                continue
            stem = Path(name).stem
            if stem in seen:
                continue
            seen.add(stem)
            metas.append(
                get_or_create_page_metadata(directory / name, self.content_root, persist=self.persist_metadata)
            )
        metas.sort(key=lambda m: m.weight)
        return metas


def resolve_page(web_path: str, config: SiteConfig, *, persist_metadata: bool = True) -> Page:
    return ContentResolver(config, persist_metadata=persist_metadata).resolve_page(web_path)


def content_exists(web_path: str, config: SiteConfig) -> bool:
    return ContentResolver(config).content_exists(web_path)
