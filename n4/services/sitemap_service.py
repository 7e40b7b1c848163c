# SPDX-License-Identifier: Apache-2.0
"""
Flat sitemap derived from a scanned tree: one record per file stem.

Locations are "<prod_host>/<path under base_dir>/<stem>" with the path part
HTML/XML-escaped; files directly under base_dir become "<prod_host>/<stem>".
Output is sorted by location.
"""

from __future__ import annotations

import html
import logging
from typing import List

from ..config import SiteConfig
from ..models.navigation import SitemapRecord
from ..models.tree import DirectoryNode
from ..utils.fs import strip_base_prefix
from ..utils.time import unix_to_datetime
from .scanner import generate_content_state

log = logging.getLogger("n4.services.sitemap")


def sitemap_location(host: str, stripped_dir: str, stem: str) -> str:
    host = host.rstrip("/")
    name = html.escape(stem, quote=True)
    if stripped_dir:
        return f"{host}/{html.escape(stripped_dir, quote=True)}/{name}"
    return f"{host}/{name}"


def _collect(tree: DirectoryNode, prefix: str, config: SiteConfig, out: List[SitemapRecord]) -> None:
    stripped = strip_base_prefix(tree.relative_path, prefix)
    for stem, meta in tree.files.items():
        out.append(
            SitemapRecord(
                location=sitemap_location(config.prod_host, stripped, stem),
                last_modified=unix_to_datetime(meta.modified),
                priority=config.xml_priority,
            )
        )
    for sub in tree.subdirectories.values():
        _collect(sub, prefix, config, out)


def build_sitemap(tree: DirectoryNode, config: SiteConfig) -> List[SitemapRecord]:
    """
    Sitemap records for every file in `tree`. Locations are relative to the
    root node, so they are the web paths ContentResolver accepts.
    Raises ConfigurationError when base_dir has no trailing "/".
    """
    config.base_prefix()
    prefix = tree.relative_path.strip("/")
    records: List[SitemapRecord] = []
    _collect(tree, prefix, config, records)
    records.sort(key=lambda r: r.location)
    log.debug("Built sitemap", extra={"root": tree.relative_path, "records": len(records)})
    return records


def generate_sitemap(config: SiteConfig) -> List[SitemapRecord]:
    return build_sitemap(generate_content_state(config), config)
