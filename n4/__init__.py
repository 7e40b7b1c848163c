# SPDX-License-Identifier: Apache-2.0
"""
n4

Flat-file content model: scans a content directory into a tree, derives
menus and a sitemap from it, and resolves pages with their sidecar metadata.
Exposes nothing at import-time beyond package markers to keep startup fast.
"""
from __future__ import annotations

__version__ = "0.2.0"

__all__ = ["__version__"]
