# SPDX-License-Identifier: Apache-2.0
"""
Navigation menus derived from a scanned tree: one MenuNode per directory,
carrying its `.menu_meta` (or defaults) and an immediate file count.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from ..config import SiteConfig
from ..models.navigation import MenuNode
from ..models.tree import DirectoryNode
from ..utils.fs import strip_base_prefix
from .metadata_store import read_section_metadata
from .scanner import generate_content_state

log = logging.getLogger("n4.services.menu")


def _menu_level(tree: DirectoryNode, prefix: str) -> Dict[str, MenuNode]:
    menus: Dict[str, MenuNode] = {}
    for name in sorted(tree.subdirectories):
        sub = tree.subdirectories[name]
        menus[name] = MenuNode(
            section_metadata=read_section_metadata(sub.absolute_path),
            file_count=len(sub.files),
            relative_path=strip_base_prefix(sub.relative_path, prefix),
            children=_menu_level(sub, prefix) if sub.subdirectories else {},
        )
    return menus


def build_menus(tree: DirectoryNode, config: SiteConfig) -> Dict[str, MenuNode]:
    """
    Menus for every subdirectory of `tree`, keyed by directory name.
    Relative paths are exposed with the root's own name stripped.
    Raises ConfigurationError when base_dir has no trailing "/".
    """
    config.base_prefix()
    prefix = tree.relative_path.strip("/")
    menus = _menu_level(tree, prefix)
    log.debug("Built menus", extra={"root": tree.relative_path, "entries": len(menus)})
    return menus


def generate_menus(config: SiteConfig) -> Dict[str, MenuNode]:
    return build_menus(generate_content_state(config), config)


def menu_items_by_weight(menus: Dict[str, MenuNode]) -> List[Tuple[str, MenuNode]]:
    """Sibling entries ordered for display: weight, then name."""
    return sorted(menus.items(), key=lambda kv: (kv[1].section_metadata.weight, kv[0]))
