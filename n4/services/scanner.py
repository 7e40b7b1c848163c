# SPDX-License-Identifier: Apache-2.0
"""
Filesystem scanner: turns a directory hierarchy into a DirectoryNode tree.

- Files are keyed by stem; the extension is discarded, so `index.md` and
  `index.json` collapse into one entry (last enumerated wins).
- Enumeration order is whatever os.scandir yields; nothing is sorted.
- Symlink loops and excessive depth raise CycleDetectedError.
- `workers` > 1 scans the root's subdirectories on a thread pool.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import FrozenSet

from ..config import SiteConfig
from ..errors import CycleDetectedError, FilesystemError
from ..models.tree import DirectoryNode, FsEntryMeta
from ..utils.fs import file_stem
from ..utils.time import created_timestamp, modified_timestamp

log = logging.getLogger("n4.services.scanner")

DEFAULT_MAX_DEPTH = 64


# ------------------------------ Stat helpers ------------------------------


def entry_meta(path: Path | str) -> FsEntryMeta:
    try:
        st = os.stat(path)
    except OSError as e:
        raise FilesystemError(f"Couldn't get file metadata: {path}: {e}", path) from e
    return FsEntryMeta(
        created=created_timestamp(st),
        modified=modified_timestamp(st),
        size=st.st_size,
    )


def _relative_path(prefix: str, name: str) -> str:
    rel = f"{prefix}/{name}"
    return rel[1:] if rel.startswith("/") else rel


def _root_name(path: str) -> str:
    return Path(path).name or path.strip("/") or "/"


# ------------------------------ Scan ------------------------------


def _scan_dir(
    path: str,
    relative_prefix: str,
    ancestors: FrozenSet[str],
    depth: int,
    max_depth: int,
    workers: int = 0,
) -> DirectoryNode:
    if depth > max_depth:
        raise CycleDetectedError(
            f"Maximum scan depth {max_depth} exceeded at {path}", trail=sorted(ancestors)
        )
    real = os.path.realpath(path)
    if real in ancestors:
        raise CycleDetectedError(f"Directory loop detected at {path} -> {real}", trail=sorted(ancestors))
    ancestors = ancestors | {real}

    node = DirectoryNode(
        absolute_path=path,
        relative_path=_relative_path(relative_prefix, _root_name(path)),
        meta=entry_meta(path),
    )

    pending_dirs: list[tuple[str, str]] = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    is_dir = entry.is_dir()
                except OSError as e:
                    raise FilesystemError(f"Couldn't inspect entry: {entry.path}: {e}", entry.path) from e
                if is_dir:
                    pending_dirs.append((entry.name, entry.path))
                else:
                    node.files[file_stem(entry.name)] = entry_meta(entry.path)
    except FileNotFoundError as e:
        raise FilesystemError(f"Directory not found: {path}", path) from e
    except NotADirectoryError as e:
        raise FilesystemError(f"Not a directory: {path}", path) from e
    except PermissionError as e:
        raise FilesystemError(f"Directory can't be read: {path}: {e}", path) from e
    except FilesystemError:
        raise
    except OSError as e:
        raise FilesystemError(f"Directory can't be read: {path}: {e}", path) from e

    if workers > 1 and len(pending_dirs) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [
                (name, pool.submit(_scan_dir, sub_path, node.relative_path, ancestors, depth + 1, max_depth))
                for name, sub_path in pending_dirs
            ]
            for name, fut in futures:
                node.subdirectories[name] = fut.result()
    else:
        for name, sub_path in pending_dirs:
            node.subdirectories[name] = _scan_dir(sub_path, node.relative_path, ancestors, depth + 1, max_depth)
    return node


def scan(
    root_path: Path | str,
    relative_prefix: str = "",
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    workers: int = 0,
) -> DirectoryNode:
    """
    Recursively scan `root_path`. The root's relative path is
    "<relative_prefix>/<root name>" without a leading "/".
    """
    root = str(root_path)
    log.debug("Scanning content tree", extra={"root": root, "workers": workers})
    tree = _scan_dir(root, relative_prefix, frozenset(), 1, max_depth, workers=workers)
    log.debug("Scan finished", extra={"root": root, "files": len(tree.files_in_tree())})
    return tree


def generate_content_state(config: SiteConfig, workers: int = 0) -> DirectoryNode:
    """Scan the configured content root (local_content_dir + base_dir)."""
    return scan(config.local_path, "", max_depth=config.max_scan_depth, workers=workers)
