# SPDX-License-Identifier: Apache-2.0
"""
Filesystem utilities: extension swaps, sidecar naming, web path <-> local
path mapping with root guards, base-dir prefix stripping, and text
reads/atomic writes that surface OSError as FilesystemError.
"""

from __future__ import annotations

import os
import posixpath
import tempfile
from pathlib import Path

from ..errors import ConfigurationError, ContentNotFoundError, FilesystemError


# -------------------------- Names & extensions ---------------------------


def with_extension(path: Path | str, extension: str) -> Path:
    """
    Replace the final suffix of `path` with `extension` (or add one when the
    name has none). `extension` is given without the leading dot.
    """
    p = Path(path)
    return p.with_suffix(f".{extension}" if extension else "")


def directory_sidecar(directory: Path | str, extension: str) -> Path:
    # Directory names keep their dots: "v1.0" -> "v1.0.menu_meta"
    return Path(f"{str(directory).rstrip('/')}.{extension}")


def file_stem(path: Path | str) -> str:
    stem = Path(path).stem
    return stem or "ERROR_File_stem_not_parsed"


# ------------------------------- Path guards ------------------------------


def is_under(path: Path | str, root: Path | str) -> bool:
    """Lexical containment check; symlinks inside the root are allowed."""
    p = posixpath.normpath(str(path))
    r = posixpath.normpath(str(root))
    return p == r or p.startswith(r.rstrip("/") + "/")


def webpath_to_localpath(web_path: str, root: Path | str) -> Path:
    """
    Map a web path ("/blog/post1") under the content root.
    Raises ContentNotFoundError if the result would escape the root.
    """
    root_s = str(root).rstrip("/") or "/"
    rel = (web_path or "").strip().lstrip("/")
    local = posixpath.normpath(posixpath.join(root_s, rel)) if rel else posixpath.normpath(root_s)
    if not is_under(local, root_s):
        raise ContentNotFoundError(web_path, f"Path escapes the content root: {web_path}")
    return Path(local)


def localpath_to_webpath(local_path: Path | str, root: Path | str) -> str:
    """
    Inverse of webpath_to_localpath with the extension dropped:
    <root>/blog/post1.content_meta -> "/blog/post1".
    """
    p = Path(posixpath.normpath(str(local_path)))
    r = Path(posixpath.normpath(str(root)))
    try:
        rel = p.relative_to(r)
    except ValueError:
        raise ContentNotFoundError(str(local_path), f"Path is outside the content root: {local_path}")
    if not rel.parts:
        return "/"
    return "/" + rel.with_suffix("").as_posix()


def strip_base_prefix(relative_path: str, prefix: str) -> str:
    """
    Remove the content root name from a scanned relative path:
    ("site/docs", "site") -> "docs", ("site", "site") -> "".
    A trailing "/" on `relative_path` doesn't change the result.
    """
    rel = relative_path.strip("/")
    if not prefix:
        return rel
    if rel == prefix:
        return ""
    if rel.startswith(prefix + "/"):
        return rel[len(prefix) + 1:]
    raise ConfigurationError(f"Path {relative_path!r} is not under the base dir {prefix!r}")


# ------------------------------- Text I/O ---------------------------------


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FilesystemError(f"Couldn't read file: {path}: {e}", path) from e


def write_text_atomic(path: Path, text: str) -> None:
    """
    Write via a temp file in the same directory, then os.replace, so a
    concurrent reader never observes a half-written sidecar.
    """
    path = Path(path)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, path)
    except OSError as e:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise FilesystemError(f"Couldn't write file: {path}: {e}", path) from e
