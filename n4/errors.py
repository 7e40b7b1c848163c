# SPDX-License-Identifier: Apache-2.0
"""
Error taxonomy for the content tree.

- FilesystemError: a required path or its stat data could not be read.
- MetadataParseError: a sidecar exists but is not valid for its model.
  Always recovered by the metadata store (default substitution).
- ConfigurationError: the site configuration is missing or malformed.
- ContentNotFoundError: a content path has no body file (or escapes the root).
- CycleDetectedError: a traversal revisited a node on its own path.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class N4Error(Exception):
    """Base class for all content tree errors."""


class FilesystemError(N4Error, OSError):
    def __init__(self, message: str, path: Optional[Path | str] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class MetadataParseError(N4Error, ValueError):
    def __init__(self, message: str, path: Optional[Path | str] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class ConfigurationError(N4Error):
    pass


class ContentNotFoundError(N4Error, LookupError):
    def __init__(self, web_path: str, message: Optional[str] = None):
        super().__init__(message or f"Content does not exist: {web_path}")
        self.web_path = web_path


class CycleDetectedError(N4Error):
    def __init__(self, message: str, trail: Optional[list[str]] = None):
        super().__init__(message)
        self.trail = list(trail or [])
