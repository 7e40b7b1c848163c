# SPDX-License-Identifier: Apache-2.0
"""
Sidecar metadata store.

Content pages use `<stem>.content_meta`, directories `<dirname>.menu_meta`.
Reads never fail on bad JSON: the sidecar is logged and replaced in memory
by the model's default. Page metadata is additionally created on first read
(get_or_create_page_metadata) unless persistence is switched off.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Type, TypeVar, Union

from pydantic import ValidationError

from ..errors import FilesystemError, MetadataParseError
from ..models.metadata import PageMetadata, SectionMetadata
from ..utils.fs import (
    directory_sidecar,
    file_stem,
    localpath_to_webpath,
    read_text,
    with_extension,
    write_text_atomic,
)

log = logging.getLogger("n4.services.metadata")

CONTENT_META_EXT = "content_meta"
MENU_META_EXT = "menu_meta"

M = TypeVar("M", PageMetadata, SectionMetadata)


# ------------------------------ Parsing ------------------------------


def load_sidecar(sidecar: Path, model: Type[M]) -> M:
    """
    Read and validate one sidecar. Raises MetadataParseError on invalid JSON
    or a field mismatch, FilesystemError when the file can't be read.
    """
    text = read_text(sidecar)
    try:
        return model.model_validate_json(text)
    except ValidationError as e:
        raise MetadataParseError(str(e), sidecar) from e


def read_or_default(sidecar: Path, model: Type[M]) -> M:
    """
    Parsed sidecar, or the model default when the file is absent or corrupt.
    """
    if not sidecar.is_file():
        return model.default()
    try:
        return load_sidecar(sidecar, model)
    except MetadataParseError as e:
        log.warning("Bad metadata JSON, using defaults: %s", e, extra={"path": str(sidecar)})
        return model.parse_error_default(e)


# ------------------------------ Page metadata ------------------------------


def save_page_metadata(sidecar: Path, metadata: PageMetadata) -> None:
    write_text_atomic(sidecar, metadata.model_dump_json(indent=2))


def synthesize_page_metadata(content_path: Path, content_root: Union[Path, str]) -> PageMetadata:
    """Default metadata for a content item: title from the stem, path from the location."""
    return PageMetadata.default(
        title=file_stem(content_path),
        path=localpath_to_webpath(content_path, content_root),
    )


def get_or_create_page_metadata(
    content_path: Path | str,
    content_root: Union[Path, str],
    *,
    persist: bool = True,
) -> PageMetadata:
    """
    Page metadata for the content item at `content_path` (extension ignored).

    Side effect: when no `.content_meta` exists and `persist` is true, the
    synthesized default is written next to the content so later reads are
    stable. A failed write is logged and the default is still returned.
    """
    sidecar = with_extension(content_path, CONTENT_META_EXT)
    if sidecar.exists():
        return read_or_default(sidecar, PageMetadata)

    meta = synthesize_page_metadata(sidecar, content_root)
    if persist:
        try:
            save_page_metadata(sidecar, meta)
            log.info("Created default content metadata", extra={"path": str(sidecar)})
        except FilesystemError as e:
            log.warning("Default metadata couldn't be saved: %s", e, extra={"path": str(sidecar)})
    return meta


# ------------------------------ Section metadata ------------------------------


def read_section_metadata(directory: Path | str) -> SectionMetadata:
    """
    `.menu_meta` for a directory, or the default. Never written back.
    """
    return read_or_default(directory_sidecar(directory, MENU_META_EXT), SectionMetadata)


def read_parent_section_metadata(content_path: Path | str) -> SectionMetadata:
    """Section metadata of the directory that holds `content_path`."""
    return read_section_metadata(Path(content_path).parent)
