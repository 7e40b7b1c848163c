# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

from n4.config import SiteConfig
from n4.models.metadata import PageMetadata


def write(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def write_page_meta(path: Path, **fields) -> Path:
    """Write a .content_meta sidecar next to `path` (extension swapped)."""
    meta = PageMetadata.default(**fields)
    return write(path.with_suffix(".content_meta"), meta.model_dump_json(indent=2))


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    # keep N4_* variables and a stray .env out of SiteConfig
    for var in ("N4_PROD_HOST", "N4_BASE_DIR", "N4_LOCAL_CONTENT_DIR", "N4_XML_PRIORITY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def content_root(tmp_path) -> Path:
    root = tmp_path / "content"
    root.mkdir()
    return root


@pytest.fixture
def config(tmp_path, content_root) -> SiteConfig:
    return SiteConfig(
        prod_host="https://host",
        xml_priority="0.64",
        base_dir="/content/",
        local_content_dir=str(tmp_path),
    )
