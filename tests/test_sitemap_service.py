# tests/test_sitemap_service.py
from __future__ import annotations

import os
from datetime import datetime, timezone

import pytest

from conftest import write
from n4.config import SiteConfig
from n4.errors import ConfigurationError
from n4.services.content_service import content_exists
from n4.services.scanner import scan
from n4.services.sitemap_service import build_sitemap, generate_sitemap, sitemap_location
from n4.utils.fs import strip_base_prefix


def test_sitemap_locations_strip_base_dir(config, content_root):
    write(content_root / "blog" / "post1.md")
    write(content_root / "post1.md")
    records = generate_sitemap(config)
    assert [r.location for r in records] == [
        "https://host/blog/post1",
        "https://host/post1",
    ]


def test_no_doubled_delimiter_for_root_files(config, content_root):
    write(content_root / "about.md")
    (record,) = generate_sitemap(config)
    assert record.location == "https://host/about"
    assert "//about" not in record.location


def test_last_modified_drops_subseconds(config, content_root):
    path = write(content_root / "blog" / "post1.md")
    os.utime(path, (1_600_000_000.75, 1_600_000_000.75))
    (record,) = generate_sitemap(config)
    assert record.last_modified == datetime(2020, 9, 13, 12, 26, 40, tzinfo=timezone.utc)
    assert record.priority == "0.64"


def test_path_segments_are_escaped(config, content_root):
    write(content_root / "a&b" / "x.md")
    (record,) = generate_sitemap(config)
    assert record.location == "https://host/a&amp;b/x"


def test_one_record_per_stem(config, content_root):
    write(content_root / "post.md")
    write(content_root / "post.html")
    assert len(generate_sitemap(config)) == 1


def test_trailing_separator_is_equivalent():
    assert strip_base_prefix("content/blog/", "content") == "blog"
    assert strip_base_prefix("content/blog", "content") == "blog"
    assert strip_base_prefix("content/", "content") == ""
    assert strip_base_prefix("content", "content") == ""


def test_host_trailing_slash_is_not_doubled():
    assert sitemap_location("https://host/", "", "x") == "https://host/x"
    assert sitemap_location("https://host/", "blog", "x") == "https://host/blog/x"


def test_sitemap_requires_trailing_delimiter(tmp_path, content_root):
    write(content_root / "x.md")
    cfg = SiteConfig(base_dir="/content", local_content_dir=str(tmp_path))
    with pytest.raises(ConfigurationError):
        build_sitemap(scan(content_root), cfg)


def test_sitemap_is_sorted_by_location(config, content_root):
    for name in ("zeta", "alpha", "mid"):
        write(content_root / f"{name}.md")
    locations = [r.location for r in generate_sitemap(config)]
    assert locations == sorted(locations)


def test_root_base_dir_strips_content_root_name(tmp_path):
    write(tmp_path / "site" / "blog" / "post1.md")
    write(tmp_path / "site" / "about.md")
    cfg = SiteConfig(prod_host="https://host", base_dir="/", local_content_dir=str(tmp_path / "site"))
    locations = [r.location for r in generate_sitemap(cfg)]
    assert locations == ["https://host/about", "https://host/blog/post1"]
    for location in locations:
        assert content_exists(location[len("https://host"):], cfg)
