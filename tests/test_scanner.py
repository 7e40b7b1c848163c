# tests/test_scanner.py
from __future__ import annotations

import errno
import os

import pytest

from conftest import write
from n4.errors import CycleDetectedError, FilesystemError
from n4.services.scanner import generate_content_state, scan


def _build_tree(root):
    write(root / "a.md", "# A")
    write(root / "b.html", "<p>b</p>")
    write(root / "blog" / "post1.md", "post")
    write(root / "blog" / "deep" / "x.json", "{}")


def test_scan_mirrors_directory_hierarchy(content_root):
    _build_tree(content_root)
    tree = scan(content_root)

    assert tree.relative_path == "content"
    assert tree.absolute_path == str(content_root)
    assert set(tree.files) == {"a", "b"}
    assert set(tree.subdirectories) == {"blog"}

    blog = tree.subdirectories["blog"]
    assert blog.relative_path == "content/blog"
    assert set(blog.files) == {"post1"}
    assert set(blog.subdirectories) == {"deep"}

    deep = blog.subdirectories["deep"]
    assert deep.relative_path == "content/blog/deep"
    assert set(deep.files) == {"x"}
    assert deep.subdirectories == {}
    assert tree.depth() == 3


def test_files_in_tree_lists_every_stem(content_root):
    _build_tree(content_root)
    tree = scan(content_root)
    assert sorted(tree.files_in_tree()) == [
        "content/a",
        "content/b",
        "content/blog/deep/x",
        "content/blog/post1",
    ]


def test_stems_collide_into_one_entry(content_root):
    write(content_root / "index.md", "# md")
    write(content_root / "index.json", '{"a": 1}')
    tree = scan(content_root)
    assert list(tree.files) == ["index"]


def test_entry_meta_captures_size_and_times(content_root):
    path = write(content_root / "hello.md", "hello")
    os.utime(path, (1_600_000_000.5, 1_600_000_000.5))
    meta = scan(content_root).files["hello"]
    assert meta.size == 5
    assert meta.modified == pytest.approx(1_600_000_000.5)
    assert meta.created > 0


def test_relative_prefix_is_prepended(content_root):
    write(content_root / "sub" / "f.md")
    tree = scan(content_root, "site")
    assert tree.relative_path == "site/content"
    assert tree.subdirectories["sub"].relative_path == "site/content/sub"


def test_trailing_slash_root_keeps_its_name(content_root):
    tree = scan(str(content_root) + "/")
    assert tree.relative_path == "content"


def test_missing_root_raises_filesystem_error(tmp_path):
    with pytest.raises(FilesystemError):
        scan(tmp_path / "nope")


def test_unreadable_root_io_error_is_typed(content_root, monkeypatch):
    def fail(path):
        raise OSError(errno.EIO, "Input/output error", path)

    monkeypatch.setattr("n4.services.scanner.os.scandir", fail)
    with pytest.raises(FilesystemError) as exc:
        scan(content_root)
    assert exc.value.path == str(content_root)
    assert isinstance(exc.value.__cause__, OSError)


def test_symlink_loop_is_detected(content_root):
    (content_root / "sub").mkdir()
    os.symlink(content_root, content_root / "sub" / "loop")
    with pytest.raises(CycleDetectedError):
        scan(content_root)


def test_depth_guard(content_root):
    write(content_root / "a" / "b" / "c" / "f.md")
    with pytest.raises(CycleDetectedError):
        scan(content_root, max_depth=2)
    assert scan(content_root, max_depth=4).depth() == 4


def test_parallel_scan_matches_serial(content_root):
    _build_tree(content_root)
    write(content_root / "docs" / "guide.md")
    write(content_root / "news" / "today.md")
    serial = scan(content_root)
    parallel = scan(content_root, workers=4)
    assert parallel.model_dump() == serial.model_dump()


def test_generate_content_state_scans_configured_root(config, content_root):
    write(content_root / "blog" / "post1.md")
    tree = generate_content_state(config)
    assert tree.relative_path == "content"
    assert "post1" in tree.subdirectories["blog"].files
