"""Tests for the filesystem helpers in staticpages.fs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from staticpages.exceptions import ConfigurationError
from staticpages.fs import copy_directory, ensure_directories_and_write_file, remove_tree

if TYPE_CHECKING:
    from pathlib import Path


def test_remove_tree(tmp_path: Path) -> None:
    target = tmp_path / "out"
    (target / "a/b").mkdir(parents=True)
    (target / "a/b/c.html").write_text("c")

    remove_tree(target)

    assert not target.exists()
    assert tmp_path.is_dir()


def test_remove_tree_missing(tmp_path: Path) -> None:
    remove_tree(tmp_path / "missing")
    remove_tree(str(tmp_path / "missing"))


def test_remove_tree_file(tmp_path: Path) -> None:
    target = tmp_path / "out"
    target.write_text("file")

    with pytest.raises(ConfigurationError):
        remove_tree(target)

    assert target.is_file()


def test_remove_tree_symlink(tmp_path: Path) -> None:
    real = tmp_path / "real"
    real.mkdir()
    (real / "keep.txt").write_text("keep")
    link = tmp_path / "out"
    link.symlink_to(real, target_is_directory=True)

    with pytest.raises(ConfigurationError):
        remove_tree(link)

    assert (real / "keep.txt").read_text() == "keep"


def test_write_creates_parents(tmp_path: Path) -> None:
    file_path = tmp_path / "x/y/z/index.html"

    ensure_directories_and_write_file(file_path, "<p>ü</p>")

    assert file_path.read_text(encoding="utf-8") == "<p>ü</p>"


def test_write_truncates(tmp_path: Path) -> None:
    file_path = tmp_path / "index.html"
    file_path.write_text("a much longer previous content")

    ensure_directories_and_write_file(str(file_path), "short")

    assert file_path.read_text() == "short"


def test_write_under_a_file(tmp_path: Path) -> None:
    (tmp_path / "blocker").write_text("file")

    with pytest.raises(OSError):
        ensure_directories_and_write_file(tmp_path / "blocker/index.html", "x")


def test_copy_directory(tmp_path: Path) -> None:
    src = tmp_path / "assets"
    (src / "img").mkdir(parents=True)
    (src / "img/logo.svg").write_text("<svg/>")
    (src / "style.css").write_text("new")
    dst = tmp_path / "out"
    dst.mkdir()
    (dst / "style.css").write_text("old")
    (dst / "index.html").write_text("page")

    copy_directory(src, dst)

    assert (dst / "img/logo.svg").read_text() == "<svg/>"
    assert (dst / "style.css").read_text() == "new"
    assert (dst / "index.html").read_text() == "page"


def test_copy_directory_creates_destination(tmp_path: Path) -> None:
    src = tmp_path / "assets"
    src.mkdir()
    (src / "a.txt").write_text("a")

    copy_directory(src, tmp_path / "new/out")

    assert (tmp_path / "new/out/a.txt").read_text() == "a"


def test_copy_directory_missing_source(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="does not exist"):
        copy_directory(tmp_path / "missing", tmp_path / "out")

    assert not (tmp_path / "out").exists()
