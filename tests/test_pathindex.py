import os

import pytest

from histmenu.errors import FilesystemError
from histmenu.pathindex import PathIndexer


def make_file(directory, name: str, mode: int = 0o755):
    path = directory / name
    path.write_text("#!/bin/sh\n")
    path.chmod(mode)
    return path


def test_scan_collects_executables_only(tmp_path):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    make_file(bin_dir, "ls")
    make_file(bin_dir, "cat", 0o700)
    make_file(bin_dir, "group_only", 0o610)
    make_file(bin_dir, "README", 0o644)
    (bin_dir / "subdir").mkdir()

    names = PathIndexer([str(bin_dir)]).scan()
    assert names == {"ls", "cat", "group_only"}


def test_scan_collapses_duplicates_across_directories(tmp_path):
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.mkdir()
    b.mkdir()
    make_file(a, "vim")
    make_file(b, "vim")
    make_file(b, "git")

    names = PathIndexer([str(a), str(b)]).scan()
    assert names == {"vim", "git"}


def test_scan_skips_dangling_symlinks(tmp_path):
    make_file(tmp_path, "real")
    os.symlink(tmp_path / "missing", tmp_path / "dangling")
    os.symlink(tmp_path / "real", tmp_path / "alias")

    assert PathIndexer([str(tmp_path)]).scan() == {"real", "alias"}


def test_missing_directory_is_fatal(tmp_path):
    make_file(tmp_path, "ok")
    indexer = PathIndexer([str(tmp_path), str(tmp_path / "nope")])
    with pytest.raises(FilesystemError):
        indexer.scan()


def test_missing_directory_skipped_when_requested(tmp_path):
    make_file(tmp_path, "ok")
    indexer = PathIndexer([str(tmp_path / "nope"), str(tmp_path)], skip_unreadable=True)
    assert indexer.scan() == {"ok"}


def test_last_changed_is_latest_mtime_and_ignores_missing(tmp_path):
    old = tmp_path / "old"
    new = tmp_path / "new"
    old.mkdir()
    new.mkdir()
    os.utime(old, (1000, 1000))
    os.utime(new, (5000, 5000))

    indexer = PathIndexer([str(old), str(tmp_path / "missing"), str(new)])
    assert indexer.last_changed() == 5000


def test_last_changed_without_directories():
    assert PathIndexer([]).last_changed() == 0.0
