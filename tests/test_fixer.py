import os

import pytest

from feedline.fixer import ensure_feedline, fix_file, fix_files
from feedline.result import FeedlineResult
from feedline.status import Status


def test_empty_file_is_skipped(tmp_path):
    f = tmp_path / "empty.txt"
    f.write_bytes(b"")
    assert fix_file(str(f)) == FeedlineResult(Status.SKIP, str(f), "file is empty")
    assert f.read_bytes() == b""


def test_missing_newline_is_added(tmp_path):
    f = tmp_path / "a.txt"
    f.write_bytes(b"hello")
    assert fix_file(str(f)) == FeedlineResult(Status.SUCCESS, str(f))
    assert f.read_bytes() == b"hello\n"


def test_existing_newline_is_left_alone(tmp_path):
    f = tmp_path / "a.txt"
    f.write_bytes(b"hello\n")
    result = fix_file(str(f))
    assert result.status is Status.SKIP
    assert result.message == "file already has a feedline"
    assert f.read_bytes() == b"hello\n"


def test_fix_is_idempotent(tmp_path):
    f = tmp_path / "a.txt"
    f.write_bytes(b"line")
    fix_file(str(f))
    fix_file(str(f))
    assert f.read_bytes() == b"line\n"


def test_missing_path_is_error(tmp_path):
    path = str(tmp_path / "nope.txt")
    assert fix_file(path) == FeedlineResult(Status.ERROR, path, "path does not exist")


def test_directory_is_warning(tmp_path):
    assert fix_file(str(tmp_path)) == FeedlineResult(
        Status.WARN, str(tmp_path), "path is a directory"
    )


def test_symlink_is_warning(tmp_path):
    target = tmp_path / "target.txt"
    target.write_bytes(b"data")
    link = tmp_path / "link.txt"
    os.symlink(target, link)
    result = fix_file(str(link))
    assert result == FeedlineResult(Status.WARN, str(link), "path is a symlink")
    assert target.read_bytes() == b"data"


def test_ensure_feedline_raises_for_missing(tmp_path):
    with pytest.raises(OSError):
        ensure_feedline(str(tmp_path / "missing"))


def test_fix_files_keeps_order(tmp_path):
    a = tmp_path / "a"
    a.write_bytes(b"x")
    missing = str(tmp_path / "b")
    results = fix_files([missing, str(a)])
    assert [r.file for r in results] == [missing, str(a)]
    assert [r.status for r in results] == [Status.ERROR, Status.SUCCESS]