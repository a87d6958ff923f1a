"""Make sure files end with a newline."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from feedline.result import FeedlineResult
from feedline.status import Status


def ensure_feedline(path: str) -> FeedlineResult:
    """Append a newline to ``path`` if it is non-empty and lacks one.

    Raises OSError when the file cannot be opened, read or written.
    """
    with open(path, "r+b") as handle:
        if os.fstat(handle.fileno()).st_size == 0:
            return FeedlineResult(Status.SKIP, path, "file is empty")
        handle.seek(-1, os.SEEK_END)
        if handle.read(1) != b"\n":
            handle.write(b"\n")
            return FeedlineResult(Status.SUCCESS, path)
    return FeedlineResult(Status.SKIP, path, "file already has a feedline")


def fix_file(path: str) -> FeedlineResult:
    """Check ``path`` and ensure it ends with a newline, reporting the outcome."""
    target = Path(path)
    if not target.exists():
        return FeedlineResult(Status.ERROR, path, "path does not exist")
    if target.is_dir():
        return FeedlineResult(Status.WARN, path, "path is a directory")
    if target.is_symlink():
        return FeedlineResult(Status.WARN, path, "path is a symlink")
    if not target.is_file():
        return FeedlineResult(Status.ERROR, path, "path is not a file")
    try:
        return ensure_feedline(path)
    except OSError:
        return FeedlineResult(Status.ERROR, path, "failed checking feedline")


def fix_files(paths: Iterable[str]) -> list[FeedlineResult]:
    """Process every path in order."""
    return [fix_file(path) for path in paths]