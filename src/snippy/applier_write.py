#!/usr/bin/env python3
"""Atomic file replacement.

Content is written to a temporary file in the destination directory and
moved over the destination with os.replace. Either the full content is
persisted at the destination or the original file is left untouched.
"""

from __future__ import annotations

import os
import uuid
from contextlib import suppress
from pathlib import Path


def _create_temp_file(path: Path) -> tuple[int, str]:
    """Create an exclusive temporary file next to path.

    The file is created with mode 0o666 so the kernel applies the process
    umask, giving new files the usual default permissions.
    """
    tmp_name = str(path.parent / f".{path.name}.{uuid.uuid4().hex}.snippy")
    fd = os.open(tmp_name, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
    return fd, tmp_name


def write_atomic(path: Path, content: str) -> None:
    """Replace path with content atomically.

    Intermediate directories are created as needed. The temporary file is
    removed on every failure path. An existing file keeps its permission
    bits.

    Args:
        path: Destination file path.
        content: Text to persist, written as UTF-8 without newline
            translation.

    Raises:
        OSError: If directory creation, writing or the final rename fails.
        UnicodeEncodeError: If content cannot be encoded as UTF-8.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = _create_temp_file(path)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        if path.exists():
            os.chmod(tmp_name, path.stat().st_mode & 0o7777)
        os.replace(tmp_name, path)
    except BaseException:
        with suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise


def read_existing(path: Path) -> str | None:
    """Return the current text of path, or None if it is absent or unreadable."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, ValueError):
        return None
