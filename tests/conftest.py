#!/usr/bin/env python3
"""Pytest fixtures for snippy tests.

Provides a scripted in-memory clipboard, watch configuration rooted in a
temporary directory, and a fresh watch session.
"""

from collections.abc import Iterable
from pathlib import Path

import pytest

from snippy.errors import ClipboardUnavailable
from snippy.watch_session import WatchConfig, WatchSession


class FakeClipboard:
    """In-memory ClipboardPort.

    read() returns the scripted texts in order and then keeps returning
    the last one. A scripted exception instance is raised instead of
    returned.
    """

    def __init__(self, texts: Iterable[object] = ("",)) -> None:
        self.script = list(texts)
        self.reads = 0
        self.written: list[str] = []

    def read(self) -> str:
        index = min(self.reads, len(self.script) - 1)
        self.reads += 1
        item = self.script[index]
        if isinstance(item, Exception):
            raise item
        return item

    def write(self, text: str) -> None:
        self.written.append(text)
        self.script = [text]


class BrokenClipboard:
    """ClipboardPort whose every access fails."""

    def read(self) -> str:
        raise ClipboardUnavailable("no clipboard backend")

    def write(self, text: str) -> None:
        raise ClipboardUnavailable("no clipboard backend")


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    """Create an empty FakeClipboard."""
    return FakeClipboard()


@pytest.fixture
def watch_config(tmp_path: Path) -> WatchConfig:
    """Create a fast-polling WatchConfig writing into tmp_path."""
    return WatchConfig(base_directory=tmp_path, interval=0.01)


@pytest.fixture
def watch_session() -> WatchSession:
    """Create a fresh WatchSession."""
    return WatchSession()
