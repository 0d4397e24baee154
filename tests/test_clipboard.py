#!/usr/bin/env python3
"""Tests for the pyperclip clipboard port and the startup probe."""
from unittest.mock import MagicMock, patch

import pyperclip
import pytest
from tenacity import wait_none

from conftest import BrokenClipboard, FakeClipboard
from snippy.clipboard import PyperclipClipboard, open_clipboard, probe_clipboard
from snippy.errors import ClipboardUnavailable


def test_read_returns_clipboard_text() -> None:
    """Test read delegates to pyperclip.paste."""
    with patch("snippy.clipboard.pyperclip.paste", return_value="hello"):
        assert PyperclipClipboard().read() == "hello"


def test_read_maps_none_to_empty_string() -> None:
    """Test backends returning None read as empty text."""
    with patch("snippy.clipboard.pyperclip.paste", return_value=None):
        assert PyperclipClipboard().read() == ""


def test_read_failure_raises_clipboard_unavailable() -> None:
    """Test PyperclipException becomes ClipboardUnavailable."""
    error = pyperclip.PyperclipException("no backend")
    with patch("snippy.clipboard.pyperclip.paste", side_effect=error):
        with pytest.raises(ClipboardUnavailable) as exc_info:
            PyperclipClipboard().read()
    assert "no backend" in str(exc_info.value)


def test_write_delegates_to_pyperclip_copy() -> None:
    """Test write calls pyperclip.copy with the text."""
    with patch("snippy.clipboard.pyperclip.copy") as mock_copy:
        PyperclipClipboard().write("text")
    mock_copy.assert_called_once_with("text")


def test_write_failure_raises_clipboard_unavailable() -> None:
    """Test write maps PyperclipException to ClipboardUnavailable."""
    error = pyperclip.PyperclipException("no backend")
    with patch("snippy.clipboard.pyperclip.copy", side_effect=error):
        with pytest.raises(ClipboardUnavailable):
            PyperclipClipboard().write("text")


def test_probe_retries_then_succeeds() -> None:
    """Test the startup probe retries transient failures."""
    clipboard = FakeClipboard([ClipboardUnavailable("busy"), "ready"])
    fast_probe = probe_clipboard.retry_with(wait=wait_none())
    assert fast_probe(clipboard) == "ready"
    assert clipboard.reads == 2


def test_probe_gives_up_after_bounded_attempts() -> None:
    """Test the startup probe re-raises after its attempts are used up."""
    clipboard = MagicMock()
    clipboard.read.side_effect = ClipboardUnavailable("gone")
    fast_probe = probe_clipboard.retry_with(wait=wait_none())
    with pytest.raises(ClipboardUnavailable):
        fast_probe(clipboard)
    assert clipboard.read.call_count == 3


def test_open_clipboard_returns_verified_clipboard() -> None:
    """Test open_clipboard returns the probed clipboard."""
    clipboard = FakeClipboard(["x"])
    assert open_clipboard(clipboard) is clipboard


def test_open_clipboard_fails_when_unavailable() -> None:
    """Test open_clipboard raises when the clipboard never works."""
    with patch("snippy.clipboard.probe_clipboard", side_effect=ClipboardUnavailable("x")):
        with pytest.raises(ClipboardUnavailable):
            open_clipboard(BrokenClipboard())
