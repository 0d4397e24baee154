#!/usr/bin/env python3
"""System clipboard access.

This module defines the ClipboardPort protocol consumed by the copy
command and the watch loop, and its pyperclip-backed implementation.
pyperclip selects a platform backend (pbcopy, xclip, xsel, wl-clipboard,
the Windows API) on first use and raises PyperclipException when none is
available; that is mapped to ClipboardUnavailable.
"""

from __future__ import annotations

import logging
from typing import Protocol

import pyperclip
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from snippy.errors import ClipboardUnavailable
from snippy.watch_constants import (
    STARTUP_ATTEMPTS,
    STARTUP_INITIAL_WAIT,
    STARTUP_MAX_WAIT,
    STARTUP_WAIT_MULTIPLIER,
)

logger = logging.getLogger(__name__)


class ClipboardPort(Protocol):
    """Read and write access to a text clipboard."""

    def read(self) -> str:
        """Return the clipboard text.

        Raises:
            ClipboardUnavailable: If the clipboard cannot be accessed.
        """
        ...

    def write(self, text: str) -> None:
        """Replace the clipboard text.

        Raises:
            ClipboardUnavailable: If the clipboard cannot be accessed.
        """
        ...


class PyperclipClipboard:
    """ClipboardPort backed by pyperclip."""

    def read(self) -> str:
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailable(f"Failed to read clipboard: {e}") from e
        # Some backends return None for an empty clipboard
        return text or ""

    def write(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailable(f"Failed to write clipboard: {e}") from e


def _log_probe_retry(retry_state) -> None:
    logger.warning(
        "Clipboard not available (attempt %d of %d), retrying",
        retry_state.attempt_number,
        STARTUP_ATTEMPTS,
    )


@retry(
    wait=wait_exponential(
        multiplier=STARTUP_WAIT_MULTIPLIER,
        min=STARTUP_INITIAL_WAIT,
        max=STARTUP_MAX_WAIT,
    ),
    retry=retry_if_exception_type(ClipboardUnavailable),
    stop=stop_after_attempt(STARTUP_ATTEMPTS),
    before_sleep=_log_probe_retry,
    reraise=True,
)
def probe_clipboard(clipboard: ClipboardPort) -> str:
    """Read the clipboard once, retrying briefly if it is unavailable.

    Used at startup to fail fast when no clipboard backend works.

    Args:
        clipboard: The clipboard to probe.

    Returns:
        The current clipboard text.

    Raises:
        ClipboardUnavailable: If every attempt fails.
    """
    return clipboard.read()


def open_clipboard(clipboard: ClipboardPort | None = None) -> ClipboardPort:
    """Return a clipboard that has been verified readable.

    Args:
        clipboard: Clipboard to verify; defaults to PyperclipClipboard().

    Raises:
        ClipboardUnavailable: If the clipboard cannot be read at startup.
    """
    if clipboard is None:
        clipboard = PyperclipClipboard()
    probe_clipboard(clipboard)
    logger.debug("Clipboard available via %s", type(clipboard).__name__)
    return clipboard
