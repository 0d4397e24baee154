#!/usr/bin/env python3
"""
Clipboard change detection.

Comparison is exact text equality with no normalization: copies that
differ only in trailing whitespace still count as new content. Clipboard
payloads are small, so no hashing is involved.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClipboardSnapshot:
    """
    Clipboard text as seen on one poll.

    Attributes:
        text: The clipboard text.
        observed_at_sequence: Poll sequence number when the text was seen.
    """

    text: str
    observed_at_sequence: int


def has_changed(previous: ClipboardSnapshot | None, current: str) -> bool:
    """
    Check whether current clipboard text differs from the last snapshot.

    Args:
        previous: The stored snapshot, or None before the first poll.
        current: Text just read from the clipboard.

    Returns:
        True if there is no snapshot or the text differs.
    """
    if previous is None:
        return True
    return current != previous.text
