#!/usr/bin/env python3
"""Fence line recognition for the snippet parser."""

from __future__ import annotations

import re
from dataclasses import dataclass

_FENCE_OPEN = re.compile(r"^\s*(?P<fence>`{3,}|~{3,})\s*(?P<info>[^\s`]*)[^`]*$")
_FENCE_CLOSE = re.compile(r"^\s*(?P<fence>`{3,}|~{3,})\s*$")


@dataclass(frozen=True)
class Fence:
    """
    An opened fence.

    Attributes:
        char: The fence character, "`" or "~".
        length: Number of fence characters on the opening line.
        info: Language hint from the opening line, or None.
    """

    char: str
    length: int
    info: str | None


def match_fence_open(line: str) -> Fence | None:
    """Return the Fence opened by line, or None if line is not an opening fence."""
    match = _FENCE_OPEN.match(line)
    if match is None:
        return None
    fence = match.group("fence")
    return Fence(char=fence[0], length=len(fence), info=match.group("info") or None)


def is_fence_close(line: str, fence: Fence) -> bool:
    """
    Check whether line closes the given fence.

    A closing fence uses the same character, is at least as long as the
    opener, and carries nothing else.
    """
    match = _FENCE_CLOSE.match(line)
    if match is None:
        return False
    closing = match.group("fence")
    return closing[0] == fence.char and len(closing) >= fence.length
