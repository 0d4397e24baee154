#!/usr/bin/env python3
"""Source file value type shared by the copy direction."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceFile:
    """
    A file path paired with its exact text content.

    Attributes:
        path: Path as it should appear in the heading line.
        content: Text content, rendered without re-encoding.
    """

    path: str
    content: str

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("SourceFile path must be non-empty")
