#!/usr/bin/env python3
"""Parsed snippet block value type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SnippetBlock:
    """
    One (path, content) unit recovered from clipboard text.

    Attributes:
        declared_path: Destination path as written in the heading.
        language_hint: Info string of the opening fence, informational only.
        body: Lines between the fences, without a final trailing newline.
    """

    declared_path: str
    language_hint: str | None
    body: str
