#!/usr/bin/env python3
"""
Recover (path, content) snippet blocks from clipboard text.

The parser is a small state machine over lines:

    SEEKING_HEADING -> SEEKING_FENCE_OPEN -> IN_FENCE_BODY -> SEEKING_HEADING

A heading pairs with the first fenced block after it and before the next
heading. Headings without a block, unterminated fences and fences with
no declared path are skipped rather than reported, since LLM output is
routinely inconsistent. Parsing never raises.
"""

from __future__ import annotations

import enum
import logging
from typing import cast

from snippy.parser_fence import Fence, is_fence_close, match_fence_open
from snippy.parser_heading import match_filename_comment, normalize_heading
from snippy.snippet_block import SnippetBlock

logger = logging.getLogger(__name__)


class ParserState(enum.Enum):
    """Parser states."""

    SEEKING_HEADING = "seeking_heading"
    SEEKING_FENCE_OPEN = "seeking_fence_open"
    IN_FENCE_BODY = "in_fence_body"


class DuplicatePolicy(enum.Enum):
    """Which block wins when several declare the same path."""

    LAST_WINS = "last"
    FIRST_WINS = "first"


class _BlockCollector:
    """Collect blocks keyed by path, preserving first-seen path order."""

    def __init__(self, policy: DuplicatePolicy) -> None:
        self.policy = policy
        self.blocks: dict[str, SnippetBlock] = {}

    def add(self, block: SnippetBlock) -> None:
        path = block.declared_path
        if path in self.blocks:
            if self.policy is DuplicatePolicy.FIRST_WINS:
                logger.debug("Ignoring later block for %s", path)
                return
            logger.debug("Replacing earlier block for %s", path)
        # Reassigning an existing key keeps its original position
        self.blocks[path] = block

    def result(self) -> list[SnippetBlock]:
        return list(self.blocks.values())


def _close_block(
    declared_path: str | None, fence: Fence, body: list[str]
) -> SnippetBlock | None:
    """
    Turn a completed fence into a block, or None if it has no path.

    A "filename:" comment on the first body line names the file even when a
    heading precedes the fence, and is not part of the written content.
    """
    commented = match_filename_comment(body[0].rstrip("\r")) if body else None
    if commented is not None:
        if declared_path is not None and declared_path != commented:
            logger.debug("Filename comment %s overrides heading %s", commented, declared_path)
        declared_path = commented
        body = body[1:]
    elif declared_path is None:
        logger.debug("Skipping fenced block without a declared path")
        return None
    text = "\n".join(body)
    if text.endswith("\r"):
        text = text[:-1]
    return SnippetBlock(
        declared_path=declared_path,
        language_hint=fence.info,
        body=text,
    )


def parse(
    text: str, duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS
) -> list[SnippetBlock]:
    """
    Parse clipboard text into snippet blocks.

    Args:
        text: Arbitrary clipboard text.
        duplicate_policy: Resolution for repeated paths. With the default
            LAST_WINS, a later block replaces the body of an earlier one
            but the path keeps its first-seen position.

    Returns:
        Snippet blocks in first-seen path order; empty if nothing matched.
    """
    collector = _BlockCollector(duplicate_policy)
    state = ParserState.SEEKING_HEADING
    pending_path: str | None = None
    fence: Fence | None = None
    body: list[str] = []

    for line in text.split("\n"):
        if state is ParserState.IN_FENCE_BODY:
            open_fence = cast("Fence", fence)
            if is_fence_close(line, open_fence):
                block = _close_block(pending_path, open_fence, body)
                if block is not None:
                    collector.add(block)
                pending_path = None
                fence = None
                state = ParserState.SEEKING_HEADING
            else:
                body.append(line)
            continue

        opened = match_fence_open(line)
        if opened is not None:
            fence = opened
            body = []
            state = ParserState.IN_FENCE_BODY
            continue

        # Between a heading and its fence only marked or quoted lines
        # may replace the pending path; bare lines there are prose.
        heading = normalize_heading(
            line, allow_bare=state is ParserState.SEEKING_HEADING
        )
        if heading is not None:
            if pending_path is not None:
                logger.debug("Skipping heading %s with no fenced block", pending_path)
            pending_path = heading
            state = ParserState.SEEKING_FENCE_OPEN

    if state is ParserState.IN_FENCE_BODY:
        logger.debug("Skipping unterminated fenced block")
    elif state is ParserState.SEEKING_FENCE_OPEN:
        logger.debug("Skipping heading %s with no fenced block", pending_path)

    return collector.result()
