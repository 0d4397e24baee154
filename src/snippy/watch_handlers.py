#!/usr/bin/env python3
"""Watch mode handler for new clipboard content.

handle_new_content runs the watch direction for one changed snapshot:
parse the text, apply the blocks, report each result to the operator.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from snippy.applier import Written, apply_blocks, describe_result
from snippy.parser import parse

if TYPE_CHECKING:
    from snippy.applier import ApplyResult
    from snippy.watch_session import WatchConfig, WatchSession

logger = logging.getLogger(__name__)


def is_own_copy(text: str, first_line: str | None) -> bool:
    """Check whether text is output of the copy command.

    Args:
        text: Clipboard text.
        first_line: Header line written by the copy command, or None.

    Returns:
        True if the first line of text is exactly the header line.
    """
    header = (first_line or "").rstrip("\n")
    if not header:
        return False
    return text.split("\n", 1)[0].rstrip("\r") == header


def report_results(session: WatchSession, results: list[ApplyResult]) -> None:
    """Log one line per result and record written files in the history."""
    for result in results:
        line = describe_result(result)
        if isinstance(result, Written):
            logger.info(line)
            if result.changed:
                session.record_write(result.path)
        else:
            logger.error(line)


async def handle_new_content(
    session: WatchSession, config: WatchConfig, text: str
) -> list[ApplyResult]:
    """Parse changed clipboard text and apply it to disk.

    The snapshot must already be updated by the caller so that the same
    text is never processed twice, even when this handler fails.

    Args:
        session: The watch session.
        config: The watch configuration.
        text: The new clipboard text.

    Returns:
        Apply results, empty when the text held no snippet blocks or was
        our own copy output.
    """
    if is_own_copy(text, config.first_line):
        logger.debug("Ignoring clipboard content produced by copy")
        return []

    blocks = parse(text, config.duplicate_policy)
    if not blocks:
        logger.debug("No snippet blocks in clipboard content")
        return []

    logger.info("Applying %d file(s) from clipboard", len(blocks))
    # Run to completion even if cancellation is requested meanwhile
    results = await asyncio.to_thread(
        apply_blocks,
        blocks,
        config.base_directory,
        trailing_newline=config.trailing_newline,
    )
    report_results(session, results)
    return results
