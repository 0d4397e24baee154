#!/usr/bin/env python3
"""Clipboard polling loop.

The loop runs on a single asyncio task:

    IDLE -> POLLING -> (UNCHANGED | CHANGED) -> POLLING ... -> CANCELLED

Cancellation is cooperative: the cancellation event is only checked
while waiting between ticks, so a tick that is applying files always
finishes before the loop exits.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from snippy.change_detector import has_changed
from snippy.errors import ClipboardUnavailable
from snippy.watch_handlers import handle_new_content
from snippy.watch_session import WatchState

if TYPE_CHECKING:
    from snippy.clipboard import ClipboardPort
    from snippy.watch_session import WatchConfig, WatchSession

logger = logging.getLogger(__name__)


async def read_clipboard(
    session: WatchSession, clipboard: ClipboardPort, config: WatchConfig
) -> str | None:
    """Read the clipboard for one tick.

    A failed read is logged and yields None; the next tick acts as the
    retry. After config.max_read_failures consecutive failures the error
    is re-raised.

    Raises:
        ClipboardUnavailable: When the consecutive failure limit is hit.
    """
    try:
        text = await asyncio.to_thread(clipboard.read)
    except ClipboardUnavailable as e:
        session.consecutive_failures += 1
        logger.error("Clipboard read failed: %s", e)
        limit = config.max_read_failures
        if limit is not None and session.consecutive_failures >= limit:
            raise
        return None
    session.consecutive_failures = 0
    return text


async def watch_tick(
    session: WatchSession, clipboard: ClipboardPort, config: WatchConfig
) -> WatchState:
    """Poll the clipboard once and apply new content.

    Args:
        session: The watch session.
        clipboard: Clipboard to poll.
        config: The watch configuration.

    Returns:
        WatchState.CHANGED if new content was seen, UNCHANGED otherwise.
    """
    session.state = WatchState.POLLING
    session.sequence += 1
    text = await read_clipboard(session, clipboard, config)
    if text is None or not has_changed(session.snapshot, text):
        session.state = WatchState.UNCHANGED
        return session.state

    session.state = WatchState.CHANGED
    session.observe(text)
    logger.debug("New clipboard content (%d chars)", len(text))
    try:
        await handle_new_content(session, config, text)
    except Exception:
        logger.exception("Failed to process clipboard content")
    return session.state


async def wait_for_next_tick(session: WatchSession, interval: float) -> bool:
    """Wait one interval or until cancellation.

    Returns:
        True if cancellation was requested.
    """
    try:
        await asyncio.wait_for(session.cancelled.wait(), timeout=interval)
    except asyncio.TimeoutError:
        return False
    return True


async def run_watch_loop(
    session: WatchSession, clipboard: ClipboardPort, config: WatchConfig
) -> None:
    """Poll the clipboard until cancelled.

    Args:
        session: The watch session; its cancelled event stops the loop.
        clipboard: Clipboard to poll.
        config: The watch configuration.

    Raises:
        ClipboardUnavailable: If config.max_read_failures consecutive
            reads fail.
    """
    logger.info("Watching clipboard, writing to %s", config.base_directory)
    try:
        while not session.cancelled.is_set():
            await watch_tick(session, clipboard, config)
            if config.once:
                break
            if await wait_for_next_tick(session, config.interval):
                break
    finally:
        session.state = WatchState.CANCELLED
    logger.info("Clipboard watcher stopped")
