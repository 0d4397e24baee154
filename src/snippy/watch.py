#!/usr/bin/env python3
"""Watch mode entry point.

Verifies the clipboard, registers SIGINT and SIGTERM to request a
cooperative stop, and runs the polling loop. Content already on the
clipboard at startup counts as new and is applied on the first tick.
"""

from __future__ import annotations

import asyncio
import signal
from typing import TYPE_CHECKING

from snippy.clipboard import open_clipboard
from snippy.watch_loop import run_watch_loop
from snippy.watch_session import WatchSession

if TYPE_CHECKING:
    from snippy.clipboard import ClipboardPort
    from snippy.watch_session import WatchConfig


async def run_watch(config: WatchConfig, clipboard: ClipboardPort | None = None) -> None:
    """Run watch mode until SIGINT or SIGTERM.

    Args:
        config: The watch configuration.
        clipboard: Clipboard to poll; defaults to the system clipboard.

    Raises:
        ClipboardUnavailable: If the clipboard cannot be read at startup.
    """
    clipboard = await asyncio.to_thread(open_clipboard, clipboard)
    session = WatchSession()

    loop = asyncio.get_running_loop()
    loop.add_signal_handler(signal.SIGINT, session.cancel)
    loop.add_signal_handler(signal.SIGTERM, session.cancel)
    try:
        await run_watch_loop(session, clipboard, config)
    finally:
        loop.remove_signal_handler(signal.SIGINT)
        loop.remove_signal_handler(signal.SIGTERM)
