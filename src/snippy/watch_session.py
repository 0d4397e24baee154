#!/usr/bin/env python3
"""Watch mode configuration and session state.

WatchConfig holds the tunables of one watch invocation. WatchSession
groups the mutable state owned exclusively by the watch loop: the last
clipboard snapshot, the cancellation signal and a short history of
written files.
"""

from __future__ import annotations

import asyncio
import enum
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from snippy.change_detector import ClipboardSnapshot
from snippy.parser import DuplicatePolicy
from snippy.watch_constants import DEFAULT_FIRST_LINE, DEFAULT_INTERVAL_MS, MAX_HISTORY_SIZE


class WatchState(enum.Enum):
    """Watch loop states."""

    IDLE = "idle"
    POLLING = "polling"
    UNCHANGED = "unchanged"
    CHANGED = "changed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class WatchConfig:
    """
    Configuration for one watch invocation.

    Attributes:
        base_directory: Directory that receives written files.
        interval: Delay between polls in seconds.
        first_line: Header marking our own copy output; None disables
            the check.
        once: Run a single tick and return.
        trailing_newline: Append a newline to bodies lacking one.
        max_read_failures: Consecutive read failures after which the loop
            gives up, or None to never give up.
        duplicate_policy: Resolution for repeated paths in one payload.
    """

    base_directory: Path = field(default_factory=Path.cwd)
    interval: float = DEFAULT_INTERVAL_MS / 1000
    first_line: str | None = DEFAULT_FIRST_LINE
    once: bool = False
    trailing_newline: bool = False
    max_read_failures: int | None = None
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS


@dataclass
class HistoryEntry:
    """A file written during this session."""

    path: str
    written_at: datetime


@dataclass
class WatchSession:
    """
    State owned by the watch loop for its lifetime.

    Attributes:
        snapshot: Last clipboard text seen, or None before the first poll.
        sequence: Number of polls performed.
        state: Current WatchState.
        cancelled: Set to request a cooperative stop.
        consecutive_failures: Clipboard reads failed in a row.
        history: Most recently written files, oldest first.
    """

    snapshot: ClipboardSnapshot | None = None
    sequence: int = 0
    state: WatchState = WatchState.IDLE
    cancelled: asyncio.Event = field(default_factory=asyncio.Event)
    consecutive_failures: int = 0
    history: deque[HistoryEntry] = field(
        default_factory=lambda: deque(maxlen=MAX_HISTORY_SIZE)
    )

    def observe(self, text: str) -> ClipboardSnapshot:
        """Record text as the latest snapshot and return it."""
        self.snapshot = ClipboardSnapshot(text=text, observed_at_sequence=self.sequence)
        return self.snapshot

    def record_write(self, path: str) -> None:
        """Add a written path to the history."""
        self.history.append(HistoryEntry(path=path, written_at=datetime.now(timezone.utc)))

    def cancel(self) -> None:
        """Request the loop to stop after the current tick."""
        self.cancelled.set()
