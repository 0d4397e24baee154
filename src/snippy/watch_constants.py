#!/usr/bin/env python3
"""Constants for watch mode polling and clipboard startup.

These constants control the polling cadence of the watch loop and the
bounded retry used when probing the clipboard at startup.
"""

# Default delay between clipboard polls in milliseconds.
DEFAULT_INTERVAL_MS: int = 1000

# Header line written at the top of copy output. Clipboard text starting
# with it is recognized as our own copy and never applied.
DEFAULT_FIRST_LINE: str = "# Relevant Code"

# Number of recently written files kept in the watch session history.
MAX_HISTORY_SIZE: int = 10

# Startup probe retry parameters (exponential backoff).
# Total attempts before the clipboard is declared unavailable.
STARTUP_ATTEMPTS: int = 3

# Initial delay between probe attempts in seconds.
STARTUP_INITIAL_WAIT: float = 0.5

# Maximum delay between probe attempts in seconds.
STARTUP_MAX_WAIT: float = 4.0

# Multiplier for exponential backoff.
STARTUP_WAIT_MULTIPLIER: float = 2.0
