#!/usr/bin/env python3
"""
Exception types for snippy.

Formatting and parsing never raise on content. Exceptions are reserved
for the I/O-facing edges: the system clipboard, destination paths and the
tokenizer used for copy statistics.
Filesystem failures surface as plain OSError and are turned into
per-file results by the applier.
"""


class SnippyError(Exception):
    """Base class for snippy errors."""

    pass


class ClipboardUnavailable(SnippyError):
    """
    Exception raised when the system clipboard cannot be accessed.

    Fatal at startup, reported and skipped for a single watch tick.
    """

    pass


class UnsafePathError(SnippyError):
    """
    Exception raised when a declared path would escape the base directory.

    Attributes:
        declared_path: The path as it appeared in the clipboard text.
    """

    def __init__(self, declared_path: str) -> None:
        super().__init__(f"Path escapes base directory: {declared_path}")
        self.declared_path = declared_path


class NoInputFiles(SnippyError):
    """Exception raised when the copy command finds no readable files."""

    pass


class TokenizerUnavailable(SnippyError):
    """
    Exception raised when no token encoding is known for a model.

    Attributes:
        model: The requested model name.
    """

    def __init__(self, model: str) -> None:
        super().__init__(f"No tokenizer available for model: {model}")
        self.model = model
