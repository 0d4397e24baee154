#!/usr/bin/env python3
"""Copy mode: format files and place them on the clipboard.

The clipboard text starts with a header line (by default
"# Relevant Code") followed by one annotated section per file. Watch mode
recognizes the header and never applies the tool's own output. XML output
carries no header. Token counts per file can be logged as a tree.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from snippy.clipboard import ClipboardPort, PyperclipClipboard
from snippy.errors import NoInputFiles
from snippy.file_patterns import expand_patterns, normalize_path
from snippy.format_options import FormatOptions
from snippy.formatter import format_files, format_section
from snippy.source_file import SourceFile
from snippy.token_stats import TokenCounter, report_token_stats
from snippy.watch_constants import DEFAULT_FIRST_LINE

logger = logging.getLogger(__name__)


def display_path(path: str, base_directory: Path) -> str:
    """Return path relative to base_directory when it lies inside it.

    Symlinks in the file name are not followed, so a linked file keeps the
    name the user gave. Resolved paths are only compared when the plain
    absolute paths disagree, e.g. when the base is reached through a link.
    """
    absolute = Path(os.path.abspath(path))
    for base in (Path(os.path.abspath(base_directory)), base_directory.resolve()):
        if absolute.is_relative_to(base):
            return absolute.relative_to(base).as_posix()
    try:
        relative = absolute.parent.resolve().relative_to(base_directory.resolve())
    except ValueError:
        return normalize_path(path)
    return (relative / absolute.name).as_posix()


def read_source_files(paths: Iterable[str], base_directory: Path) -> list[SourceFile]:
    """Read files as text, skipping unreadable ones with a warning.

    Args:
        paths: File paths to read.
        base_directory: Directory heading paths are made relative to.

    Returns:
        The files that could be read, in order.
    """
    sources = []
    for path in paths:
        try:
            with open(path, encoding="utf-8", newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read %s: %s", path, e)
            continue
        sources.append(SourceFile(path=display_path(path, base_directory), content=content))
        logger.debug("Read %s (%d chars)", path, len(content))
    return sources


def render_clipboard_text(
    sources: list[SourceFile], options: FormatOptions, first_line: str | None
) -> str:
    """Format sources and prepend the header line, if any.

    XML output never carries the header line.
    """
    text = format_files(sources, options)
    if first_line and not options.xml:
        header = first_line.rstrip("\n")
        return f"{header}\n{text}"
    return text


def copy_files_to_clipboard(
    arguments: Iterable[str],
    options: FormatOptions | None = None,
    *,
    first_line: str | None = DEFAULT_FIRST_LINE,
    ignore_patterns: Iterable[str] | None = None,
    clipboard: ClipboardPort | None = None,
    base_directory: Path | None = None,
    token_counter: TokenCounter | None = None,
) -> str:
    """Format the named files and write them to the clipboard.

    Args:
        arguments: Files, directories or glob patterns.
        options: Formatting options.
        first_line: Header line to prepend, or None for no header.
        ignore_patterns: Patterns skipped when expanding directories and globs.
        clipboard: Clipboard to write; defaults to the system clipboard.
        base_directory: Directory heading paths are relative to; defaults
            to the current directory.
        token_counter: When given, per-file token counts of the formatted
            sections are logged as a tree.

    Returns:
        The text written to the clipboard.

    Raises:
        NoInputFiles: If no readable file was found.
        ClipboardUnavailable: If the clipboard cannot be written.
    """
    if options is None:
        options = FormatOptions()
    if clipboard is None:
        clipboard = PyperclipClipboard()
    if base_directory is None:
        base_directory = Path.cwd()

    paths = expand_patterns(arguments, ignore_patterns)
    logger.debug("Expanded file list: %s", paths)
    sources = read_source_files(paths, base_directory)
    if not sources:
        raise NoInputFiles("No readable files to copy")

    text = render_clipboard_text(sources, options, first_line)
    if token_counter is not None:
        report_token_stats(
            {source.path: token_counter(format_section(source, options)) for source in sources}
        )
    clipboard.write(text)
    logger.info("Copied %d file(s) to clipboard", len(sources))
    return text
