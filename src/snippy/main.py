"""CLI handling for snippy.

This module provides the command-line interface for snippy, handling
argument parsing via click, logging configuration, and dispatching to
copy or watch mode.

Usage:
    snippy [--verbose | --quiet] copy FILES... [--xml] [--no-stats] [options]
    snippy [--verbose | --quiet] watch [--watch-path DIR] [options]
"""

import sys
from pathlib import Path

import click

from snippy.format_options import FILENAME_FORMATS, FILENAME_HEADING
from snippy.main_logging import configure_logging
from snippy.main_options import MutuallyExclusiveOption
from snippy.parser import DuplicatePolicy
from snippy.token_stats import DEFAULT_MODEL
from snippy.watch_constants import DEFAULT_FIRST_LINE, DEFAULT_INTERVAL_MS


@click.group()
@click.option(
    "--verbose",
    is_flag=True,
    cls=MutuallyExclusiveOption,
    exclusive_with=["quiet"],
    help="Enable DEBUG-level logging",
)
@click.option(
    "--quiet",
    is_flag=True,
    cls=MutuallyExclusiveOption,
    exclusive_with=["verbose"],
    help="Only log warnings and errors",
)
def main(verbose: bool, quiet: bool) -> None:
    """Move annotated code snippets between the clipboard and the filesystem."""
    configure_logging(verbose, quiet)


@main.command(name="copy")
@click.argument("files", nargs=-1, required=True)
@click.option("-m", "--no-markdown", is_flag=True, help="Omit markdown code fences")
@click.option(
    "-l",
    "--line-number",
    type=click.IntRange(min=1),
    default=None,
    help="Number lines starting at N",
)
@click.option(
    "-p",
    "--prefix",
    default="|",
    show_default=True,
    help="Text between line number and line",
)
@click.option(
    "--filename-format",
    type=click.Choice(FILENAME_FORMATS),
    default=FILENAME_HEADING,
    show_default=True,
    help="Where to put the file path",
)
@click.option(
    "--first-line",
    default=DEFAULT_FIRST_LINE,
    show_default=True,
    help="Header line of the clipboard text; empty for none",
)
@click.option("--xml", is_flag=True, help="Wrap files in XML elements instead of markdown")
@click.option("-s", "--no-stats", is_flag=True, help="Do not report token counts")
@click.option(
    "-M",
    "--model",
    default=DEFAULT_MODEL,
    show_default=True,
    help="Model whose tokenizer is used for token counts",
)
def copy_command(
    files: tuple[str, ...],
    no_markdown: bool,
    line_number: int | None,
    prefix: str,
    filename_format: str,
    first_line: str,
    xml: bool,
    no_stats: bool,
    model: str,
) -> None:
    """Copy FILES (files, directories or globs) to the clipboard."""
    from snippy.copy import copy_files_to_clipboard
    from snippy.errors import ClipboardUnavailable, NoInputFiles, TokenizerUnavailable
    from snippy.format_options import FormatOptions
    from snippy.token_stats import load_token_counter

    options = FormatOptions(
        use_markdown_fences=not no_markdown,
        line_number_start=line_number,
        line_prefix=prefix,
        filename_format=filename_format,
        xml=xml,
    )
    try:
        token_counter = None if no_stats else load_token_counter(model)
        copy_files_to_clipboard(
            files,
            options,
            first_line=first_line or None,
            token_counter=token_counter,
        )
    except (NoInputFiles, ClipboardUnavailable, TokenizerUnavailable) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@main.command(name="watch")
@click.option(
    "-x",
    "--watch-path",
    type=click.Path(path_type=Path),
    default=".",
    help="Directory receiving the files (default: current directory)",
)
@click.option(
    "-i",
    "--interval-ms",
    type=click.IntRange(min=1),
    default=DEFAULT_INTERVAL_MS,
    show_default=True,
    help="Clipboard polling interval in milliseconds",
)
@click.option(
    "--first-line",
    default=DEFAULT_FIRST_LINE,
    show_default=True,
    help="Header marking snippy's own copy output; empty to disable",
)
@click.option("--once", is_flag=True, help="Check the clipboard once and exit")
@click.option(
    "--trailing-newline",
    is_flag=True,
    help="End written files with a newline",
)
@click.option(
    "--max-read-failures",
    type=click.IntRange(min=1),
    default=None,
    help="Exit after N consecutive clipboard read failures",
)
@click.option(
    "--duplicates",
    type=click.Choice([policy.value for policy in DuplicatePolicy]),
    default=DuplicatePolicy.LAST_WINS.value,
    show_default=True,
    help="Which block wins when a path appears twice",
)
def watch_command(
    watch_path: Path,
    interval_ms: int,
    first_line: str,
    once: bool,
    trailing_newline: bool,
    max_read_failures: int | None,
    duplicates: str,
) -> None:
    """Watch the clipboard and write annotated snippets to disk."""
    import asyncio
    from snippy.errors import ClipboardUnavailable
    from snippy.watch import run_watch
    from snippy.watch_session import WatchConfig

    if not watch_path.is_dir():
        click.echo(f"Error: {watch_path} is not a directory", err=True)
        sys.exit(1)

    config = WatchConfig(
        base_directory=watch_path,
        interval=interval_ms / 1000,
        first_line=first_line or None,
        once=once,
        trailing_newline=trailing_newline,
        max_read_failures=max_read_failures,
        duplicate_policy=DuplicatePolicy(duplicates),
    )
    try:
        asyncio.run(run_watch(config))
    except ClipboardUnavailable as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
