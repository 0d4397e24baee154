#!/usr/bin/env python3
"""
Render source files into one annotated clipboard block.

Each file becomes a section of the form:

    ### <path>
    ```<language-hint>
    <content>
    ```

Sections are separated by a blank line. The output parses back into the
same (path, content) pairs with snippy.parser.

With FormatOptions.xml the files are instead rendered as
<file path="..." type="..."> elements inside a single <files> element.
"""

from __future__ import annotations

from collections.abc import Sequence
from xml.sax.saxutils import escape

from snippy.format_options import FILENAME_COMMENT, FILENAME_HEADING, FormatOptions
from snippy.languages import filename_comment, language_hint
from snippy.parser_heading import match_filename_comment, normalize_heading
from snippy.source_file import SourceFile

FENCE: str = "```"
HEADING_MARKER: str = "###"


def split_content_lines(content: str) -> list[str]:
    """
    Split content into lines on "\\n" only.

    A single trailing newline does not produce an empty final line, and
    other line-break characters (\\r, form feeds) are kept verbatim.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def number_lines(lines: list[str], start: int, prefix: str) -> list[str]:
    """
    Prefix each line with its line number and the line prefix.

    Numbers are right-aligned to the width of the largest number so the
    columns stay stable within one file.

    Args:
        lines: Content lines without newlines.
        start: Number given to the first line.
        prefix: Text placed after the number.

    Returns:
        The numbered lines.
    """
    if not lines:
        return []
    width = len(str(start + len(lines) - 1))
    return [
        f"{number:>{width}}{prefix}{line}"
        for number, line in enumerate(lines, start=start)
    ]


def choose_fence(lines: list[str]) -> str:
    """Return a backtick fence longer than any backtick fence inside the content."""
    longest = 0
    for line in lines:
        stripped = line.lstrip()
        run = len(stripped) - len(stripped.lstrip("`"))
        longest = max(longest, run)
    return "`" * max(len(FENCE), longest + 1)


def heading_line(path: str) -> str:
    """
    Render the heading for path.

    The path is backtick-quoted when the bare form would not be read back
    as a path, e.g. names with spaces, "LICENSE" or "README".
    """
    line = f"{HEADING_MARKER} {path}"
    if normalize_heading(line) == path:
        return line
    return f"{HEADING_MARKER} `{path}`"


def format_file(source: SourceFile, options: FormatOptions) -> str:
    """Render a single file section without a trailing separator."""
    out: list[str] = []
    if options.filename_format == FILENAME_HEADING:
        out.append(heading_line(source.path))

    lines = split_content_lines(source.content)
    if options.line_number_start is not None:
        lines = number_lines(lines, options.line_number_start, options.line_prefix)
    # A leading "filename:" comment in the content would be taken as the
    # declared path, so shield it behind one naming this file.
    shielded = bool(lines) and match_filename_comment(lines[0]) is not None
    if options.filename_format == FILENAME_COMMENT or (
        shielded and options.filename_format == FILENAME_HEADING
    ):
        lines = [filename_comment(source.path), *lines]

    if options.use_markdown_fences:
        fence = choose_fence(lines)
        out.append(fence + (language_hint(source.path) or ""))
        out.extend(lines)
        out.append(fence)
    else:
        out.extend(lines)
    return "\n".join(out) + "\n"


def format_xml_file(source: SourceFile, options: FormatOptions) -> str:
    """
    Render a single file as a <file> element.

    With line numbering each line becomes a <line> element whose number is
    zero-padded to the width of the largest one. Content is not escaped.
    """
    path = escape(source.path, {'"': "&quot;"})
    kind = language_hint(source.path) or "unknown"
    out = [f'<file path="{path}" type="{kind}">']
    lines = split_content_lines(source.content)
    if options.line_number_start is not None and lines:
        start = options.line_number_start
        width = len(str(start + len(lines) - 1))
        out.extend(
            f'<line number="{number:0{width}}">{line}</line>'
            for number, line in enumerate(lines, start=start)
        )
    else:
        out.extend(lines)
    out.append("</file>")
    return "\n".join(out) + "\n"


def format_section(source: SourceFile, options: FormatOptions) -> str:
    """Render one file in the markdown or XML layout chosen by options."""
    if options.xml:
        return format_xml_file(source, options)
    return format_file(source, options)


def format_files(files: Sequence[SourceFile], options: FormatOptions | None = None) -> str:
    """
    Render files, in order, into one clipboard-ready text block.

    Args:
        files: Non-empty sequence of files to render.
        options: Formatting options; defaults to FormatOptions().

    Returns:
        The concatenated file sections separated by blank lines, or the
        <files> element in XML mode.

    Raises:
        ValueError: If files is empty.
    """
    if not files:
        raise ValueError("format_files requires at least one file")
    if options is None:
        options = FormatOptions()
    if options.xml:
        sections = "".join(format_xml_file(source, options) for source in files)
        return f"<files>\n{sections}</files>\n"
    return "\n".join(format_file(source, options) for source in files)
