#!/usr/bin/env python3
"""Formatting options applied uniformly to one formatting call."""

from __future__ import annotations

from dataclasses import dataclass

# Filename placement styles.
# "heading": a "### <path>" line before the fence.
FILENAME_HEADING: str = "heading"
# "comment": a "filename: <path>" comment as the first line inside the fence.
FILENAME_COMMENT: str = "comment"
# "none": no path at all.
FILENAME_NONE: str = "none"

FILENAME_FORMATS: tuple[str, ...] = (FILENAME_HEADING, FILENAME_COMMENT, FILENAME_NONE)


@dataclass(frozen=True)
class FormatOptions:
    """
    Options controlling how files are rendered for the clipboard.

    Attributes:
        use_markdown_fences: Wrap each file in a fenced code block.
        line_number_start: First line number, or None to disable numbering.
        line_prefix: Text placed between the line number and the line.
        filename_format: One of FILENAME_FORMATS.
        xml: Render files as <file> elements inside one <files> element.
            Fences, filename format and line prefix do not apply.
    """

    use_markdown_fences: bool = True
    line_number_start: int | None = None
    line_prefix: str = ""
    filename_format: str = FILENAME_HEADING
    xml: bool = False

    def __post_init__(self) -> None:
        if self.line_number_start is not None and self.line_number_start < 1:
            raise ValueError(
                f"line_number_start must be positive, got {self.line_number_start}"
            )
        if self.filename_format not in FILENAME_FORMATS:
            raise ValueError(f"Unknown filename format: {self.filename_format!r}")
