#!/usr/bin/env python3
"""
Heading and filename-comment recognition for the snippet parser.

A heading declares the destination path of the fenced block after it.
Accepted shapes include:

    ### src/main.py
    ## `src/main.py`
    ### `docs/release notes.md`
    **src/main.py**:
    ### File: src/main.py
    src/main.py

Headings that do not look like a path (prose such as "### Installation")
are rejected so that ordinary markdown sections are never written to disk.
Backtick-quoted text is taken literally, so it may hold spaces or names
without an extension.
"""

from __future__ import annotations

import re

from snippy.languages import LANGUAGE_BY_FILENAME

_MARKERS = re.compile(r"^(#{1,6})\s+(?P<text>.*)$")
_LABEL = re.compile(r"^(?:file|filename|path)\s*:\s*", re.IGNORECASE)
_BARE_PATH = re.compile(r"^[\w.@+\-/\\]+$")
_WRAPPERS = ("**", "__", "`", "*", "_")

_FILENAME_COMMENT = re.compile(
    r"^\s*(?:"
    r"/\*\s*filename:\s*(?P<block>.+?)\s*\*/"
    r"|<!--\s*filename:\s*(?P<html>.+?)\s*-->"
    r"|(?://|#)\s*filename:\s*(?P<line>.+?)"
    r")\s*$",
    re.IGNORECASE,
)


def _unwrap(text: str) -> tuple[str, bool]:
    """Strip emphasis and backtick wrappers; report whether backticks were seen.

    Text inside backticks is taken literally and is not unwrapped further.
    """
    changed = True
    while changed and text:
        changed = False
        text = text.strip().rstrip(":").strip()
        for wrapper in _WRAPPERS:
            size = len(wrapper)
            if len(text) > 2 * size and text.startswith(wrapper) and text.endswith(wrapper):
                text = text[size:-size]
                if wrapper == "`":
                    return text, True
                changed = True
                break
    return text, False


def _looks_like_path(text: str, quoted: bool) -> bool:
    if not text:
        return False
    if quoted:
        return True
    if any(ch.isspace() for ch in text):
        return False
    if "/" in text or "\\" in text:
        return True
    if "." in text and text.strip("."):
        return True
    return text in LANGUAGE_BY_FILENAME


def normalize_heading(line: str, allow_bare: bool = True) -> str | None:
    """
    Recover the declared path from a heading line.

    Args:
        line: One line of clipboard text, outside any fence.
        allow_bare: Accept an unmarked, unwrapped line such as "src/main.py".
            Marked ("#"), emphasised and backticked lines are always
            considered.

    Returns:
        The normalized path, or None if the line is not a path heading.
    """
    stripped = line.strip()
    if not stripped:
        return None

    marked = _MARKERS.match(stripped)
    if marked is not None:
        text = marked.group("text").rstrip("#").strip()
    elif stripped.startswith("#"):
        return None
    else:
        if not allow_bare and not stripped.startswith(_WRAPPERS):
            return None
        text = stripped

    text, quoted = _unwrap(text)
    if not quoted:
        text = _LABEL.sub("", text)
        text, quoted = _unwrap(text)

    if not _looks_like_path(text, quoted):
        return None
    if marked is None and not _BARE_PATH.match(text):
        return None
    return text


def match_filename_comment(line: str) -> str | None:
    """
    Return the path declared by a "filename:" comment line, or None.

    Recognizes //, #, /* */ and <!-- --> comment styles.
    """
    match = _FILENAME_COMMENT.match(line)
    if match is None:
        return None
    path = match.group("block") or match.group("html") or match.group("line")
    path = path.strip().strip("`").strip()
    return path or None
