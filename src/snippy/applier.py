#!/usr/bin/env python3
"""
Apply parsed snippet blocks to the filesystem.

Every block is resolved against a base directory and written with
whole-file replacement. Existing files are overwritten without
confirmation. Each block gets its own result; a failure never stops the
remaining blocks.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from snippy.applier_write import read_existing, write_atomic
from snippy.errors import UnsafePathError
from snippy.snippet_block import SnippetBlock

logger = logging.getLogger(__name__)

# Failure reasons reported in Failed results.
UNSAFE_PATH: str = "unsafe path"
IO_ERROR: str = "io error"


@dataclass(frozen=True)
class Written:
    """
    Successful application of one block.

    Attributes:
        path: The declared path of the block.
        changed: False if the file already held the same content.
    """

    path: str
    changed: bool = True


@dataclass(frozen=True)
class Failed:
    """
    Failed application of one block.

    Attributes:
        path: The declared path of the block.
        reason: UNSAFE_PATH or IO_ERROR.
        detail: Error message for IO_ERROR failures.
    """

    path: str
    reason: str
    detail: str = ""


ApplyResult = Written | Failed


def resolve_destination(declared_path: str, base_directory: Path) -> Path:
    """
    Resolve a declared path inside the base directory.

    Relative paths are joined onto the base directory. Absolute paths are
    accepted only when they already point inside it. Symlinks are
    resolved before the containment check.

    Args:
        declared_path: Path from the snippet heading.
        base_directory: Directory all writes must stay within.

    Returns:
        The resolved destination path.

    Raises:
        UnsafePathError: If the path escapes the base directory, names
            the base directory itself or cannot be represented on disk.
    """
    if "\x00" in declared_path:
        raise UnsafePathError(declared_path)
    base = base_directory.resolve()
    normalized = declared_path.replace("\\", "/") if os.sep == "/" else declared_path
    try:
        candidate = (base / normalized).resolve()
    except ValueError:
        raise UnsafePathError(declared_path) from None
    if candidate == base or not candidate.is_relative_to(base):
        raise UnsafePathError(declared_path)
    return candidate


def apply_block(
    block: SnippetBlock, base_directory: Path, trailing_newline: bool = False
) -> ApplyResult:
    """
    Write one block under the base directory.

    Args:
        block: The block to write.
        base_directory: Directory all writes must stay within.
        trailing_newline: Append a newline to non-empty bodies lacking one.

    Returns:
        Written or Failed for this block.
    """
    try:
        destination = resolve_destination(block.declared_path, base_directory)
    except UnsafePathError:
        logger.debug("Rejected unsafe path %s", block.declared_path)
        return Failed(block.declared_path, UNSAFE_PATH)
    except OSError as e:
        return Failed(block.declared_path, IO_ERROR, str(e))

    content = block.body
    if trailing_newline and content and not content.endswith("\n"):
        content += "\n"

    if read_existing(destination) == content:
        return Written(block.declared_path, changed=False)

    try:
        write_atomic(destination, content)
    except (OSError, ValueError) as e:
        # ValueError covers text that cannot be encoded, e.g. lone surrogates
        return Failed(block.declared_path, IO_ERROR, str(e))
    return Written(block.declared_path)


def apply_blocks(
    blocks: Sequence[SnippetBlock],
    base_directory: Path,
    *,
    trailing_newline: bool = False,
) -> list[ApplyResult]:
    """
    Write every block under the base directory.

    Args:
        blocks: Parsed snippet blocks, applied in order.
        base_directory: Directory all writes must stay within.
        trailing_newline: Append a newline to non-empty bodies lacking one.

    Returns:
        One result per block, in the same order.
    """
    return [apply_block(block, base_directory, trailing_newline) for block in blocks]


def describe_result(result: ApplyResult) -> str:
    """Render a result as an operator-facing report line."""
    if isinstance(result, Written):
        verb = "wrote" if result.changed else "unchanged"
        return f"{verb} {result.path}"
    if result.detail:
        return f"failed: {result.path} - {result.reason}: {result.detail}"
    return f"failed: {result.path} - {result.reason}"
