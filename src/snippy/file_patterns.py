#!/usr/bin/env python3
"""Expansion of copy command arguments into file paths.

Arguments may name files, directories (walked recursively) or glob
patterns. Files under common build, cache and VCS directories are
skipped when walking directories or expanding globs.
"""

from __future__ import annotations

import glob
import logging
import os
from collections.abc import Iterable
from fnmatch import fnmatch
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = (
    "target/**",
    "node_modules/**",
    ".git/**",
    "**/*.pyc",
    "**/__pycache__/**",
    ".DS_Store",
    "Cargo.lock",
    "package-lock.json",
    "pnpm-lock.yaml",
    "yarn.lock",
    "uv.lock",
    "poetry.lock",
    "Gemfile.lock",
    "composer.lock",
    "go.sum",
    "dist/**",
    "build/**",
    ".venv/**",
    "venv/**",
    ".env",
    ".idea/**",
    ".vscode/**",
    ".ruff_cache/**",
    ".pytest_cache/**",
    ".mypy_cache/**",
    ".tox/**",
    "vendor/**",
    ".bundle/**",
    ".gradle/**",
    "**/*.class",
    "**/bin/**",
    "**/obj/**",
)


def normalize_path(path: str) -> str:
    """Use forward slashes and drop a leading "./"."""
    path = path.replace("\\", "/")
    while path.startswith("./"):
        path = path[2:]
    return path


def should_ignore(path: str, patterns: Iterable[str]) -> bool:
    """
    Check a relative path against ignore patterns.

    A pattern ending in "/**" also matches the directory at any depth, and
    a pattern starting with "**/" also matches at the top level.
    """
    path = normalize_path(path)
    parts = path.split("/")
    for pattern in patterns:
        if fnmatch(path, pattern):
            return True
        if pattern.startswith("**/") and fnmatch(path, pattern[3:]):
            return True
        if pattern.endswith("/**"):
            directory = pattern[:-3].removeprefix("**/")
            if directory in parts[:-1]:
                return True
        elif "/" not in pattern and fnmatch(parts[-1], pattern):
            return True
    return False


def _walk_directory(directory: Path, patterns: tuple[str, ...]) -> list[str]:
    files = []
    for root, dirnames, filenames in os.walk(directory):
        dirnames.sort()
        for name in sorted(filenames):
            path = normalize_path(os.path.join(root, name))
            if should_ignore(path, patterns):
                logger.debug("Ignoring %s", path)
                continue
            files.append(path)
    return files


def expand_patterns(
    arguments: Iterable[str], ignore_patterns: Iterable[str] | None = None
) -> list[str]:
    """
    Expand files, directories and globs into a de-duplicated file list.

    Explicitly named files are never ignored. Directory walks and glob
    matches are filtered by the ignore patterns.

    Args:
        arguments: Command-line arguments of the copy command.
        ignore_patterns: Patterns to skip; defaults to DEFAULT_IGNORE_PATTERNS.

    Returns:
        File paths in argument order, each listed once.
    """
    patterns = tuple(DEFAULT_IGNORE_PATTERNS if ignore_patterns is None else ignore_patterns)
    files: dict[str, None] = {}
    for argument in arguments:
        argument = normalize_path(argument)
        path = Path(argument)
        if path.is_file():
            files.setdefault(argument, None)
        elif path.is_dir():
            for found in _walk_directory(path, patterns):
                files.setdefault(found, None)
        else:
            matches = sorted(glob.glob(argument, recursive=True))
            if not matches:
                logger.warning("No files match %s", argument)
            for match in matches:
                match = normalize_path(match)
                if Path(match).is_file() and not should_ignore(match, patterns):
                    files.setdefault(match, None)
    return list(files)
