#!/usr/bin/env python3
"""
Fence language hints and filename comment styles keyed by file type.

The mapping is best-effort: an unknown extension yields no hint and the
formatter emits a bare fence.
"""

from __future__ import annotations

from pathlib import PurePosixPath

LANGUAGE_BY_EXTENSION: dict[str, str] = {
    "py": "python",
    "pyi": "python",
    "rs": "rust",
    "js": "javascript",
    "mjs": "javascript",
    "cjs": "javascript",
    "jsx": "jsx",
    "ts": "typescript",
    "tsx": "typescript",
    "java": "java",
    "c": "c",
    "h": "c",
    "cpp": "cpp",
    "cc": "cpp",
    "cxx": "cpp",
    "hpp": "cpp",
    "cs": "csharp",
    "fs": "fsharp",
    "go": "go",
    "rb": "ruby",
    "php": "php",
    "swift": "swift",
    "kt": "kotlin",
    "kts": "kotlin",
    "r": "r",
    "scala": "scala",
    "lua": "lua",
    "dart": "dart",
    "html": "html",
    "htm": "html",
    "xml": "xml",
    "xhtml": "xml",
    "css": "css",
    "scss": "scss",
    "sass": "sass",
    "less": "less",
    "sh": "bash",
    "bash": "bash",
    "zsh": "zsh",
    "fish": "fish",
    "toml": "toml",
    "yaml": "yaml",
    "yml": "yaml",
    "json": "json",
    "ini": "ini",
    "cfg": "ini",
    "conf": "ini",
    "csv": "csv",
    "md": "markdown",
    "rst": "rst",
    "tex": "latex",
    "sql": "sql",
    "bat": "batch",
    "ps1": "powershell",
    "vue": "vue",
    "svelte": "svelte",
}

LANGUAGE_BY_FILENAME: dict[str, str] = {
    "Dockerfile": "dockerfile",
    "Makefile": "makefile",
    "CMakeLists.txt": "cmake",
}

# Comment templates for the in-fence filename line.
_SLASH_COMMENT = "// filename: {path}"
_HASH_COMMENT = "# filename: {path}"
_HTML_COMMENT = "<!-- filename: {path} -->"
_BLOCK_COMMENT = "/* filename: {path} */"

_HASH_COMMENT_EXTENSIONS = frozenset(
    {"py", "pyi", "rb", "sh", "bash", "zsh", "fish", "toml", "yaml", "yml", "r", "ini", "cfg", "conf"}
)
_HTML_COMMENT_EXTENSIONS = frozenset({"html", "htm", "xml", "xhtml", "md", "vue", "svelte"})
_BLOCK_COMMENT_EXTENSIONS = frozenset({"css", "scss", "sass", "less"})


def _extension(path: str) -> str:
    return PurePosixPath(path.replace("\\", "/")).suffix.lstrip(".").lower()


def language_hint(path: str) -> str | None:
    """
    Return the fence language hint for a path, or None if unknown.

    Args:
        path: File path; only the final component is inspected.

    Returns:
        A markdown fence info string such as "python", or None.
    """
    name = PurePosixPath(path.replace("\\", "/")).name
    if name in LANGUAGE_BY_FILENAME:
        return LANGUAGE_BY_FILENAME[name]
    return LANGUAGE_BY_EXTENSION.get(_extension(path))


def filename_comment(path: str) -> str:
    """
    Render a "filename:" comment line in the comment syntax of the file.

    Unknown file types fall back to a // comment.
    """
    ext = _extension(path)
    if ext in _HASH_COMMENT_EXTENSIONS:
        template = _HASH_COMMENT
    elif ext in _HTML_COMMENT_EXTENSIONS:
        template = _HTML_COMMENT
    elif ext in _BLOCK_COMMENT_EXTENSIONS:
        template = _BLOCK_COMMENT
    else:
        template = _SLASH_COMMENT
    return template.format(path=path)
