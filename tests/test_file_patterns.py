#!/usr/bin/env python3
"""Tests for expanding copy arguments into file lists."""
from pathlib import Path

import pytest

from snippy.file_patterns import expand_patterns, normalize_path, should_ignore


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a small project tree and chdir into it."""
    (tmp_path / "src" / "pkg").mkdir(parents=True)
    (tmp_path / "src" / "pkg" / "a.py").write_text("a = 1\n")
    (tmp_path / "src" / "pkg" / "b.py").write_text("b = 2\n")
    (tmp_path / "src" / "pkg" / "__pycache__").mkdir()
    (tmp_path / "src" / "pkg" / "__pycache__" / "a.cpython-312.pyc").write_bytes(b"\0")
    (tmp_path / "node_modules" / "lib").mkdir(parents=True)
    (tmp_path / "node_modules" / "lib" / "index.js").write_text("x")
    (tmp_path / "README.md").write_text("# readme\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_normalize_path() -> None:
    """Test leading ./ and backslashes are normalized."""
    assert normalize_path("./src/a.py") == "src/a.py"
    assert normalize_path("src\\a.py") == "src/a.py"


@pytest.mark.parametrize(
    ("path", "ignored"),
    [
        ("node_modules/lib/index.js", True),
        ("web/node_modules/x.js", True),
        ("src/__pycache__/a.pyc", True),
        ("a.pyc", True),
        (".git/config", True),
        ("Cargo.lock", True),
        ("sub/.env", True),
        ("src/main.py", False),
        ("docs/build.md", False),
    ],
)
def test_should_ignore_defaults(path: str, ignored: bool) -> None:
    """Test default ignore patterns."""
    from snippy.file_patterns import DEFAULT_IGNORE_PATTERNS

    assert should_ignore(path, DEFAULT_IGNORE_PATTERNS) is ignored


def test_expand_directory_walks_sorted_and_ignores(project: Path) -> None:
    """Test a directory argument expands to its non-ignored files."""
    assert expand_patterns(["src"]) == ["src/pkg/a.py", "src/pkg/b.py"]


def test_expand_current_directory(project: Path) -> None:
    """Test "." skips ignored directories such as node_modules."""
    files = expand_patterns(["."])
    assert "README.md" in files
    assert "src/pkg/a.py" in files
    assert not any(f.startswith("node_modules") for f in files)


def test_expand_glob(project: Path) -> None:
    """Test glob patterns including recursive **."""
    assert expand_patterns(["src/**/*.py"]) == ["src/pkg/a.py", "src/pkg/b.py"]


def test_expand_explicit_file_is_never_ignored(project: Path) -> None:
    """Test a named file is kept even if it matches an ignore pattern."""
    assert expand_patterns(["node_modules/lib/index.js"]) == ["node_modules/lib/index.js"]


def test_expand_deduplicates_in_argument_order(project: Path) -> None:
    """Test files listed twice appear once at their first position."""
    files = expand_patterns(["src/pkg/b.py", "src", "README.md"])
    assert files == ["src/pkg/b.py", "src/pkg/a.py", "README.md"]


def test_expand_missing_pattern_yields_nothing(project: Path) -> None:
    """Test a pattern without matches is skipped."""
    assert expand_patterns(["nothing/*.rs"]) == []


def test_expand_with_custom_ignore(project: Path) -> None:
    """Test caller-supplied ignore patterns replace the defaults."""
    files = expand_patterns(["src"], ["**/b.py"])
    assert "src/pkg/b.py" not in files
    assert "src/pkg/__pycache__/a.cpython-312.pyc" in files
