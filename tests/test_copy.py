#!/usr/bin/env python3
"""Tests for copy mode."""
import logging
from pathlib import Path

import pytest

from conftest import BrokenClipboard, FakeClipboard
from snippy.copy import copy_files_to_clipboard, display_path, read_source_files
from snippy.errors import ClipboardUnavailable, NoInputFiles
from snippy.format_options import FormatOptions
from snippy.parser import parse


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create two source files and chdir into their directory."""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("print('hi')\n")
    (tmp_path / "src" / "util.rs").write_text("fn util() {}\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_copy_writes_header_and_sections(project: Path) -> None:
    """Test the clipboard receives the header followed by file sections."""
    clipboard = FakeClipboard()
    text = copy_files_to_clipboard(["src/main.py", "src/util.rs"], clipboard=clipboard)
    assert clipboard.written == [text]
    assert text == (
        "# Relevant Code\n"
        "### src/main.py\n```python\nprint('hi')\n```\n"
        "\n"
        "### src/util.rs\n```rust\nfn util() {}\n```\n"
    )


def test_copy_without_header(project: Path) -> None:
    """Test first_line=None omits the header line."""
    clipboard = FakeClipboard()
    text = copy_files_to_clipboard(["src/main.py"], first_line=None, clipboard=clipboard)
    assert text.startswith("### src/main.py\n")


def test_copy_output_parses_back(project: Path) -> None:
    """Test copied text parses back into the same files."""
    clipboard = FakeClipboard()
    text = copy_files_to_clipboard(["src"], clipboard=clipboard)
    blocks = {b.declared_path: b.body for b in parse(text)}
    assert blocks == {"src/main.py": "print('hi')", "src/util.rs": "fn util() {}"}


def test_copy_uses_relative_paths_for_absolute_arguments(project: Path) -> None:
    """Test absolute paths inside the working directory become relative."""
    clipboard = FakeClipboard()
    text = copy_files_to_clipboard([str(project / "src" / "main.py")], clipboard=clipboard)
    assert "### src/main.py\n" in text


def test_copy_applies_format_options(project: Path) -> None:
    """Test line numbering options reach the formatter."""
    clipboard = FakeClipboard()
    options = FormatOptions(line_number_start=1, line_prefix="| ")
    text = copy_files_to_clipboard(["src/main.py"], options, clipboard=clipboard)
    assert "1| print('hi')\n" in text


def test_copy_without_readable_files_raises(project: Path) -> None:
    """Test NoInputFiles when nothing could be read."""
    with pytest.raises(NoInputFiles):
        copy_files_to_clipboard(["missing/*.py"], clipboard=FakeClipboard())


def test_copy_clipboard_failure_propagates(project: Path) -> None:
    """Test clipboard write failures reach the caller."""
    with pytest.raises(ClipboardUnavailable):
        copy_files_to_clipboard(["src/main.py"], clipboard=BrokenClipboard())


def test_read_source_files_skips_undecodable(tmp_path: Path) -> None:
    """Test binary files are skipped with a warning."""
    good = tmp_path / "a.txt"
    bad = tmp_path / "b.bin"
    good.write_text("ok")
    bad.write_bytes(b"\xff\xfe\x00")
    sources = read_source_files([str(good), str(bad)], tmp_path)
    assert [s.path for s in sources] == ["a.txt"]


def test_display_path_outside_base(tmp_path: Path) -> None:
    """Test paths outside the base directory are kept as given."""
    base = tmp_path / "base"
    base.mkdir()
    assert display_path(str(tmp_path / "x.py"), base) == str(tmp_path / "x.py")


def test_display_path_keeps_symlink_name(project: Path) -> None:
    """Test a symlinked file is headed with the link path, not its target."""
    link = project / "alias.py"
    link.symlink_to(project / "src" / "main.py")
    assert display_path("alias.py", project) == "alias.py"
    assert display_path(str(link), project) == "alias.py"


def test_copy_xml_drops_header(project: Path) -> None:
    """Test XML output is written without the header line."""
    clipboard = FakeClipboard()
    text = copy_files_to_clipboard(
        ["src/main.py"], FormatOptions(xml=True), clipboard=clipboard
    )
    assert text == (
        "<files>\n"
        '<file path="src/main.py" type="python">\nprint(\'hi\')\n</file>\n'
        "</files>\n"
    )


def test_copy_reports_token_counts(
    project: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Test each formatted section is counted and reported as a tree."""
    counted = []

    def counter(text: str) -> int:
        counted.append(text)
        return 7

    with caplog.at_level(logging.INFO, logger="snippy.token_stats"):
        copy_files_to_clipboard(
            ["src/main.py"], clipboard=FakeClipboard(), token_counter=counter
        )
    assert counted == ["### src/main.py\n```python\nprint('hi')\n```\n"]
    messages = [r.getMessage() for r in caplog.records if r.name == "snippy.token_stats"]
    assert messages == [
        "Overall (7 tokens)",
        "┗━━ 📂 src (7 tokens)",
        "    ┗━━ main.py (7 tokens)",
    ]
