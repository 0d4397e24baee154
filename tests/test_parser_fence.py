#!/usr/bin/env python3
"""Tests for fence line recognition."""
from snippy.parser_fence import Fence, is_fence_close, match_fence_open


def test_match_fence_open_with_hint() -> None:
    """Test an opening fence with a language hint."""
    assert match_fence_open("```python") == Fence("`", 3, "python")


def test_match_fence_open_variants() -> None:
    """Test bare, long, tilde and indented opening fences."""
    assert match_fence_open("```") == Fence("`", 3, None)
    assert match_fence_open("`````js") == Fence("`", 5, "js")
    assert match_fence_open("~~~") == Fence("~", 3, None)
    assert match_fence_open("   ``` rust") == Fence("`", 3, "rust")
    assert match_fence_open("```python title=\"x\"") == Fence("`", 3, "python")


def test_match_fence_open_rejects_non_fences() -> None:
    """Test inline code and short runs are not fences."""
    assert match_fence_open("``x``") is None
    assert match_fence_open("text ```") is None
    assert match_fence_open("``` `inline` ```") is None


def test_is_fence_close() -> None:
    """Test closing fence matching rules."""
    fence = Fence("`", 3, "python")
    assert is_fence_close("```", fence)
    assert is_fence_close("````  ", fence)
    assert is_fence_close("```\r", fence)
    assert not is_fence_close("```python", fence)
    assert not is_fence_close("~~~", fence)
    assert not is_fence_close("``", fence)
    assert not is_fence_close("````", Fence("`", 5, None))
