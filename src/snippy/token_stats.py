#!/usr/bin/env python3
"""
Per-file token statistics for copy mode.

Token counts use the tiktoken encoding of the target model. They are
reported as a directory tree, each directory carrying the sum of the
files below it:

    Overall (120 tokens)
    ┣━━ 📂 src (100 tokens)
    ┃   ┣━━ main.py (60 tokens)
    ┃   ┗━━ util.py (40 tokens)
    ┗━━ README.md (20 tokens)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from snippy.errors import TokenizerUnavailable

logger = logging.getLogger(__name__)

DEFAULT_MODEL: str = "gpt-4o"

TokenCounter = Callable[[str], int]

_BRANCH = "┣━━"
_LAST_BRANCH = "┗━━"
_PIPE = "┃   "
_SPACE = "    "


def load_token_counter(model: str = DEFAULT_MODEL) -> TokenCounter:
    """
    Build a token counter for a model name such as "gpt-4o".

    Args:
        model: Model name known to tiktoken.

    Returns:
        A function returning the number of tokens in a text. Special
        token markers in the text are counted as ordinary text.

    Raises:
        TokenizerUnavailable: If tiktoken has no encoding for the model.
    """
    import tiktoken

    try:
        encoding = tiktoken.encoding_for_model(model)
    except KeyError:
        raise TokenizerUnavailable(model) from None
    logger.debug("Counting tokens with %s for %s", encoding.name, model)

    def count(text: str) -> int:
        return len(encoding.encode_ordinary(text))

    return count


@dataclass
class TokenNode:
    """A file (tokens set) or directory (children set) in the stats tree."""

    name: str
    tokens: int | None = None
    children: dict[str, TokenNode] = field(default_factory=dict)

    def total(self) -> int:
        if self.tokens is not None:
            return self.tokens
        return sum(child.total() for child in self.children.values())


def build_token_tree(counts: Mapping[str, int]) -> TokenNode:
    """Arrange {path: tokens} into a tree keyed by path component."""
    root = TokenNode(name="")
    for path, tokens in counts.items():
        parts = [part for part in path.replace("\\", "/").split("/") if part]
        node = root
        for part in parts[:-1]:
            node = node.children.setdefault(part, TokenNode(name=part))
        leaf = parts[-1] if parts else path
        node.children[leaf] = TokenNode(name=leaf, tokens=tokens)
    return root


def _render_children(node: TokenNode, indent: str, out: list[str]) -> None:
    children = sorted(node.children.values(), key=lambda child: child.name)
    for i, child in enumerate(children):
        last = i == len(children) - 1
        branch = _LAST_BRANCH if last else _BRANCH
        if child.tokens is not None:
            out.append(f"{indent}{branch} {child.name} ({child.tokens} tokens)")
        else:
            out.append(f"{indent}{branch} 📂 {child.name} ({child.total()} tokens)")
            _render_children(child, indent + (_SPACE if last else _PIPE), out)


def render_token_tree(counts: Mapping[str, int]) -> list[str]:
    """Render token counts as report lines, starting with the overall total."""
    root = build_token_tree(counts)
    lines = [f"Overall ({root.total()} tokens)"]
    _render_children(root, "", lines)
    return lines


def report_token_stats(counts: Mapping[str, int]) -> None:
    """Log the token tree at INFO level."""
    for line in render_token_tree(counts):
        logger.info(line)
