from __future__ import annotations

import re
from typing import Iterator, List, Tuple

from .models import StructuralNode

FENCED_CODE_RE = re.compile(
    r"^[ ]{0,3}(?P<fence>`{3,}|~{3,})[^\n]*\n(?:.*?\n)??[ ]{0,3}(?P=fence)[`~]*[ \t]*$",
    re.MULTILINE | re.DOTALL,
)
FENCE_OPEN_RE = re.compile(r"^[ ]{0,3}(`{3,}|~{3,})", re.MULTILINE)
INLINE_CODE_RE = re.compile(r"(`+)(?!`)(.+?)(?<!`)\1(?!`)")
# Only a comment that opens a line may run unterminated to the end of the text.
HTML_COMMENT_RE = re.compile(r"<!--.*?-->|^[ ]{0,3}<!--.*\Z", re.MULTILINE | re.DOTALL)
PERCENT_COMMENT_RE = re.compile(r"%%.*?(?:%%|\Z)", re.DOTALL)
WIKI_LINK_RE = re.compile(r"!?\[\[[^\]\n]+\]\]")
MARKDOWN_LINK_RE = re.compile(r"!?\[[^\]\n]*\]\([^)\n]*\)")
AUTOLINK_RE = re.compile(r"<(?:https?|ftp|mailto):[^>\s]+>")
BARE_URL_RE = re.compile(r"\b(?:https?://|www\.)[^\s<>()\[\]]+")
ATX_HEADING_RE = re.compile(r"^[ ]{0,3}#{1,6}(?:[ \t][^\n]*)?$", re.MULTILINE)

# Checked outside fenced and inline code only.
_INLINE_PATTERNS: Tuple[Tuple[str, re.Pattern[str]], ...] = (
    ("html-comment", HTML_COMMENT_RE),
    ("comment", PERCENT_COMMENT_RE),
    ("wiki-link", WIKI_LINK_RE),
    ("link", MARKDOWN_LINK_RE),
    ("autolink-url", AUTOLINK_RE),
    ("url", BARE_URL_RE),
    ("heading", ATX_HEADING_RE),
)


def iter_markdown_nodes(text: str) -> Iterator[StructuralNode]:
    """
    Yield structural nodes for the parts of a Markdown document that are not prose.

    Node offsets are half-open like an editor syntax tree: ``end`` is the
    offset just past the node. Nodes are yielded in ascending start order.
    """
    nodes: List[StructuralNode] = []
    code_blocks = _fenced_code_blocks(text)
    nodes.extend(StructuralNode("fenced-code", start, end) for start, end in code_blocks)

    inline_code = list(_iter_outside(INLINE_CODE_RE, text, code_blocks))
    nodes.extend(StructuralNode("inline-code", start, end) for start, end in inline_code)

    code = code_blocks + inline_code
    for kind, pattern in _INLINE_PATTERNS:
        nodes.extend(
            StructuralNode(kind, start, end) for start, end in _iter_outside(pattern, text, code)
        )

    nodes.sort(key=lambda node: (node.start, node.end))
    yield from nodes


def _iter_outside(
    pattern: re.Pattern[str], text: str, skip: List[Tuple[int, int]]
) -> Iterator[Tuple[int, int]]:
    """Yield match ranges of ``pattern`` whose start is not inside a ``skip`` range."""
    pos = 0
    while pos <= len(text):
        match = pattern.search(text, pos)
        if match is None:
            return
        if _inside(match.start(), skip):
            # A match opened inside code may hide a real one further on.
            pos = match.start() + 1
            continue
        yield match.start(), match.end()
        pos = max(match.end(), match.start() + 1)


def _fenced_code_blocks(text: str) -> List[Tuple[int, int]]:
    blocks: List[Tuple[int, int]] = []
    pos = 0
    while True:
        opening = FENCE_OPEN_RE.search(text, pos)
        if opening is None:
            break
        closed = FENCED_CODE_RE.match(text, opening.start())
        if closed is not None:
            blocks.append((closed.start(), closed.end()))
            pos = closed.end()
        else:
            # An unterminated fence runs to the end of the document.
            blocks.append((opening.start(), len(text)))
            break
    return blocks


def _inside(offset: int, ranges: List[Tuple[int, int]]) -> bool:
    return any(start <= offset < end for start, end in ranges)
