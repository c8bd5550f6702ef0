"""Line-based block scanner turning answer markdown into document nodes.

Supported subset: ``##``/``###`` headings, ``* `` bullet lists, ``1. `` numbered
lists, triple-backtick fenced code with an optional language tag, and
paragraphs. Anything else is treated as paragraph text, so malformed model
output degrades instead of failing.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from .inline import parse_inline
from .types import (
    BlockNode,
    CodeBlock,
    Document,
    Heading,
    OrderedList,
    Paragraph,
    UnorderedList,
)

CODE_FENCE = "```"
ORDERED_ITEM_PATTERN = re.compile(r"^(\d+)\. (.*)")


@dataclass
class _ScanState:
    """Accumulator threaded through one pass over the lines."""

    blocks: List[BlockNode] = field(default_factory=list)
    in_code_block: bool = False
    code_lang: str = ""
    code_lines: List[str] = field(default_factory=list)
    pending_unordered: List[str] = field(default_factory=list)
    pending_ordered: List[str] = field(default_factory=list)

    def flush_unordered(self) -> None:
        if self.pending_unordered:
            items = tuple(parse_inline(item) for item in self.pending_unordered)
            self.blocks.append(UnorderedList(items))
            self.pending_unordered = []

    def flush_ordered(self) -> None:
        if self.pending_ordered:
            items = tuple(parse_inline(item) for item in self.pending_ordered)
            self.blocks.append(OrderedList(items))
            self.pending_ordered = []

    def flush_lists(self) -> None:
        # At most one of the two buffers is ever non-empty.
        self.flush_unordered()
        self.flush_ordered()

    def open_code(self, language: str) -> None:
        self.flush_lists()
        self.in_code_block = True
        self.code_lang = language

    def close_code(self) -> None:
        language: Optional[str] = self.code_lang or None
        self.blocks.append(CodeBlock(language=language, lines=tuple(self.code_lines)))
        self.in_code_block = False
        self.code_lang = ""
        self.code_lines = []


def _scan_line(state: _ScanState, line: str) -> None:
    """Apply the first matching rule for one line."""
    stripped = line.strip()

    if stripped.startswith(CODE_FENCE):
        if state.in_code_block:
            state.close_code()
        else:
            state.open_code(stripped[len(CODE_FENCE):].strip())
        return

    if state.in_code_block:
        # Code keeps its original indentation.
        state.code_lines.append(line)
        return

    # "### " must be tested before "## ".
    if stripped.startswith("### "):
        state.flush_lists()
        state.blocks.append(Heading(level=3, content=parse_inline(stripped[4:])))
        return

    if stripped.startswith("## "):
        state.flush_lists()
        state.blocks.append(Heading(level=2, content=parse_inline(stripped[3:])))
        return

    if stripped.startswith("* "):
        state.flush_ordered()
        state.pending_unordered.append(stripped[2:])
        return

    ordered_match = ORDERED_ITEM_PATTERN.match(stripped)
    if ordered_match:
        state.flush_unordered()
        state.pending_ordered.append(ordered_match.group(2))
        return

    state.flush_lists()
    if stripped:
        state.blocks.append(Paragraph(parse_inline(line)))


def parse_document(markdown: str) -> Document:
    """Parse answer text into an ordered tuple of block nodes.

    Total over any string: blank lines are dropped, list lines of one kind are
    aggregated into a single list node, and a code fence left open at the end
    still emits the lines collected so far.
    """
    state = _ScanState()
    for line in markdown.split("\n"):
        _scan_line(state, line)

    state.flush_lists()
    if state.in_code_block:
        state.close_code()
    return tuple(state.blocks)
