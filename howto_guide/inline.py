"""Inline span parsing for a single line of answer text."""
from __future__ import annotations

import re
from typing import List

from .types import Bold, InlineCode, InlineContent, InlineSpan, Italic, PlainText

# Alternatives are tried in this order at each position: bold, underscore
# italic, star italic, code. Matched content is not scanned again.
INLINE_PATTERN = re.compile(
    r"\*\*(?P<bold>.*?)\*\*"
    r"|_(?P<italic_underscore>[^_]+?)_"
    r"|\*(?P<italic_star>[^*]+?)\*"
    r"|`(?P<code>[^`]+?)`"
)


def _plain(text: str) -> InlineContent:
    return (PlainText(text),) if text else ()


def _span_for(match: re.Match[str]) -> InlineSpan:
    """Build the span for whichever alternative matched."""
    kind = match.lastgroup
    content = match.group(kind or 0)
    if kind == "bold":
        return Bold(_plain(content))
    if kind == "code":
        return InlineCode(content)
    return Italic(_plain(content))


def parse_inline(line: str) -> InlineContent:
    """Split one line into plain, bold, italic and inline-code spans.

    Unterminated or stray delimiters are kept as plain text, so this never
    raises on model output.
    """
    spans: List[InlineSpan] = []
    position = 0
    for match in INLINE_PATTERN.finditer(line):
        if match.start() > position:
            spans.append(PlainText(line[position:match.start()]))
        spans.append(_span_for(match))
        position = match.end()
    if position < len(line):
        spans.append(PlainText(line[position:]))
    return tuple(spans)
