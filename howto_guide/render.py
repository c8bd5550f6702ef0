"""Projection of parsed answers onto HTML (Streamlit page) and plain text (terminal)."""
from __future__ import annotations

import html
from typing import Iterable, List, Sequence, assert_never

from .types import (
    BlockNode,
    Bold,
    CodeBlock,
    Heading,
    InlineCode,
    InlineContent,
    Italic,
    OrderedList,
    Paragraph,
    PlainText,
    Source,
    UnorderedList,
)


# ──────────────────── HTML ────────────────────


def render_inline_html(spans: InlineContent) -> str:
    """Render inline spans as escaped HTML."""
    parts: List[str] = []
    for span in spans:
        if isinstance(span, PlainText):
            parts.append(html.escape(span.text))
        elif isinstance(span, Bold):
            parts.append(f'<strong class="answer-strong">{render_inline_html(span.children)}</strong>')
        elif isinstance(span, Italic):
            parts.append(f"<em>{render_inline_html(span.children)}</em>")
        elif isinstance(span, InlineCode):
            parts.append(f'<code class="answer-code">{html.escape(span.text)}</code>')
        else:
            assert_never(span)
    return "".join(parts)


def _list_items_html(items: Iterable[InlineContent]) -> str:
    return "".join(f"<li>{render_inline_html(item)}</li>" for item in items)


def render_block_html(block: BlockNode) -> str:
    """Render one block node as an HTML element."""
    if isinstance(block, Heading):
        return f'<h{block.level} class="answer-h{block.level}">{render_inline_html(block.content)}</h{block.level}>'
    if isinstance(block, UnorderedList):
        return f'<ul class="answer-ul">{_list_items_html(block.items)}</ul>'
    if isinstance(block, OrderedList):
        return f'<ol class="answer-ol">{_list_items_html(block.items)}</ol>'
    if isinstance(block, CodeBlock):
        code = html.escape("\n".join(block.lines))
        lang_class = f' class="language-{html.escape(block.language, quote=True)}"' if block.language else ""
        return f'<pre class="answer-pre"><code{lang_class}>{code}</code></pre>'
    if isinstance(block, Paragraph):
        return f'<p class="answer-p">{render_inline_html(block.content)}</p>'
    assert_never(block)


def render_html(blocks: Sequence[BlockNode]) -> str:
    """Render a parsed document as an HTML fragment."""
    return "\n".join(render_block_html(block) for block in blocks)


def render_sources_html(sources: Sequence[Source]) -> str:
    """Render the sources section, or nothing when there are no sources."""
    if not sources:
        return ""
    items = "".join(
        f'<li class="source-item">🔗 <a href="{html.escape(source.uri, quote=True)}" '
        f'target="_blank" rel="noopener noreferrer" title="{html.escape(source.uri, quote=True)}">'
        f"{html.escape(source.title)}</a></li>"
        for source in sources
    )
    return f'<div class="sources"><h3 class="sources-title">Sources</h3><ul class="sources-list">{items}</ul></div>'


# ──────────────────── Plain text ────────────────────


def render_inline_text(spans: InlineContent) -> str:
    """Render inline spans for a terminal; code keeps its backticks."""
    parts: List[str] = []
    for span in spans:
        if isinstance(span, PlainText):
            parts.append(span.text)
        elif isinstance(span, (Bold, Italic)):
            parts.append(render_inline_text(span.children))
        elif isinstance(span, InlineCode):
            parts.append(f"`{span.text}`")
        else:
            assert_never(span)
    return "".join(parts)


def render_block_text(block: BlockNode) -> str:
    """Render one block node as terminal text."""
    if isinstance(block, Heading):
        title = render_inline_text(block.content)
        underline = "=" if block.level == 2 else "-"
        return f"{title}\n{underline * len(title)}"
    if isinstance(block, UnorderedList):
        return "\n".join(f"  • {render_inline_text(item)}" for item in block.items)
    if isinstance(block, OrderedList):
        return "\n".join(
            f"  {number}. {render_inline_text(item)}" for number, item in enumerate(block.items, start=1)
        )
    if isinstance(block, CodeBlock):
        lines = [f"    [{block.language}]"] if block.language else []
        lines.extend(f"    {line}" for line in block.lines)
        return "\n".join(lines)
    if isinstance(block, Paragraph):
        return render_inline_text(block.content).strip()
    assert_never(block)


def render_text(blocks: Sequence[BlockNode]) -> str:
    """Render a parsed document as plain text with blank lines between blocks."""
    return "\n\n".join(render_block_text(block) for block in blocks)


def render_sources_text(sources: Sequence[Source]) -> str:
    """Render the sources section as a numbered list."""
    if not sources:
        return ""
    lines = ["Sources:"]
    for idx, source in enumerate(sources, start=1):
        lines.append(f"[{idx}] {source.title}")
        lines.append(f"    {source.uri}")
    return "\n".join(lines)
