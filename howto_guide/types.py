"""Shared type declarations for parsed answers, sources and query state."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple, Union


# ──────────────────── Inline spans ────────────────────


@dataclass(frozen=True)
class PlainText:
    """Literal text, including any unmatched delimiter characters."""

    text: str


@dataclass(frozen=True)
class Bold:
    """Text between ``**`` delimiters."""

    children: Tuple[InlineSpan, ...] = ()


@dataclass(frozen=True)
class Italic:
    """Text between ``_`` or ``*`` delimiters."""

    children: Tuple[InlineSpan, ...] = ()


@dataclass(frozen=True)
class InlineCode:
    """Text between backticks, never re-parsed."""

    text: str


InlineSpan = Union[PlainText, Bold, Italic, InlineCode]
InlineContent = Tuple[InlineSpan, ...]


# ──────────────────── Block nodes ────────────────────


@dataclass(frozen=True)
class Heading:
    level: Literal[2, 3]
    content: InlineContent = ()


@dataclass(frozen=True)
class UnorderedList:
    items: Tuple[InlineContent, ...] = ()


@dataclass(frozen=True)
class OrderedList:
    """Numbered list; items are always renumbered from 1 when rendered."""

    items: Tuple[InlineContent, ...] = ()


@dataclass(frozen=True)
class CodeBlock:
    """Fenced code; lines are kept verbatim, indentation included."""

    language: Optional[str] = None
    lines: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Paragraph:
    content: InlineContent = ()


BlockNode = Union[Heading, UnorderedList, OrderedList, CodeBlock, Paragraph]
Document = Tuple[BlockNode, ...]


# ──────────────────── Sources and state ────────────────────


@dataclass(frozen=True)
class Source:
    """A web citation attached to an answer; ``uri`` is its identity."""

    uri: str
    title: str


@dataclass(frozen=True)
class AnswerResult:
    """Answer text and unique sources returned by the answer service."""

    text: str
    sources: Tuple[Source, ...] = ()


@dataclass
class QueryState:
    """Mutable page state owned by the query controller."""

    query: str = ""
    answer_text: str = ""
    sources: List[Source] = field(default_factory=list)
    is_loading: bool = False
    error: Optional[str] = None
