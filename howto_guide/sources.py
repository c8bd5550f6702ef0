"""Citation source extraction and deduplication."""
from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple

from .types import Source


def dedupe_sources(sources: Iterable[Source]) -> Tuple[Source, ...]:
    """Keep the first source seen for each uri, in first-seen order.

    Later duplicates are dropped even when their title differs.
    """
    seen_uris: set[str] = set()
    unique: List[Source] = []
    for source in sources:
        if source.uri in seen_uris:
            continue
        seen_uris.add(source.uri)
        unique.append(source)
    return tuple(unique)


def _web_source(chunk: Any) -> Optional[Source]:
    """Read ``chunk.web.{uri,title}``; chunks without a usable web record yield None."""
    web = getattr(chunk, "web", None)
    if web is None:
        return None
    uri = getattr(web, "uri", None) or ""
    title = getattr(web, "title", None) or ""
    if not uri or not title:
        return None
    return Source(uri=str(uri), title=str(title))


def sources_from_grounding(chunks: Optional[Iterable[Any]]) -> Tuple[Source, ...]:
    """Build the unique source list from Gemini grounding chunks."""
    if not chunks:
        return ()
    sources = (_web_source(chunk) for chunk in chunks)
    return dedupe_sources(source for source in sources if source is not None)
