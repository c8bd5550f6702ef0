"""Prompt template for how-to questions."""
from __future__ import annotations

HOW_TO_PREFIX = "How to "


def build_howto_prompt(query: str) -> str:
    """Prefix the user's question with the fixed "How to" template."""
    return f"{HOW_TO_PREFIX}{query}"
