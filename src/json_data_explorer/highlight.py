"""Split row text into plain and highlighted spans for search rendering.

Renderers style each ``TextSpan`` themselves; this module only decides where
the case-insensitive occurrences of the current search term are.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["TextSpan", "highlight_spans"]


@dataclass(frozen=True, slots=True)
class TextSpan:
    """A run of text that is either plain or a search-term occurrence."""

    text: str
    is_highlighted: bool = False


def highlight_spans(text: str, query: str) -> list[TextSpan]:
    """Split ``text`` around every case-insensitive occurrence of ``query``.

    Occurrences are found left to right and never overlap. The original
    casing of ``text`` is preserved in the returned spans.

    Args:
        text:  The text of a key or value as displayed.
        query: The search term. An empty query highlights nothing.

    Returns:
        Spans whose concatenated text equals ``text``. Empty for empty text.
    """
    if not text:
        return []
    if not query:
        return [TextSpan(text)]

    spans: list[TextSpan] = []
    start = 0
    # Match on the original text; lowercasing can change string length.
    for match in re.finditer(re.escape(query), text, re.IGNORECASE):
        if match.start() > start:
            spans.append(TextSpan(text[start : match.start()]))
        spans.append(TextSpan(match.group(), is_highlighted=True))
        start = match.end()

    if start < len(text):
        spans.append(TextSpan(text[start:]))
    return spans
