"""Query-term highlighting for snippet text."""

import html
import re


def highlight_segments(text: str, query: str) -> list[tuple[str, bool]]:
    """Split text into (segment, is_match) pairs for every query term occurrence."""
    terms = [re.escape(t) for t in query.split() if t]
    if not text or not terms:
        return [(text, False)] if text else []
    # Longer terms first so a term is not shadowed by its own prefix.
    terms.sort(key=len, reverse=True)
    pattern = re.compile("(" + "|".join(terms) + ")", re.IGNORECASE)
    parts = pattern.split(text)
    return [(part, i % 2 == 1) for i, part in enumerate(parts) if part]


def highlight_markup(
    text: str,
    query: str,
    open_tag: str = "<mark>",
    close_tag: str = "</mark>",
) -> str:
    """HTML-escaped text with query terms wrapped in mark tags."""
    return "".join(
        f"{open_tag}{html.escape(part)}{close_tag}" if matched else html.escape(part)
        for part, matched in highlight_segments(text, query)
    )
