"""Context expansion around a retrieved snippet."""

ELLIPSIS = "..."


def expand_context(
    content: str,
    start: int,
    end: int,
    context_size: int = 300,
    marker: str = ELLIPSIS,
) -> str:
    """Widen content[start:end] by context_size characters on both sides.

    The marker is added on each side where the window stops short of the
    document boundary.
    """
    context_size = max(0, context_size)
    expanded_start = max(0, start - context_size)
    expanded_end = min(len(content), end + context_size)

    expanded = content[expanded_start:expanded_end]
    if expanded_start > 0:
        expanded = marker + expanded
    if expanded_end < len(content):
        expanded = expanded + marker
    return expanded
