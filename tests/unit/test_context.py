"""Unit tests for context expansion and highlighting."""

from sentrag.infrastructure.text import expand_context, highlight_markup, highlight_segments

DIGITS = "0123456789"


def test_expand_adds_markers_when_window_is_inside() -> None:
    """Both sides get an ellipsis when the window stops short of the edges."""
    assert expand_context(DIGITS, 4, 6, 2) == "...234567..."


def test_expand_without_markers_at_document_edges() -> None:
    """No marker is added on a side that reaches the document boundary."""
    assert expand_context(DIGITS, 1, 9, 5) == DIGITS
    assert expand_context(DIGITS, 0, 3, 2) == "01234..."
    assert expand_context(DIGITS, 7, 10, 2) == "...56789"


def test_expand_zero_and_negative_context() -> None:
    """A zero window returns the snippet itself; negative sizes act as zero."""
    assert expand_context(DIGITS, 3, 5, 0) == "...34..."
    assert expand_context(DIGITS, 3, 5, -10) == "...34..."


def test_expand_custom_marker() -> None:
    """The marker is configurable."""
    assert expand_context(DIGITS, 4, 6, 1, marker="~") == "~3456~"


def test_highlight_segments_case_insensitive() -> None:
    """Every occurrence of a query term is flagged, regardless of case."""
    assert highlight_segments("Hello World hello", "hello") == [
        ("Hello", True),
        (" World ", False),
        ("hello", True),
    ]


def test_highlight_prefers_longer_terms() -> None:
    """A longer term is matched before its own prefix."""
    assert highlight_segments("database", "data database") == [("database", True)]


def test_highlight_escapes_regex_characters() -> None:
    """Query terms are matched literally."""
    assert highlight_segments("axb a.b", "a.b") == [("axb ", False), ("a.b", True)]


def test_highlight_without_terms_or_text() -> None:
    """An empty query leaves the text unmarked; empty text has no segments."""
    assert highlight_segments("abc", "   ") == [("abc", False)]
    assert highlight_segments("", "abc") == []


def test_highlight_markup_escapes_html() -> None:
    """Markup wraps matches in mark tags and escapes everything else."""
    assert highlight_markup("<b>cat</b>", "cat") == "&lt;b&gt;<mark>cat</mark>&lt;/b&gt;"
