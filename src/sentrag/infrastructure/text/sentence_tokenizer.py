"""Sentence tokenizer with offsets into the normalized text."""

import re

from sentrag.domain.value_objects import Sentence
from sentrag.infrastructure.text.normalizer import normalize_text

# Period, question mark, exclamation mark, Sinhala kunddaliya, Devanagari danda.
SENTENCE_TERMINATORS = ".?!\u0df4\u0964"

_SENTENCE_BOUNDARY = re.compile(rf"(?<=[{re.escape(SENTENCE_TERMINATORS)}])\s+")


def split_sentences(normalized_text: str) -> list[Sentence]:
    """Split already-normalized text into sentences carrying their offsets.

    A boundary is a terminator followed by whitespace, so decimals ("3.14")
    and in-word dots stay inside their sentence.
    """
    sentences: list[Sentence] = []
    cursor = 0
    for match in _SENTENCE_BOUNDARY.finditer(normalized_text):
        _append_span(normalized_text, cursor, match.start(), sentences)
        cursor = match.end()
    _append_span(normalized_text, cursor, len(normalized_text), sentences)
    return sentences


def tokenize_sentences(text: str) -> list[str]:
    """Normalize text and return its sentences in source order."""
    return [s.text for s in split_sentences(normalize_text(text))]


def _append_span(text: str, start: int, end: int, out: list[Sentence]) -> None:
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    if start < end:
        out.append(Sentence(text=text[start:end], start=start, end=end))
