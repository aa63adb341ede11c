"""Text normalization for Sinhala and Latin plain text.

normalize_text() keeps the text suitable for offset computation: every later
stage (sentence tokenizer, chunker, context expander) works on its output.
Stop-word filtering changes offsets, so it lives in remove_stopwords() and is
applied only on explicit request.
"""

import re
import unicodedata

BYTE_ORDER_MARK = "\ufeff"

# Closed set of common Sinhala particles and pronouns.
SINHALA_STOPWORDS = frozenset(
    [
        "මම",
        "ඔබ",
        "ඔහු",
        "ඇය",
        "අපි",
        "ඔවුන්",
        "මේ",
        "මෙය",
        "එය",
        "එම",
        "සහ",
        "හා",
        "ද",
        "වැනි",
        "අතර",
        "තවත්",
        "ඉතා",
        "පමණක්",
        "නමුත්",
        "එහෙයින්",
    ]
)

_LATIN_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_DOUBLE_QUOTES = re.compile(r"[\u201c\u201d\u201e\u201f\u00ab\u00bb]")
_SINGLE_QUOTES = re.compile(r"[\u2018\u2019\u201a\u201b]")
_DASHES = re.compile(r"[\u2013\u2014]")
_WHITESPACE = re.compile(r"\s+")
_WORD_PUNCTUATION = ".?!,'\""


def normalize_text(text: str, *, filter_stopwords: bool = False) -> str:
    """Canonicalize text: NFC, no BOM, plain punctuation, single spaces.

    Idempotent: normalize_text(normalize_text(x)) == normalize_text(x).
    """
    normalized = unicodedata.normalize("NFC", text).lstrip(BYTE_ORDER_MARK)

    # Latin diacritics go away; Sinhala vowel signs are outside this block.
    normalized = unicodedata.normalize("NFD", normalized)
    normalized = _LATIN_COMBINING_MARKS.sub("", normalized)
    normalized = unicodedata.normalize("NFC", normalized)

    normalized = _DOUBLE_QUOTES.sub('"', normalized)
    normalized = _SINGLE_QUOTES.sub("'", normalized)
    normalized = _DASHES.sub("-", normalized)
    normalized = _WHITESPACE.sub(" ", normalized).strip()
    # A BOM hidden behind leading whitespace surfaces only after the trim.
    normalized = normalized.lstrip(BYTE_ORDER_MARK + " ")

    if filter_stopwords:
        normalized = remove_stopwords(normalized)
    return normalized


def remove_stopwords(text: str, stopwords: frozenset[str] = SINHALA_STOPWORDS) -> str:
    """Drop whitespace-separated tokens whose bare form is a stop word."""
    words = text.split()
    kept = [w for w in words if w.strip(_WORD_PUNCTUATION) not in stopwords]
    return " ".join(kept)
