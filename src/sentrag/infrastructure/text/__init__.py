"""Text pipeline: normalization, sentence splitting, highlighting, context."""

from sentrag.infrastructure.text.context import ELLIPSIS, expand_context
from sentrag.infrastructure.text.highlight import highlight_markup, highlight_segments
from sentrag.infrastructure.text.normalizer import (
    SINHALA_STOPWORDS,
    normalize_text,
    remove_stopwords,
)
from sentrag.infrastructure.text.sentence_tokenizer import (
    SENTENCE_TERMINATORS,
    split_sentences,
    tokenize_sentences,
)

__all__ = [
    "ELLIPSIS",
    "SENTENCE_TERMINATORS",
    "SINHALA_STOPWORDS",
    "expand_context",
    "highlight_markup",
    "highlight_segments",
    "normalize_text",
    "remove_stopwords",
    "split_sentences",
    "tokenize_sentences",
]
