"""Domain value objects."""

from sentrag.domain.value_objects.chunk_match import ChunkMatch
from sentrag.domain.value_objects.text_span import Sentence, TextChunk

__all__ = [
    "ChunkMatch",
    "Sentence",
    "TextChunk",
]
