"""Sentence-aware sliding-window chunker."""

from sentrag.application.dto.chunking_config import ChunkingConfig
from sentrag.domain.value_objects import TextChunk
from sentrag.infrastructure.text import normalize_text, split_sentences


def chunk_text(text: str, chunk_size: int = 700, overlap: int = 100) -> list[TextChunk]:
    """Split text into chunks that snap to sentence boundaries.

    Offsets index normalize_text(text) and every chunk satisfies
    content == normalized[start:end]. A sentence longer than chunk_size is
    kept whole, so such a chunk may exceed chunk_size. Consecutive chunks
    share at most `overlap` characters taken from the tail of the previous one.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if overlap < 0 or overlap >= chunk_size:
        raise ValueError(f"overlap must be in [0, chunk_size), got {overlap}")

    normalized = normalize_text(text)
    if not normalized:
        return []
    if len(normalized) <= chunk_size:
        return [TextChunk(content=normalized, start=0, end=len(normalized))]

    chunks: list[TextChunk] = []
    current = ""
    chunk_start = 0
    current_end = 0

    for sentence in split_sentences(normalized):
        if current and len(current) + len(sentence.text) + 1 > chunk_size:
            chunks.append(TextChunk(content=current, start=chunk_start, end=current_end))
            overlap_text = current[-overlap:].lstrip() if overlap > 0 else ""
            chunk_start = current_end - len(overlap_text)
            current = f"{overlap_text} {sentence.text}" if overlap_text else sentence.text
            if not overlap_text:
                chunk_start = sentence.start
        else:
            if not current:
                chunk_start = sentence.start
            current = f"{current} {sentence.text}" if current else sentence.text
        current_end = sentence.end

    if current:
        chunks.append(TextChunk(content=current, start=chunk_start, end=current_end))
    return chunks


class SentenceChunker:
    """Chunker port implementation backed by chunk_text."""

    def chunk(self, text: str, config: ChunkingConfig) -> list[TextChunk]:
        """Split text into sentence-aligned chunks with overlap."""
        return chunk_text(text, config.chunk_size, config.chunk_overlap)
