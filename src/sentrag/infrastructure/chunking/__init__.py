"""Chunking strategies."""

from sentrag.infrastructure.chunking.sentence_chunker import SentenceChunker, chunk_text

__all__ = ["SentenceChunker", "chunk_text"]
