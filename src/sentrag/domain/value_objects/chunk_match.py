"""Vector store match for a single chunk."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class ChunkMatch:
    """Chunk returned by similarity search, ordered by the store."""

    chunk_id: UUID
    document_id: UUID
    content: str
    start: int
    end: int
    similarity: float | None = None
