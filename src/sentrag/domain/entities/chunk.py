"""Chunk entity - slice of a document's normalized text with embedding."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Chunk:
    """Chunk - offsets index the normalized form of the owning document."""

    id: UUID
    document_id: UUID
    content: str
    start_offset: int
    end_offset: int
    embedding: list[float] | None = None
