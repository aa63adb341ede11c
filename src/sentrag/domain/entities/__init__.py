"""Domain entities."""

from sentrag.domain.entities.chunk import Chunk
from sentrag.domain.entities.document import Document

__all__ = [
    "Chunk",
    "Document",
]
