"""Repository ports."""

from sentrag.application.ports.repositories.chunk_repository import ChunkRepository
from sentrag.application.ports.repositories.document_repository import (
    DocumentRepository,
)

__all__ = [
    "ChunkRepository",
    "DocumentRepository",
]
