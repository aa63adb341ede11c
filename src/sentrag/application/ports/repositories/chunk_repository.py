"""Chunk repository port, including vector similarity search."""

from typing import Protocol
from uuid import UUID

from sentrag.domain.entities import Chunk
from sentrag.domain.value_objects import ChunkMatch


class ChunkRepository(Protocol):
    """Port for chunk persistence."""

    async def create_batch(self, chunks: list[Chunk]) -> list[Chunk]: ...

    async def delete_by_document_id(self, document_id: UUID) -> None: ...

    async def get_by_id(self, chunk_id: UUID) -> Chunk | None: ...

    async def get_by_document_id(self, document_id: UUID) -> list[Chunk]: ...

    async def search(
        self,
        query_embedding: list[float],
        match_threshold: float,
        match_count: int,
    ) -> list[ChunkMatch]: ...
