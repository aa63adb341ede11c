"""PostgreSQL chunk repository implementation with pgvector search."""

from uuid import UUID

from psycopg import AsyncConnection

from sentrag.domain.entities import Chunk
from sentrag.domain.value_objects import ChunkMatch

_SEARCH_SQL = """
    SELECT id, document_id, content, start_offset, end_offset,
           1 - (embedding <=> %(embedding)s::vector) AS similarity
    FROM chunk
    WHERE embedding IS NOT NULL
      AND 1 - (embedding <=> %(embedding)s::vector) > %(threshold)s
    ORDER BY embedding <=> %(embedding)s::vector, id
    LIMIT %(count)s
"""


class PostgresChunkRepository:
    """Chunk repository implementation with cosine similarity search."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create_batch(self, chunks: list[Chunk]) -> list[Chunk]:
        """Create chunks in batch."""
        if not chunks:
            return chunks
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO chunk (id, document_id, content, start_offset, end_offset, embedding) "
                "VALUES (%s, %s, %s, %s, %s, %s::vector)",
                [
                    (c.id, c.document_id, c.content, c.start_offset, c.end_offset, c.embedding)
                    for c in chunks
                ],
            )
        return chunks

    async def delete_by_document_id(self, document_id: UUID) -> None:
        """Delete all chunks for document."""
        await self._conn.execute("DELETE FROM chunk WHERE document_id = %s", (document_id,))

    async def get_by_id(self, chunk_id: UUID) -> Chunk | None:
        """Get chunk by id (without embedding)."""
        cur = await self._conn.execute(
            "SELECT id, document_id, content, start_offset, end_offset FROM chunk WHERE id = %s",
            (chunk_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Chunk(id=r[0], document_id=r[1], content=r[2], start_offset=r[3], end_offset=r[4])

    async def get_by_document_id(self, document_id: UUID) -> list[Chunk]:
        """Get chunks by document id in offset order."""
        cur = await self._conn.execute(
            "SELECT id, document_id, content, start_offset, end_offset FROM chunk "
            "WHERE document_id = %s ORDER BY start_offset, end_offset",
            (document_id,),
        )
        rows = await cur.fetchall()
        return [
            Chunk(id=r[0], document_id=r[1], content=r[2], start_offset=r[3], end_offset=r[4])
            for r in rows
        ]

    async def search(
        self,
        query_embedding: list[float],
        match_threshold: float,
        match_count: int,
    ) -> list[ChunkMatch]:
        """Chunks above the similarity threshold, most similar first."""
        cur = await self._conn.execute(
            _SEARCH_SQL,
            {"embedding": query_embedding, "threshold": match_threshold, "count": match_count},
        )
        rows = await cur.fetchall()
        return [
            ChunkMatch(
                chunk_id=r[0],
                document_id=r[1],
                content=r[2],
                start=r[3],
                end=r[4],
                similarity=float(r[5]) if r[5] is not None else None,
            )
            for r in rows
        ]
