"""PostgreSQL document repository implementation."""

from collections.abc import Iterable
from uuid import UUID

from psycopg import AsyncConnection

from sentrag.domain.entities import Document

_COLUMNS = (
    "id, display_name, original_name, byte_size, content, chunk_count, created_at, updated_at"
)


def _row_to_document(r: tuple) -> Document:
    return Document(
        id=r[0],
        display_name=r[1],
        original_name=r[2],
        byte_size=r[3],
        content=r[4],
        chunk_count=r[5],
        created_at=r[6],
        updated_at=r[7],
    )


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, document_id: UUID) -> Document | None:
        """Get document by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document WHERE id = %s", (document_id,)
        )
        r = await cur.fetchone()
        return _row_to_document(r) if r else None

    async def get_by_ids(self, document_ids: Iterable[UUID]) -> list[Document]:
        """Batch lookup by distinct ids."""
        ids = list(set(document_ids))
        if not ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document WHERE id = ANY(%s)", (ids,)
        )
        return [_row_to_document(r) for r in await cur.fetchall()]

    async def list(self) -> list[Document]:
        """List all documents, newest first."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document ORDER BY created_at DESC"
        )
        return [_row_to_document(r) for r in await cur.fetchall()]

    async def create(self, document: Document) -> Document:
        """Create document."""
        await self._conn.execute(
            f"INSERT INTO document ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                document.id,
                document.display_name,
                document.original_name,
                document.byte_size,
                document.content,
                document.chunk_count,
                document.created_at,
                document.updated_at,
            ),
        )
        return document

    async def update(self, document: Document) -> Document:
        """Update derived fields of a document."""
        await self._conn.execute(
            "UPDATE document SET display_name=%s, chunk_count=%s, updated_at=%s WHERE id=%s",
            (document.display_name, document.chunk_count, document.updated_at, document.id),
        )
        return document

    async def delete(self, document_id: UUID) -> None:
        """Delete document; chunks cascade."""
        await self._conn.execute("DELETE FROM document WHERE id = %s", (document_id,))
