"""PostgreSQL Unit of Work implementation."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from sentrag.infrastructure.persistence.postgres.chunk_repository import (
    PostgresChunkRepository,
)
from sentrag.infrastructure.persistence.postgres.document_repository import (
    PostgresDocumentRepository,
)

logger = logging.getLogger(__name__)


class PostgresUnitOfWork:
    """Repositories sharing one pooled connection and its transaction."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn
        self.documents = PostgresDocumentRepository(conn)
        self.chunks = PostgresChunkRepository(conn)

    async def commit(self) -> None:
        await self._conn.commit()

    async def rollback(self) -> None:
        await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool):
    """Create UnitOfWork factory (async context manager).

    The transaction commits when the block exits cleanly and rolls back when
    it raises.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        async with pool.connection() as conn:
            uow = PostgresUnitOfWork(conn)
            try:
                yield uow
            except BaseException:
                logger.debug("Rolling back unit of work")
                await uow.rollback()
                raise
            await uow.commit()

    return factory
