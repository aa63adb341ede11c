"""Pytest fixtures for sentrag tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from uuid import UUID

import pytest

from sentrag.application.dto.chunking_config import ChunkingConfig
from sentrag.domain.entities import Chunk, Document
from sentrag.domain.value_objects import ChunkMatch
from sentrag.infrastructure.embedding import EmbeddingCache

EMBEDDING_DIM = 8


# --- Fake repositories ---


class FakeDocumentRepository:
    """In-memory document repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Document] = {}
        self.fail_lookups = False

    async def get_by_id(self, document_id: UUID) -> Document | None:
        if self.fail_lookups:
            raise RuntimeError("document store unavailable")
        return self._by_id.get(document_id)

    async def get_by_ids(self, document_ids: Iterable[UUID]) -> list[Document]:
        if self.fail_lookups:
            raise RuntimeError("document store unavailable")
        return [self._by_id[i] for i in document_ids if i in self._by_id]

    async def list(self) -> list[Document]:
        return list(self._by_id.values())

    async def create(self, document: Document) -> Document:
        self._by_id[document.id] = document
        return document

    async def update(self, document: Document) -> Document:
        self._by_id[document.id] = document
        return document

    async def delete(self, document_id: UUID) -> None:
        self._by_id.pop(document_id, None)


class FakeChunkRepository:
    """In-memory chunk repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Chunk] = {}
        self._search_results: list[ChunkMatch] = []
        self.fail_writes = False
        self.fail_search = False
        self.search_calls: list[dict] = []

    def set_search_results(self, results: list[ChunkMatch]) -> None:
        """Set predefined search results for testing."""
        self._search_results = results

    async def create_batch(self, chunks: list[Chunk]) -> list[Chunk]:
        if self.fail_writes:
            raise RuntimeError("insert failed")
        for c in chunks:
            self._by_id[c.id] = c
        return chunks

    async def delete_by_document_id(self, document_id: UUID) -> None:
        for chunk_id in [c.id for c in self._by_id.values() if c.document_id == document_id]:
            del self._by_id[chunk_id]

    async def get_by_id(self, chunk_id: UUID) -> Chunk | None:
        return self._by_id.get(chunk_id)

    async def get_by_document_id(self, document_id: UUID) -> list[Chunk]:
        return sorted(
            (c for c in self._by_id.values() if c.document_id == document_id),
            key=lambda c: c.start_offset,
        )

    async def search(
        self,
        query_embedding: list[float],
        match_threshold: float,
        match_count: int,
    ) -> list[ChunkMatch]:
        self.search_calls.append(
            {
                "query_embedding": query_embedding,
                "match_threshold": match_threshold,
                "match_count": match_count,
            }
        )
        if self.fail_search:
            raise RuntimeError("vector search failed")
        return self._search_results[:match_count]


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.documents = FakeDocumentRepository()
        self.chunks = FakeChunkRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def mock_embedding_provider():
    """AsyncMock for EmbeddingProvider - returns fixed vectors per text."""

    async def _embed(texts: list[str]) -> list[list[float]]:
        return [[0.1] * EMBEDDING_DIM for _ in texts]

    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.embed = AsyncMock(side_effect=_embed)
    return mock


@pytest.fixture
def embedding_cache(mock_embedding_provider) -> EmbeddingCache:
    """Unbounded cache over the mock provider."""
    return EmbeddingCache(mock_embedding_provider, dimensions=EMBEDDING_DIM)


@pytest.fixture
def chunking_config() -> ChunkingConfig:
    """Small chunking config so short test texts split."""
    return ChunkingConfig(chunk_size=60, chunk_overlap=15)
