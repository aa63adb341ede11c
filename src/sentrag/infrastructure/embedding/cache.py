"""Embedding cache - memoizes text -> vector lookups in front of a provider."""

import asyncio
import hashlib
import logging
import random
import threading
from collections import OrderedDict

from sentrag.application.ports import EmbeddingProvider
from sentrag.domain.exceptions import EmbeddingDimensionMismatch

logger = logging.getLogger(__name__)


def fallback_embedding(text: str, dimensions: int) -> list[float]:
    """Pseudo-random vector seeded by the text, identical across retries."""
    seed = int.from_bytes(hashlib.sha256(text.encode("utf-8")).digest()[:8], "big")
    rng = random.Random(seed)
    return [rng.random() - 0.5 for _ in range(dimensions)]


class EmbeddingCache:
    """Owns the process-lifetime text -> embedding mapping.

    Keys are the exact input strings; callers normalize before calling.
    A failed provider call stores the fallback vector, so a failing text is not
    retried within the cache lifetime. capacity=None keeps every entry,
    otherwise the least recently used entry is evicted.
    """

    def __init__(
        self,
        provider: EmbeddingProvider,
        dimensions: int,
        capacity: int | None = None,
    ) -> None:
        if capacity is not None and capacity <= 0:
            raise ValueError("capacity must be positive or None")
        self._provider = provider
        self._dimensions = dimensions
        self._capacity = capacity
        self._entries: OrderedDict[str, tuple[float, ...]] = OrderedDict()
        self._lock = threading.Lock()
        self._pending: dict[str, asyncio.Future[tuple[float, ...]]] = {}

    @property
    def dimensions(self) -> int:
        return self._dimensions

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, text: object) -> bool:
        with self._lock:
            return text in self._entries

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    async def embed(self, text: str) -> list[float]:
        """Return the embedding for text, calling the provider at most once."""
        cached = self._get(text)
        if cached is not None:
            return list(cached)

        pending = self._pending.get(text)
        if pending is None:
            pending = asyncio.ensure_future(self._compute(text))
            self._pending[text] = pending
            pending.add_done_callback(lambda _: self._pending.pop(text, None))
        # A cancelled caller leaves the shared computation running.
        return list(await asyncio.shield(pending))

    async def embed_many(self, texts: list[str]) -> list[list[float]]:
        """Embed texts in order with a single provider call for the misses."""
        resolved: dict[str, tuple[float, ...]] = {}
        for text in texts:
            cached = self._get(text)
            if cached is not None:
                resolved[text] = cached
        misses = [t for t in dict.fromkeys(texts) if t not in resolved]
        if misses:
            try:
                vectors = await self._provider.embed(misses)
                if len(vectors) != len(misses):
                    raise ValueError(
                        f"Provider returned {len(vectors)} vectors for {len(misses)} texts"
                    )
            except Exception as exc:
                logger.warning(
                    "Batch embedding failed for %d texts, using fallback vectors: %s",
                    len(misses),
                    exc,
                )
                vectors = [fallback_embedding(t, self._dimensions) for t in misses]
            for text, vector in zip(misses, vectors, strict=True):
                stored = self._checked(vector)
                self._put(text, stored)
                resolved[text] = stored
        return [list(resolved[t]) for t in texts]

    async def _compute(self, text: str) -> tuple[float, ...]:
        try:
            vectors = await self._provider.embed([text])
            vector = vectors[0]
        except Exception as exc:
            logger.warning("Embedding failed, using fallback vector: %s", exc)
            vector = fallback_embedding(text, self._dimensions)
        stored = self._checked(vector)
        self._put(text, stored)
        return stored

    def _checked(self, vector: list[float]) -> tuple[float, ...]:
        if len(vector) != self._dimensions:
            logger.error(
                "Embedding dimension mismatch: expected %d, got %d",
                self._dimensions,
                len(vector),
            )
            raise EmbeddingDimensionMismatch(self._dimensions, len(vector))
        return tuple(float(v) for v in vector)

    def _get(self, text: str) -> tuple[float, ...] | None:
        with self._lock:
            vector = self._entries.get(text)
            if vector is not None:
                self._entries.move_to_end(text)
            return vector

    def _put(self, text: str, vector: tuple[float, ...]) -> None:
        with self._lock:
            self._entries[text] = vector
            self._entries.move_to_end(text)
            if self._capacity is not None:
                while len(self._entries) > self._capacity:
                    self._entries.popitem(last=False)
