"""Deterministic embedding provider for development without an embedding API."""

import hashlib


class HashEmbeddingProvider:
    """Derives a fixed vector from the SHA-256 digest of each text.

    Equal texts get equal vectors; the vectors carry no semantics.
    """

    def __init__(self, dimensions: int) -> None:
        self._dimensions = dimensions

    async def embed(self, texts: list[str]) -> list[list[float]]:
        return [self._vector(t) for t in texts]

    def _vector(self, text: str) -> list[float]:
        digest = hashlib.sha256(text.encode("utf-8")).digest()
        return [digest[i % len(digest)] / 255 * 2 - 1 for i in range(self._dimensions)]
