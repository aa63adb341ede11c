"""Embedding adapters and cache."""

from sentrag.infrastructure.embedding.cache import EmbeddingCache, fallback_embedding
from sentrag.infrastructure.embedding.hash_provider import HashEmbeddingProvider
from sentrag.infrastructure.embedding.openai_provider import OpenAIEmbeddingProvider

__all__ = [
    "EmbeddingCache",
    "HashEmbeddingProvider",
    "OpenAIEmbeddingProvider",
    "fallback_embedding",
]
