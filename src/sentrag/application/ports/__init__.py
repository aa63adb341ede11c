"""Application ports - interfaces for external adapters."""

from sentrag.application.ports.chunker import Chunker
from sentrag.application.ports.embedding_provider import EmbeddingProvider
from sentrag.application.ports.summarizer import Summarizer
from sentrag.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Chunker",
    "EmbeddingProvider",
    "Summarizer",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
