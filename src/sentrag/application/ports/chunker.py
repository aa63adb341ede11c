"""Chunker port - text splitting strategies."""

from typing import Protocol

from sentrag.application.dto.chunking_config import ChunkingConfig
from sentrag.domain.value_objects import TextChunk


class Chunker(Protocol):
    """Port for splitting text into offset-carrying chunks."""

    def chunk(self, text: str, config: ChunkingConfig) -> list[TextChunk]: ...
