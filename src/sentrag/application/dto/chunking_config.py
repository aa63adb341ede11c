"""Chunking configuration DTO."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChunkingConfig:
    """Configuration for sentence-aware chunking."""

    chunk_size: int = 700
    chunk_overlap: int = 100
