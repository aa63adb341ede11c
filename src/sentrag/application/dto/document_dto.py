"""Document DTOs."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from sentrag.domain.entities import Document


@dataclass
class DocumentCreateInput:
    """Input for ingesting one plain-text document."""

    original_name: str
    content: str
    byte_size: int | None = None
    display_name: str | None = None


@dataclass
class DocumentOutput:
    """Output DTO for document."""

    id: UUID
    display_name: str
    original_name: str
    byte_size: int
    content: str
    chunk_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, document: Document) -> "DocumentOutput":
        return cls(
            id=document.id,
            display_name=document.display_name,
            original_name=document.original_name,
            byte_size=document.byte_size,
            content=document.content,
            chunk_count=document.chunk_count,
            created_at=document.created_at,
            updated_at=document.updated_at,
        )


@dataclass
class IngestionError:
    """Per-file ingestion failure."""

    filename: str
    error: str


@dataclass
class IngestionReport:
    """Outcome of a batch ingestion: successes and per-file failures."""

    documents: list[DocumentOutput] = field(default_factory=list)
    errors: list[IngestionError] = field(default_factory=list)


@dataclass
class DocumentListOutput:
    """Documents newest first with dashboard totals."""

    items: list[DocumentOutput]
    total_files: int
    total_size: int
    total_chunks: int
