"""Document entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Document:
    """Uploaded plain-text document; chunk_count is derived at ingestion."""

    id: UUID
    display_name: str
    original_name: str
    byte_size: int
    content: str
    chunk_count: int
    created_at: datetime
    updated_at: datetime
