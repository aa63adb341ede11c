"""Document repository port."""

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from sentrag.domain.entities import Document


class DocumentRepository(Protocol):
    """Port for document persistence."""

    async def get_by_id(self, document_id: UUID) -> Document | None: ...

    async def get_by_ids(self, document_ids: Iterable[UUID]) -> list[Document]: ...

    async def list(self) -> list[Document]: ...

    async def create(self, document: Document) -> Document: ...

    async def update(self, document: Document) -> Document: ...

    async def delete(self, document_id: UUID) -> None: ...
