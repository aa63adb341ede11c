"""Reindex document use case - rebuild chunks and embeddings from content."""

import logging
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from sentrag.application.dto.document_dto import DocumentOutput
from sentrag.application.use_cases.document.indexer import DocumentIndexer
from sentrag.domain.exceptions import IngestionFailed, NotFound

logger = logging.getLogger(__name__)


class ReindexDocumentUseCase:
    """Replace a document's chunks; also the retry path after partial ingestion."""

    def __init__(self, unit_of_work_factory: type, indexer: DocumentIndexer) -> None:
        self._uow_factory = unit_of_work_factory
        self._indexer = indexer

    async def execute(self, document_id: UUID) -> DocumentOutput:
        """Re-chunk and re-embed the stored content."""
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(document_id)
        if not document:
            raise NotFound("Document", str(document_id))

        chunks = await self._indexer.build_chunks(document.id, document.content)
        updated = replace(document, chunk_count=len(chunks), updated_at=datetime.now(UTC))

        try:
            async with self._uow_factory() as uow:
                await uow.chunks.delete_by_document_id(document.id)
                await uow.chunks.create_batch(chunks)
                await uow.documents.update(updated)
        except Exception as exc:
            logger.exception("Reindexing %s failed", document.original_name)
            raise IngestionFailed(document.original_name, str(exc)) from exc

        return DocumentOutput.from_entity(updated)
