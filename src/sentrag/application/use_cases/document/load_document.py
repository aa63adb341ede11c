"""Load document use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from sentrag.application.dto.document_dto import (
    DocumentCreateInput,
    DocumentOutput,
    IngestionError,
    IngestionReport,
)
from sentrag.application.use_cases.document.indexer import DocumentIndexer
from sentrag.domain.entities import Document
from sentrag.domain.exceptions import IngestionFailed, ValidationError
from sentrag.infrastructure.text import normalize_text

logger = logging.getLogger(__name__)


def display_name_for(original_name: str) -> str:
    """File name shown in listings: the upload name without its .txt extension."""
    return original_name.removesuffix(".txt") or original_name


class LoadDocumentUseCase:
    """Load document: validate, chunk, embed, save document and chunks."""

    def __init__(self, unit_of_work_factory: type, indexer: DocumentIndexer) -> None:
        self._uow_factory = unit_of_work_factory
        self._indexer = indexer

    async def execute(self, input_data: DocumentCreateInput) -> DocumentOutput:
        """Ingest one document. Raises ValidationError or IngestionFailed."""
        if not normalize_text(input_data.content):
            raise ValidationError(f"{input_data.original_name} has no text content")

        doc_id = uuid4()
        chunks = await self._indexer.build_chunks(doc_id, input_data.content)

        now = datetime.now(UTC)
        document = Document(
            id=doc_id,
            display_name=input_data.display_name or display_name_for(input_data.original_name),
            original_name=input_data.original_name,
            byte_size=(
                input_data.byte_size
                if input_data.byte_size is not None
                else len(input_data.content.encode("utf-8"))
            ),
            content=input_data.content,
            chunk_count=len(chunks),
            created_at=now,
            updated_at=now,
        )

        try:
            async with self._uow_factory() as uow:
                await uow.documents.create(document)
                await uow.chunks.create_batch(chunks)
        except Exception as exc:
            logger.exception("Persisting %s failed", input_data.original_name)
            raise IngestionFailed(input_data.original_name, str(exc)) from exc

        logger.info(
            "Ingested %s as %s (%d chunks)", document.original_name, document.id, len(chunks)
        )
        return DocumentOutput.from_entity(document)

    async def execute_batch(self, inputs: list[DocumentCreateInput]) -> IngestionReport:
        """Ingest files one by one; a failing file does not abort the others."""
        report = IngestionReport()
        for input_data in inputs:
            try:
                report.documents.append(await self.execute(input_data))
            except (ValidationError, IngestionFailed) as e:
                report.errors.append(IngestionError(filename=input_data.original_name, error=str(e)))
        return report
