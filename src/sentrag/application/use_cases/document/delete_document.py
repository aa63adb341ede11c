"""Delete document use case."""

import logging
from uuid import UUID

from sentrag.domain.exceptions import NotFound

logger = logging.getLogger(__name__)


class DeleteDocumentUseCase:
    """Delete a document together with its chunks."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, document_id: UUID) -> None:
        """Delete chunks first, then the document."""
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(document_id)
            if not document:
                raise NotFound("Document", str(document_id))
            await uow.chunks.delete_by_document_id(document_id)
            await uow.documents.delete(document_id)
        logger.info("Deleted document %s (%s)", document_id, document.original_name)
