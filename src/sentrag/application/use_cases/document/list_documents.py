"""List documents use case - dashboard listing with totals."""

from sentrag.application.dto.document_dto import DocumentListOutput, DocumentOutput


class ListDocumentsUseCase:
    """List documents newest first with file, size and chunk totals."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> DocumentListOutput:
        async with self._uow_factory() as uow:
            documents = await uow.documents.list()
        documents = sorted(documents, key=lambda d: d.created_at, reverse=True)
        return DocumentListOutput(
            items=[DocumentOutput.from_entity(d) for d in documents],
            total_files=len(documents),
            total_size=sum(d.byte_size for d in documents),
            total_chunks=sum(d.chunk_count for d in documents),
        )
