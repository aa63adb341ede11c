"""Semantic search use case - vector similarity over document chunks."""

import logging
from uuid import UUID

from sentrag.application.dto.search_dto import (
    UNKNOWN_FILE_LABEL,
    SearchInput,
    SearchResult,
    Snippet,
)
from sentrag.application.use_cases.search.synthesize_answer import AnswerSynthesizer
from sentrag.domain.entities import Document
from sentrag.domain.exceptions import ValidationError
from sentrag.infrastructure.embedding import EmbeddingCache
from sentrag.infrastructure.text import normalize_text

logger = logging.getLogger(__name__)

ANSWER_SNIPPET_COUNT = 3


class SemanticSearchUseCase:
    """Embed the query, fetch similar chunks, label them and build an answer.

    Collaborator failures degrade to an empty result; the vector store is the
    source of ranking truth and its order is kept.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        embedding_cache: EmbeddingCache,
        answer_synthesizer: AnswerSynthesizer,
        match_threshold: float = 0.3,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._embedding_cache = embedding_cache
        self._answer_synthesizer = answer_synthesizer
        self._match_threshold = match_threshold

    async def execute(self, input_data: SearchInput) -> SearchResult:
        """Execute semantic search."""
        query = normalize_text(input_data.query)
        if not query:
            raise ValidationError("Query must not be empty")
        if input_data.limit < 1:
            raise ValidationError("limit must be at least 1")

        embedding = await self._embedding_cache.embed(query)

        try:
            async with self._uow_factory() as uow:
                matches = await uow.chunks.search(
                    query_embedding=embedding,
                    match_threshold=self._match_threshold,
                    match_count=input_data.limit * 2,
                )
        except Exception:
            logger.exception("Vector search failed for query %r", query)
            return SearchResult(query=input_data.query)

        if not matches:
            return SearchResult(query=input_data.query)

        documents = await self._resolve_documents({m.document_id for m in matches})
        snippets = [
            Snippet(
                chunk_id=m.chunk_id,
                document_id=m.document_id,
                file_label=_file_label(documents.get(m.document_id)),
                text=m.content,
                start=m.start,
                end=m.end,
                similarity=m.similarity or 0.0,
            )
            for m in matches[: input_data.limit]
        ]

        answer = ""
        if input_data.strict and snippets:
            answer = await self._answer_synthesizer.synthesize(
                query, snippets[:ANSWER_SNIPPET_COUNT], input_data.use_llm
            )
        return SearchResult(query=input_data.query, answer=answer, snippets=snippets)

    async def _resolve_documents(self, document_ids: set[UUID]) -> dict[UUID, Document]:
        try:
            async with self._uow_factory() as uow:
                documents = await uow.documents.get_by_ids(document_ids)
        except Exception:
            logger.exception("Document lookup failed for %d ids", len(document_ids))
            return {}
        return {d.id: d for d in documents}


def _file_label(document: Document | None) -> str:
    if document is None:
        return UNKNOWN_FILE_LABEL
    return document.original_name or document.display_name or UNKNOWN_FILE_LABEL
