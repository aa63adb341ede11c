"""Expand context use case - widen a snippet with its document's text."""

import logging

from sentrag.application.dto.search_dto import Snippet
from sentrag.infrastructure.text import expand_context, normalize_text

logger = logging.getLogger(__name__)


class ExpandContextUseCase:
    """Re-slice the owning document around a snippet's offsets."""

    def __init__(self, unit_of_work_factory: type, default_context_size: int = 300) -> None:
        self._uow_factory = unit_of_work_factory
        self._default_context_size = default_context_size

    async def execute(self, snippet: Snippet, context_size: int | None = None) -> str:
        """Return the widened text, or the snippet text when it cannot be resolved.

        A successful expansion is also stored on snippet.expanded_text.
        """
        size = self._default_context_size if context_size is None else context_size
        try:
            async with self._uow_factory() as uow:
                chunk = await uow.chunks.get_by_id(snippet.chunk_id)
                if chunk is None:
                    return snippet.text
                document = await uow.documents.get_by_id(chunk.document_id)
        except Exception:
            logger.exception("Context expansion lookup failed for chunk %s", snippet.chunk_id)
            return snippet.text

        if document is None:
            return snippet.text

        # Chunk offsets index the normalized content.
        expanded = expand_context(
            normalize_text(document.content), snippet.start, snippet.end, size
        )
        snippet.expanded_text = expanded
        return expanded
