"""Document indexer - chunk and embed document content."""

from uuid import UUID, uuid4

from sentrag.application.dto.chunking_config import ChunkingConfig
from sentrag.application.ports import Chunker
from sentrag.domain.entities import Chunk
from sentrag.domain.exceptions import InvalidChunkOffsets
from sentrag.infrastructure.embedding import EmbeddingCache
from sentrag.infrastructure.text import normalize_text


class DocumentIndexer:
    """Turns document content into embedded Chunk entities.

    Pure in content and config, so re-running it for a document is safe.
    """

    def __init__(
        self,
        chunker: Chunker,
        embedding_cache: EmbeddingCache,
        chunking_config: ChunkingConfig,
    ) -> None:
        self._chunker = chunker
        self._embedding_cache = embedding_cache
        self._chunking_config = chunking_config

    async def build_chunks(self, document_id: UUID, content: str) -> list[Chunk]:
        """Chunk content and embed every chunk."""
        normalized_length = len(normalize_text(content))
        text_chunks = self._chunker.chunk(content, self._chunking_config)
        for tc in text_chunks:
            if tc.end > normalized_length:
                raise InvalidChunkOffsets(
                    f"Chunk end {tc.end} exceeds normalized length {normalized_length}"
                )
        embeddings = await self._embedding_cache.embed_many([tc.content for tc in text_chunks])
        return [
            Chunk(
                id=uuid4(),
                document_id=document_id,
                content=tc.content,
                start_offset=tc.start,
                end_offset=tc.end,
                embedding=emb,
            )
            for tc, emb in zip(text_chunks, embeddings, strict=True)
        ]
