"""Application entry point and composition root."""

import argparse

from sentrag import __version__
from sentrag.application.dto.chunking_config import ChunkingConfig
from sentrag.application.use_cases.document.delete_document import DeleteDocumentUseCase
from sentrag.application.use_cases.document.get_document import GetDocumentUseCase
from sentrag.application.use_cases.document.indexer import DocumentIndexer
from sentrag.application.use_cases.document.list_documents import ListDocumentsUseCase
from sentrag.application.use_cases.document.load_document import LoadDocumentUseCase
from sentrag.application.use_cases.document.reindex_document import ReindexDocumentUseCase
from sentrag.application.use_cases.search.expand_context import ExpandContextUseCase
from sentrag.application.use_cases.search.semantic_search import SemanticSearchUseCase
from sentrag.application.use_cases.search.synthesize_answer import AnswerSynthesizer
from sentrag.config import Settings, get_settings
from sentrag.infrastructure.chunking import SentenceChunker
from sentrag.infrastructure.embedding import (
    EmbeddingCache,
    HashEmbeddingProvider,
    OpenAIEmbeddingProvider,
)
from sentrag.infrastructure.llm import OpenAISummarizer
from sentrag.infrastructure.persistence.postgres.connection import create_pool
from sentrag.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from sentrag.interfaces.api.app import create_app
from sentrag.interfaces.api.middleware.cors import CORSMiddleware
from sentrag.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from sentrag.interfaces.api.resources.documents import (
    DocumentReindexResource,
    DocumentResource,
    DocumentsResource,
)
from sentrag.interfaces.api.resources.health import HealthResource
from sentrag.interfaces.api.resources.search import SearchResource, SnippetContextResource
from sentrag.logging_config import configure_logging


def build_embedding_cache(settings: Settings) -> EmbeddingCache:
    """Embedding cache over the configured provider."""
    if settings.embedding_api_key:
        provider = OpenAIEmbeddingProvider(
            base_url=settings.embedding_api_url,
            api_key=settings.embedding_api_key,
            model=settings.embedding_model,
            dimensions=settings.embedding_dimensions,
        )
    else:
        provider = HashEmbeddingProvider(settings.embedding_dimensions)
    return EmbeddingCache(
        provider,
        dimensions=settings.embedding_dimensions,
        capacity=settings.embedding_cache_capacity or None,
    )


def build_answer_synthesizer(settings: Settings) -> AnswerSynthesizer:
    """Answer synthesizer, with an LLM summarizer when an API key is set."""
    summarizer = (
        OpenAISummarizer(
            base_url=settings.llm_api_url,
            api_key=settings.llm_api_key,
            model=settings.llm_model,
        )
        if settings.llm_api_key
        else None
    )
    return AnswerSynthesizer(summarizer)


def create_sentrag_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    embedding_cache = build_embedding_cache(settings)
    indexer = DocumentIndexer(
        chunker=SentenceChunker(),
        embedding_cache=embedding_cache,
        chunking_config=ChunkingConfig(
            chunk_size=settings.chunk_size,
            chunk_overlap=settings.chunk_overlap,
        ),
    )

    load_document = LoadDocumentUseCase(unit_of_work_factory=uow_factory, indexer=indexer)
    list_documents = ListDocumentsUseCase(unit_of_work_factory=uow_factory)
    get_document = GetDocumentUseCase(unit_of_work_factory=uow_factory)
    delete_document = DeleteDocumentUseCase(unit_of_work_factory=uow_factory)
    reindex_document = ReindexDocumentUseCase(unit_of_work_factory=uow_factory, indexer=indexer)
    semantic_search = SemanticSearchUseCase(
        unit_of_work_factory=uow_factory,
        embedding_cache=embedding_cache,
        answer_synthesizer=build_answer_synthesizer(settings),
        match_threshold=settings.match_threshold,
    )
    expand_context = ExpandContextUseCase(
        unit_of_work_factory=uow_factory,
        default_context_size=settings.context_size,
    )

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    return create_app(
        documents_resource=DocumentsResource(load_document, list_documents),
        document_resource=DocumentResource(get_document, delete_document),
        reindex_resource=DocumentReindexResource(reindex_document),
        search_resource=SearchResource(
            semantic_search, default_limit=settings.default_result_limit
        ),
        snippet_context_resource=SnippetContextResource(expand_context),
        health_resource=HealthResource(pool),
        middleware=[
            CORSMiddleware(cors_origins),
            PoolLifespanMiddleware(pool),
        ],
    )


def main() -> None:
    """CLI entry point - run the API server with uvicorn."""
    parser = argparse.ArgumentParser(description=f"sentrag v{__version__}")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--version", action="version", version=f"sentrag {__version__}")
    args = parser.parse_args()

    import uvicorn

    uvicorn.run(create_sentrag_app(), host=args.host, port=args.port)
