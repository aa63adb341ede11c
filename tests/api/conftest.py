"""Fixtures for API tests."""

import pytest

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
from sentrag.infrastructure.chunking import SentenceChunker
from sentrag.interfaces.api.app import create_app
from sentrag.interfaces.api.middleware.cors import CORSMiddleware
from sentrag.interfaces.api.resources.documents import (
    DocumentReindexResource,
    DocumentResource,
    DocumentsResource,
)
from sentrag.interfaces.api.resources.health import HealthResource
from sentrag.interfaces.api.resources.search import SearchResource, SnippetContextResource


@pytest.fixture
def app(uow_factory, embedding_cache):
    """Falcon ASGI app wired to in-memory repositories - same UoW for all requests in a test."""
    indexer = DocumentIndexer(
        chunker=SentenceChunker(),
        embedding_cache=embedding_cache,
        chunking_config=ChunkingConfig(chunk_size=60, chunk_overlap=15),
    )
    load_document = LoadDocumentUseCase(unit_of_work_factory=uow_factory, indexer=indexer)
    semantic_search = SemanticSearchUseCase(
        unit_of_work_factory=uow_factory,
        embedding_cache=embedding_cache,
        answer_synthesizer=AnswerSynthesizer(),
    )
    return create_app(
        documents_resource=DocumentsResource(
            load_document, ListDocumentsUseCase(unit_of_work_factory=uow_factory)
        ),
        document_resource=DocumentResource(
            GetDocumentUseCase(unit_of_work_factory=uow_factory),
            DeleteDocumentUseCase(unit_of_work_factory=uow_factory),
        ),
        reindex_resource=DocumentReindexResource(
            ReindexDocumentUseCase(unit_of_work_factory=uow_factory, indexer=indexer)
        ),
        search_resource=SearchResource(semantic_search),
        snippet_context_resource=SnippetContextResource(
            ExpandContextUseCase(unit_of_work_factory=uow_factory)
        ),
        health_resource=HealthResource(),
        middleware=[CORSMiddleware(["*"])],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
