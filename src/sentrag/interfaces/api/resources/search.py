"""Search API resources."""

from uuid import UUID

import falcon.asgi

from sentrag.application.dto.search_dto import SearchInput, SearchResult, Snippet
from sentrag.application.use_cases.search.expand_context import ExpandContextUseCase
from sentrag.application.use_cases.search.semantic_search import SemanticSearchUseCase
from sentrag.domain.exceptions import ValidationError
from sentrag.infrastructure.text import highlight_markup

MAX_RESULT_LIMIT = 50


def _snippet_to_dict(s: Snippet, query: str) -> dict:
    return {
        "chunk_id": str(s.chunk_id),
        "document_id": str(s.document_id) if s.document_id else None,
        "file": s.file_label,
        "text": s.text,
        "highlighted": highlight_markup(s.text, query),
        "start": s.start,
        "end": s.end,
        "similarity": round(s.similarity, 6),
    }


def _result_to_dict(result: SearchResult) -> dict:
    return {
        "query": result.query,
        "answer": result.answer,
        "snippets": [_snippet_to_dict(s, result.query) for s in result.snippets],
        "groups": [
            {"file": label, "chunk_ids": [str(s.chunk_id) for s in members]}
            for label, members in result.grouped_by_file().items()
        ],
    }


class SearchResource:
    """POST /v1/search - semantic search with optional answer."""

    def __init__(self, semantic_search: SemanticSearchUseCase, default_limit: int = 8) -> None:
        self._semantic_search = semantic_search
        self._default_limit = default_limit

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Execute semantic search."""
        try:
            body = await req.get_media()
            query = body.get("query", "")
            limit = int(body.get("limit", self._default_limit))
            strict = bool(body.get("strict", True))
            use_llm = bool(body.get("use_llm", False))
            if not isinstance(query, str):
                raise ValueError("query must be a string")
        except (AttributeError, TypeError, ValueError, falcon.MediaNotFoundError):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid request body"}
            return

        try:
            result = await self._semantic_search.execute(
                SearchInput(
                    query=query,
                    limit=min(limit, MAX_RESULT_LIMIT),
                    strict=strict,
                    use_llm=use_llm,
                )
            )
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = _result_to_dict(result)
        resp.status = falcon.HTTP_200


class SnippetContextResource:
    """POST /v1/snippets/expand - widen a snippet with surrounding document text."""

    def __init__(self, expand_context: ExpandContextUseCase) -> None:
        self._expand_context = expand_context

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            body = await req.get_media()
            snippet = Snippet(
                chunk_id=UUID(body["chunk_id"]),
                document_id=None,
                file_label=body.get("file", ""),
                text=str(body.get("text", "")),
                start=int(body["start"]),
                end=int(body["end"]),
            )
            context_size = body.get("context_size")
            if context_size is not None:
                context_size = int(context_size)
        except (AttributeError, KeyError, TypeError, ValueError, falcon.MediaNotFoundError):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "chunk_id, start and end are required"}
            return

        expanded = await self._expand_context.execute(snippet, context_size)
        resp.media = {"chunk_id": str(snippet.chunk_id), "expanded_text": expanded}
        resp.status = falcon.HTTP_200
