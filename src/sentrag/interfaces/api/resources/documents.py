"""Document API resources."""

import re
from urllib.parse import unquote_to_bytes
from uuid import UUID

import falcon.asgi

from sentrag.application.dto.document_dto import (
    DocumentCreateInput,
    DocumentOutput,
    IngestionError,
    IngestionReport,
)
from sentrag.application.use_cases.document.delete_document import DeleteDocumentUseCase
from sentrag.application.use_cases.document.get_document import GetDocumentUseCase
from sentrag.application.use_cases.document.list_documents import ListDocumentsUseCase
from sentrag.application.use_cases.document.load_document import LoadDocumentUseCase
from sentrag.application.use_cases.document.reindex_document import ReindexDocumentUseCase
from sentrag.domain.exceptions import IngestionFailed, NotFound, ValidationError
from sentrag.infrastructure.document_parsers import parse_file

# RFC 5987: filename*=charset''percent-encoded (two single quotes)
_FILENAME_STAR_RFC5987 = re.compile(r"([\w-]+)''(.+)")


def _decode_filename(raw: str | None) -> str:
    """Decode filename to UTF-8, fixing mojibake when UTF-8 bytes were read as Latin-1."""
    if not raw or not raw.strip():
        return ""
    raw = raw.strip()
    try:
        return raw.encode("latin-1").decode("utf-8")
    except (UnicodeEncodeError, UnicodeDecodeError):
        return raw


def _parse_filename_star(raw_header_value: bytes) -> str | None:
    """Parse filename*=charset''percent-encoded from a raw Content-Disposition value."""
    if not raw_header_value:
        return None
    decoded = raw_header_value.decode("utf-8", errors="replace")
    idx = decoded.find("filename*=")
    if idx == -1:
        return None
    match = _FILENAME_STAR_RFC5987.match(decoded[idx + len("filename*=") :].strip())
    if not match:
        return None
    charset, encoded = match.groups()
    try:
        return unquote_to_bytes(encoded.split(";")[0]).decode(charset)
    except (ValueError, LookupError):
        return None


def _get_part_filename(part: object, fallback_index: int) -> str:
    """Filename of a multipart part, else file_N.txt."""
    raw = (getattr(part, "filename", None) or "").strip()
    if not raw:
        headers = getattr(part, "_headers", None)
        if isinstance(headers, dict):
            raw = (_parse_filename_star(headers.get(b"content-disposition", b"")) or "").strip()
    decoded = _decode_filename(raw) if raw else ""
    return decoded if decoded else f"file_{fallback_index}.txt"


def _document_to_dict(d: DocumentOutput, include_content: bool = False) -> dict:
    data = {
        "id": str(d.id),
        "display_name": d.display_name,
        "original_name": d.original_name,
        "byte_size": d.byte_size,
        "chunk_count": d.chunk_count,
        "created_at": d.created_at.isoformat(),
        "updated_at": d.updated_at.isoformat(),
    }
    if include_content:
        data["content"] = d.content
    return data


def _report_to_dict(report: IngestionReport) -> dict:
    return {
        "documents": [_document_to_dict(d) for d in report.documents],
        "errors": [{"filename": e.filename, "error": e.error} for e in report.errors],
    }


class DocumentsResource:
    """GET/POST /v1/documents - list documents, upload plain-text files."""

    def __init__(
        self,
        load_document: LoadDocumentUseCase,
        list_documents: ListDocumentsUseCase,
    ) -> None:
        self._load_document = load_document
        self._list_documents = list_documents

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List documents newest first with totals."""
        result = await self._list_documents.execute()
        resp.media = {
            "items": [_document_to_dict(d) for d in result.items],
            "total_files": result.total_files,
            "total_size": result.total_size,
            "total_chunks": result.total_chunks,
        }
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """JSON: one document {name, content}; multipart: one document per file."""
        content_type = req.content_type or ""
        if "multipart/form-data" in content_type:
            await self._handle_multipart(req, resp)
            return

        try:
            body = await req.get_media()
            name = str(body["name"])
            content = body["content"]
            if not isinstance(content, str):
                raise ValueError("content must be a string")
        except (KeyError, TypeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid request body: {e}"}
            return

        try:
            result = await self._load_document.execute(
                DocumentCreateInput(original_name=name, content=content)
            )
            resp.media = _document_to_dict(result)
            resp.status = falcon.HTTP_201
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
        except IngestionFailed as e:
            resp.status = falcon.HTTP_500
            resp.media = {"error": str(e)}

    async def _handle_multipart(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Parse every `files` part; unsupported files are reported, not fatal."""
        try:
            form = await req.get_media()
        except Exception as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid multipart: {e}"}
            return

        inputs: list[DocumentCreateInput] = []
        rejected: list[IngestionError] = []
        file_index = 0
        async for part in form:
            if (part.name or "") not in ("files", "files[]"):
                continue
            data = await part.get_data()
            file_index += 1
            filename = _get_part_filename(part, file_index)
            try:
                parsed = parse_file(bytes(data), filename=filename, content_type=part.content_type)
            except ValidationError as e:
                rejected.append(IngestionError(filename=filename, error=str(e)))
                continue
            inputs.append(
                DocumentCreateInput(
                    original_name=parsed.original_name,
                    content=parsed.text,
                    byte_size=parsed.byte_size,
                )
            )

        if not inputs and not rejected:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "At least one file required"}
            return

        report = await self._load_document.execute_batch(inputs)
        report.errors = rejected + report.errors
        resp.media = _report_to_dict(report)
        resp.status = falcon.HTTP_201 if report.documents else falcon.HTTP_400


class DocumentResource:
    """GET/DELETE /v1/documents/{id}."""

    def __init__(
        self,
        get_document: GetDocumentUseCase,
        delete_document: DeleteDocumentUseCase,
    ) -> None:
        self._get_document = get_document
        self._delete_document = delete_document

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Get document with content."""
        doc_id = _parse_uuid(document_id, resp)
        if doc_id is None:
            return
        try:
            result = await self._get_document.execute(doc_id)
            resp.media = _document_to_dict(result, include_content=True)
            resp.status = falcon.HTTP_200
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Delete document and its chunks."""
        doc_id = _parse_uuid(document_id, resp)
        if doc_id is None:
            return
        try:
            await self._delete_document.execute(doc_id)
            resp.status = falcon.HTTP_204
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}


class DocumentReindexResource:
    """POST /v1/documents/{id}/reindex - rebuild chunks and embeddings."""

    def __init__(self, reindex_document: ReindexDocumentUseCase) -> None:
        self._reindex_document = reindex_document

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        doc_id = _parse_uuid(document_id, resp)
        if doc_id is None:
            return
        try:
            result = await self._reindex_document.execute(doc_id)
            resp.media = _document_to_dict(result)
            resp.status = falcon.HTTP_200
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
        except IngestionFailed as e:
            resp.status = falcon.HTTP_500
            resp.media = {"error": str(e)}


def _parse_uuid(value: str, resp: falcon.asgi.Response) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:
        resp.status = falcon.HTTP_400
        resp.media = {"error": "Invalid document ID"}
        return None
