"""API resource tests."""

from unittest.mock import AsyncMock
from uuid import UUID, uuid4

from falcon.testing import TestClient

from sentrag.domain.value_objects import ChunkMatch
from sentrag.infrastructure.text import normalize_text
from sentrag.interfaces.api.resources.documents import (
    _decode_filename,
    _get_part_filename,
    _parse_filename_star,
)

from tests.conftest import FakeUnitOfWork

TEXT = (
    "Colombo is the commercial capital of Sri Lanka. "
    "Kandy is known for the Temple of the Tooth. "
    "Galle has a fort built by the Portuguese."
)


def _multipart(files: list[tuple[str, str, str]], boundary: str = "----TestBoundary") -> tuple[bytes, dict]:
    parts = []
    for disposition, content_type, content in files:
        parts.append(
            f"--{boundary}\r\n"
            f"Content-Disposition: form-data; name=\"files\"; {disposition}\r\n"
            f"Content-Type: {content_type}\r\n\r\n"
            f"{content}\r\n"
        )
    body = ("".join(parts) + f"--{boundary}--\r\n").encode("utf-8")
    return body, {"Content-Type": f"multipart/form-data; boundary={boundary}"}


def _upload(client: TestClient, name: str = "cities.txt", content: str = TEXT) -> dict:
    r = client.simulate_post("/v1/documents", json={"name": name, "content": content})
    assert r.status_code == 201
    return r.json


class TestDecodeFilename:
    """Tests for _decode_filename (encoding fixes)."""

    def test_decode_filename_none_or_empty(self) -> None:
        assert _decode_filename(None) == ""
        assert _decode_filename("") == ""
        assert _decode_filename("   ") == ""

    def test_decode_filename_ascii_unchanged(self) -> None:
        assert _decode_filename("test.txt") == "test.txt"

    def test_decode_filename_sinhala_unchanged(self) -> None:
        assert _decode_filename("ලිපිය.txt") == "ලිපිය.txt"

    def test_decode_filename_mojibake_utf8_as_latin1(self) -> None:
        # UTF-8 bytes for "ලංකාව" were decoded as Latin-1
        mojibake = "ලංකාව".encode("utf-8").decode("latin-1")
        assert _decode_filename(mojibake) == "ලංකාව"


class TestParseFilenameStar:
    """Tests for RFC 5987 filename* parsing from raw Content-Disposition."""

    def test_parse_filename_star_utf8(self) -> None:
        # filename*=UTF-8''%E0%B6%BD%E0%B6%82%E0%B6%9A%E0%B7%8F%E0%B7%80.txt is "ලංකාව.txt"
        raw = b"form-data; name=\"files\"; filename*=UTF-8''%E0%B6%BD%E0%B6%82%E0%B6%9A%E0%B7%8F%E0%B7%80.txt"
        assert _parse_filename_star(raw) == "ලංකාව.txt"

    def test_parse_filename_star_missing_returns_none(self) -> None:
        raw = b'form-data; name="files"; filename="test.txt"'
        assert _parse_filename_star(raw) is None

    def test_parse_filename_star_empty_returns_none(self) -> None:
        assert _parse_filename_star(b"") is None


class TestGetPartFilename:
    """Tests for _get_part_filename with mock part."""

    def test_get_part_filename_uses_fallback_when_empty(self) -> None:
        part = type("Part", (), {"filename": "", "_headers": {}})()
        assert _get_part_filename(part, 1) == "file_1.txt"

    def test_get_part_filename_uses_filename_star_from_headers_when_filename_empty(self) -> None:
        part = type(
            "Part",
            (),
            {
                "filename": "",
                "_headers": {
                    b"content-disposition": b"form-data; name=\"files\"; filename*=UTF-8''notes%20v2.txt",
                },
            },
        )()
        assert _get_part_filename(part, 1) == "notes v2.txt"

    def test_get_part_filename_prefers_part_filename(self) -> None:
        part = type("Part", (), {"filename": "given.txt", "_headers": {}})()
        assert _get_part_filename(part, 1) == "given.txt"


class TestHealthAndCors:
    def test_health_ok(self, client: TestClient) -> None:
        r = client.simulate_get("/v1/health")
        assert r.status_code == 200
        assert r.json["status"] == "ok"
        assert r.headers["Access-Control-Allow-Origin"] == "*"

    def test_options_preflight(self, client: TestClient) -> None:
        r = client.simulate_options("/v1/search", headers={"Origin": "http://localhost:3000"})
        assert r.status_code == 200
        assert "POST" in r.headers["Access-Control-Allow-Methods"]


class TestDocuments:
    def test_post_document(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        data = _upload(client)
        assert data["display_name"] == "cities"
        assert data["original_name"] == "cities.txt"
        assert data["chunk_count"] > 1
        assert "content" not in data
        assert UUID(data["id"]) in fake_uow.documents._by_id

    def test_post_document_bad_body(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/documents", json={"name": "a.txt"})
        assert r.status_code == 400
        assert "error" in r.json

    def test_post_document_blank_content(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/documents", json={"name": "a.txt", "content": "   "})
        assert r.status_code == 400

    def test_post_document_storage_failure(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.chunks.fail_writes = True
        r = client.simulate_post("/v1/documents", json={"name": "a.txt", "content": TEXT})
        assert r.status_code == 500
        assert "a.txt" in r.json["error"]

    def test_post_documents_multipart(self, client: TestClient) -> None:
        body, headers = _multipart([('filename="test.txt"', "text/plain", "Hello upload. Second line.")])
        r = client.simulate_post("/v1/documents", body=body, headers=headers)
        assert r.status_code == 201
        assert [d["original_name"] for d in r.json["documents"]] == ["test.txt"]
        assert r.json["errors"] == []

    def test_post_documents_multipart_rejects_binary(self, client: TestClient) -> None:
        body, headers = _multipart(
            [
                ('filename="notes.txt"', "text/plain", "Plain text file."),
                ('filename="report.pdf"', "application/pdf", "%PDF-1.4"),
            ]
        )
        r = client.simulate_post("/v1/documents", body=body, headers=headers)
        assert r.status_code == 201
        assert len(r.json["documents"]) == 1
        assert [e["filename"] for e in r.json["errors"]] == ["report.pdf"]

    def test_post_documents_multipart_only_rejected(self, client: TestClient) -> None:
        body, headers = _multipart([('filename="report.pdf"', "application/pdf", "%PDF-1.4")])
        r = client.simulate_post("/v1/documents", body=body, headers=headers)
        assert r.status_code == 400
        assert r.json["documents"] == []

    def test_list_documents_with_totals(self, client: TestClient) -> None:
        first = _upload(client, "a.txt")
        second = _upload(client, "b.txt", "Another document. With two sentences.")
        r = client.simulate_get("/v1/documents")
        assert r.status_code == 200
        assert r.json["total_files"] == 2
        assert r.json["total_chunks"] == first["chunk_count"] + second["chunk_count"]
        assert r.json["total_size"] == first["byte_size"] + second["byte_size"]

    def test_get_document(self, client: TestClient) -> None:
        created = _upload(client)
        r = client.simulate_get(f"/v1/documents/{created['id']}")
        assert r.status_code == 200
        assert r.json["content"] == TEXT

    def test_get_document_invalid_and_missing(self, client: TestClient) -> None:
        assert client.simulate_get("/v1/documents/not-a-uuid").status_code == 400
        assert client.simulate_get(f"/v1/documents/{uuid4()}").status_code == 404

    def test_delete_document(self, client: TestClient) -> None:
        created = _upload(client)
        r = client.simulate_delete(f"/v1/documents/{created['id']}")
        assert r.status_code == 204
        assert client.simulate_get(f"/v1/documents/{created['id']}").status_code == 404
        assert client.simulate_delete(f"/v1/documents/{created['id']}").status_code == 404

    def test_reindex_document(self, client: TestClient) -> None:
        created = _upload(client)
        r = client.simulate_post(f"/v1/documents/{created['id']}/reindex")
        assert r.status_code == 200
        assert r.json["chunk_count"] == created["chunk_count"]
        assert client.simulate_post(f"/v1/documents/{uuid4()}/reindex").status_code == 404

    def test_unhandled_error_returns_500(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        fake_uow.documents.list = AsyncMock(side_effect=RuntimeError("boom"))
        r = client.simulate_get("/v1/documents")
        assert r.status_code == 500


class TestSearch:
    def test_search_returns_labeled_highlighted_snippets(
        self, client: TestClient, fake_uow: FakeUnitOfWork
    ) -> None:
        created = _upload(client)
        document_id = UUID(created["id"])
        chunks = fake_uow.chunks._by_id.values()
        first = min(chunks, key=lambda c: c.start_offset)
        fake_uow.chunks.set_search_results(
            [
                ChunkMatch(
                    chunk_id=first.id,
                    document_id=document_id,
                    content=first.content,
                    start=first.start_offset,
                    end=first.end_offset,
                    similarity=0.87654321,
                )
            ]
        )

        r = client.simulate_post("/v1/search", json={"query": "capital Colombo"})

        assert r.status_code == 200
        assert r.json["query"] == "capital Colombo"
        assert r.json["answer"] == "Colombo is the commercial capital of Sri Lanka"
        snippet = r.json["snippets"][0]
        assert snippet["file"] == "cities.txt"
        assert snippet["similarity"] == 0.876543
        assert "<mark>Colombo</mark>" in snippet["highlighted"]
        assert r.json["groups"] == [{"file": "cities.txt", "chunk_ids": [str(first.id)]}]

    def test_search_no_results(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/search", json={"query": "nothing here", "strict": False})
        assert r.status_code == 200
        assert r.json["snippets"] == []
        assert r.json["answer"] == ""

    def test_search_limit_is_capped(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        client.simulate_post("/v1/search", json={"query": "q", "limit": 1000})
        assert fake_uow.chunks.search_calls[0]["match_count"] == 100

    def test_search_blank_query(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/search", json={"query": "   "})
        assert r.status_code == 400

    def test_search_bad_body(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/search", json=["not", "an", "object"])
        assert r.status_code == 400
        r = client.simulate_post("/v1/search", json={"query": "q", "limit": "many"})
        assert r.status_code == 400


class TestSnippetExpand:
    def test_expand_snippet(self, client: TestClient, fake_uow: FakeUnitOfWork) -> None:
        _upload(client)
        chunk = min(fake_uow.chunks._by_id.values(), key=lambda c: c.start_offset)
        r = client.simulate_post(
            "/v1/snippets/expand",
            json={
                "chunk_id": str(chunk.id),
                "start": chunk.start_offset,
                "end": chunk.end_offset,
                "text": chunk.content,
                "context_size": 10_000,
            },
        )
        assert r.status_code == 200
        assert r.json["expanded_text"] == normalize_text(TEXT)

    def test_expand_unknown_chunk_echoes_text(self, client: TestClient) -> None:
        r = client.simulate_post(
            "/v1/snippets/expand",
            json={"chunk_id": str(uuid4()), "start": 0, "end": 4, "text": "text"},
        )
        assert r.status_code == 200
        assert r.json["expanded_text"] == "text"

    def test_expand_missing_fields(self, client: TestClient) -> None:
        r = client.simulate_post("/v1/snippets/expand", json={"text": "x"})
        assert r.status_code == 400
