"""Registry: select parser by extension/MIME for plain-text uploads."""

from pathlib import Path

from sentrag.domain.exceptions import UnsupportedFileType
from sentrag.infrastructure.document_parsers.base import DocumentParser, ParseResult
from sentrag.infrastructure.document_parsers.text_parser import parse_md, parse_txt

# extension (lower) -> parse function
_PARSERS_BY_EXT: dict[str, DocumentParser] = {
    "txt": parse_txt,
    "md": parse_md,
}

_MIME_TO_EXT: dict[str, str] = {
    "text/plain": "txt",
    "text/markdown": "md",
}


def get_parser_for_filename(filename: str | None) -> DocumentParser | None:
    """Return parse function for given filename (by extension) or None."""
    if not filename:
        return None
    ext = Path(filename).suffix.lstrip(".").lower()
    return _PARSERS_BY_EXT.get(ext)


def get_parser_for_content_type(content_type: str | None) -> DocumentParser | None:
    """Return parse function for MIME type or None."""
    if not content_type:
        return None
    mime = content_type.split(";")[0].strip().lower()
    ext = _MIME_TO_EXT.get(mime)
    if not ext:
        return None
    return _PARSERS_BY_EXT.get(ext)


def parse_file(
    data: bytes,
    filename: str,
    content_type: str | None = None,
) -> ParseResult:
    """Select parser by filename extension or content_type and run it.

    Raises UnsupportedFileType if the upload is not plain text.
    """
    parser = get_parser_for_filename(filename) or get_parser_for_content_type(content_type)
    if not parser:
        ext = Path(filename).suffix or content_type or "unknown"
        raise UnsupportedFileType(f"Only plain text files are supported, got: {ext}")
    return parser(data, filename)


def supported_extensions() -> list[str]:
    """Return list of supported file extensions (e.g. for frontend accept attribute)."""
    return sorted(_PARSERS_BY_EXT.keys())
