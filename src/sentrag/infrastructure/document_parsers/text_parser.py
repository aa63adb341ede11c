"""Parser for plain text uploads."""

from sentrag.infrastructure.document_parsers.base import ParseResult


def decode_text(data: bytes) -> str:
    """UTF-8 first, then cp1251, then UTF-8 with replacement characters."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        try:
            return data.decode("cp1251")
        except UnicodeDecodeError:
            return data.decode("utf-8", errors="replace")


def parse_txt(data: bytes, filename: str) -> ParseResult:
    """Plain text (.txt)."""
    return ParseResult(text=decode_text(data), original_name=filename, byte_size=len(data))


def parse_md(data: bytes, filename: str) -> ParseResult:
    """Markdown (.md) - stored as plain text."""
    return parse_txt(data, filename)
