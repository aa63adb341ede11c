"""Base protocol for document parsers."""

from typing import Protocol


class ParseResult:
    """Result of parsing an upload: decoded text plus file metadata."""

    __slots__ = ("text", "original_name", "byte_size")

    def __init__(self, text: str, original_name: str, byte_size: int) -> None:
        self.text = text
        self.original_name = original_name
        self.byte_size = byte_size


class DocumentParser(Protocol):
    """Parser that extracts text from file bytes."""

    def __call__(self, data: bytes, filename: str) -> ParseResult:
        """Extract text. Raises on unsupported format or parse error."""
        ...
