"""Document parsers: extract plain text from uploaded files."""

from sentrag.infrastructure.document_parsers.base import ParseResult
from sentrag.infrastructure.document_parsers.registry import (
    parse_file,
    supported_extensions,
)

__all__ = ["ParseResult", "parse_file", "supported_extensions"]
