"""Search DTOs: input, snippets and aggregate result."""

from dataclasses import dataclass, field
from uuid import UUID

UNKNOWN_FILE_LABEL = "Unknown file"


@dataclass
class SearchInput:
    """Input for semantic search."""

    query: str
    limit: int = 8
    strict: bool = True
    use_llm: bool = False


@dataclass
class Snippet:
    """Retrieved chunk enriched with its file label and similarity."""

    chunk_id: UUID
    document_id: UUID | None
    file_label: str
    text: str
    start: int
    end: int
    similarity: float = 0.0
    expanded_text: str | None = None


@dataclass
class SearchResult:
    """Answer plus ranked snippets for one query."""

    query: str
    answer: str = ""
    snippets: list[Snippet] = field(default_factory=list)

    def grouped_by_file(self) -> dict[str, list[Snippet]]:
        """Snippets grouped by file label; groups and members keep rank order."""
        groups: dict[str, list[Snippet]] = {}
        for snippet in self.snippets:
            groups.setdefault(snippet.file_label, []).append(snippet)
        return groups
