"""Summarizer port - LLM answer generation from retrieved snippets."""

from typing import Protocol


class Summarizer(Protocol):
    """Port for generating a short answer to a query from snippet texts."""

    async def summarize(self, query: str, snippets: list[str]) -> str: ...
