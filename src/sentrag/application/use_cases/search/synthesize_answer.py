"""Answer synthesis - extractive sentence selection or LLM summary."""

import logging
import re

from sentrag.application.dto.search_dto import Snippet
from sentrag.application.ports import Summarizer
from sentrag.infrastructure.text import SENTENCE_TERMINATORS

logger = logging.getLogger(__name__)

MIN_CANDIDATE_LENGTH = 20

_CANDIDATE_SPLIT = re.compile(f"[{re.escape(SENTENCE_TERMINATORS)}]")


def _matches(word: str, sentence: str) -> bool:
    # Dropping the last character tolerates simple suffix variation.
    return word in sentence or (len(word) > 1 and word[:-1] in sentence)


def extractive_answer(query: str, context: str) -> str:
    """First candidate sentence sharing min(2, len(query words)) words with the query.

    Candidates shorter than MIN_CANDIDATE_LENGTH are ignored. When no candidate
    reaches the threshold the first candidate is returned; with no candidates
    the answer is empty.
    """
    candidates = [
        s.strip() for s in _CANDIDATE_SPLIT.split(context) if len(s.strip()) > MIN_CANDIDATE_LENGTH
    ]
    if not candidates:
        return ""

    query_words = query.lower().split()
    required = min(2, len(query_words))
    for candidate in candidates:
        lowered = candidate.lower()
        if sum(1 for w in query_words if _matches(w, lowered)) >= required:
            return candidate
    return candidates[0]


class AnswerSynthesizer:
    """Produces the short answer shown above search results."""

    def __init__(self, summarizer: Summarizer | None = None) -> None:
        self._summarizer = summarizer

    async def synthesize(self, query: str, snippets: list[Snippet], use_llm: bool = False) -> str:
        """Answer the query from the given top snippets."""
        texts = [s.text for s in snippets]
        combined = " ".join(texts)
        if not combined:
            return ""

        if not use_llm or self._summarizer is None:
            return extractive_answer(query, combined)

        try:
            return await self._summarizer.summarize(query, texts)
        except Exception as exc:
            logger.warning("LLM summarization failed, using extractive answer: %s", exc)
            return extractive_answer(query, combined)
