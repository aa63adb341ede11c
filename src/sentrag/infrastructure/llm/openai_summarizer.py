"""OpenAI-compatible chat summarizer for search answers."""

from openai import AsyncOpenAI

SYSTEM_PROMPT = (
    "You answer questions using only the provided excerpts. "
    "Reply in the language of the question with one or two sentences. "
    "If the excerpts do not contain the answer, say so briefly."
)


class OpenAISummarizer:
    """Summarizer using an OpenAI-compatible chat completions API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
        max_tokens: int = 256,
    ) -> None:
        self._client = AsyncOpenAI(base_url=base_url, api_key=api_key)
        self._model = model
        self._max_tokens = max_tokens

    async def summarize(self, query: str, snippets: list[str]) -> str:
        """Ask the model for a short answer grounded in the snippets."""
        excerpts = "\n\n".join(f"[{i}] {s}" for i, s in enumerate(snippets, start=1))
        response = await self._client.chat.completions.create(
            model=self._model,
            max_tokens=self._max_tokens,
            temperature=0,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": f"Excerpts:\n{excerpts}\n\nQuestion: {query}"},
            ],
        )
        answer = response.choices[0].message.content if response.choices else None
        if not answer or not answer.strip():
            raise ValueError("Summarizer returned an empty answer")
        return answer.strip()
