"""LLM adapters."""

from sentrag.infrastructure.llm.openai_summarizer import OpenAISummarizer

__all__ = ["OpenAISummarizer"]
