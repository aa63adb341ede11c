"""Text spans produced by the sentence tokenizer and the chunker."""

from dataclasses import dataclass

from sentrag.domain.exceptions import InvalidChunkOffsets


@dataclass(frozen=True)
class Sentence:
    """Sentence text with its [start, end) offsets in the normalized text."""

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class TextChunk:
    """Chunk content with [start, end) offsets in the normalized text."""

    content: str
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start < self.end:
            raise InvalidChunkOffsets(
                f"Chunk offsets out of order: start={self.start}, end={self.end}"
            )
