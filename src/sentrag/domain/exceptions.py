"""Domain exceptions."""


class SentRAGError(Exception):
    """Base exception for sentrag."""

    pass


class NotFound(SentRAGError):
    """Requested resource was not found."""

    pass


class ValidationError(SentRAGError):
    """Validation failed for input data."""

    pass


class UnsupportedFileType(ValidationError):
    """Uploaded file is not plain text."""

    pass


class IngestionFailed(SentRAGError):
    """Document or chunk persistence failed while ingesting one file."""

    def __init__(self, filename: str, reason: str = "") -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Ingestion failed for {filename}" + (f": {reason}" if reason else ""))


class InvariantViolation(SentRAGError):
    """Internal invariant broken - indicates a programming error."""

    pass


class EmbeddingDimensionMismatch(InvariantViolation):
    """Embedding vector does not have the pipeline-wide dimension."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected embedding of dimension {expected}, got {actual}")


class InvalidChunkOffsets(InvariantViolation):
    """Chunk offsets fall outside the normalized text or are inverted."""

    pass
