"""sentrag - sentence-aware document chunking and retrieval service."""

__version__ = "0.1.0"
