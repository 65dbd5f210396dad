"""Document storage."""

from .document_store import DocumentStore

__all__ = ["DocumentStore"]
