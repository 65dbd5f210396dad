"""Tool to list markdown documents under the document root."""

from typing import Optional

from ..storage.document_store import DocumentStore


def list_documents(storage_path: Optional[str] = None, max_depth: int = 5) -> dict:
    """List all markdown documents under the document root."""
    store = DocumentStore(storage_path)
    documents = store.list_documents(max_depth=max_depth)
    return {
        "root": str(store.base_path),
        "count": len(documents),
        "documents": documents,
    }
