"""Tool to get the section outline of a markdown document."""

from typing import Optional

from ..errors import MdTreeError
from ..storage.document_store import DocumentStore


def get_outline(
    file_path: str,
    storage_path: Optional[str] = None,
    max_depth: Optional[int] = None,
) -> dict:
    """
    Get the hierarchical outline of a single document.

    Args:
        file_path: Path of the document, relative to the document root
        storage_path: Custom document root (defaults to $MDTREE_ROOT or cwd)
        max_depth: Only expand sections with level <= this value

    Returns:
        Dict with the nested outline, or an error
    """
    store = DocumentStore(storage_path)
    try:
        document = store.load(file_path)
    except MdTreeError as e:
        return {"error": str(e)}

    section_count = sum(1 for _ in document.walk())
    return {
        "file": file_path,
        "section_count": section_count,
        "keys": document.keys(),
        "outline": document.to_outline(max_depth),
    }
