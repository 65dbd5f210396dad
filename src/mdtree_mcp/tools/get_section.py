"""Tool to get a specific section's content."""

from typing import Optional

from ..errors import MdTreeError
from ..parser.hierarchy import serialize
from ..storage.document_store import DocumentStore


def format_section_path(titles: list[str]) -> str:
    """Human-readable path of section titles."""
    return " > ".join(titles) if titles else "(document)"


def get_section(
    file_path: str,
    titles: list[str],
    storage_path: Optional[str] = None,
    include_title: bool = True,
) -> dict:
    """
    Get the full content of a section, including its subsections.

    Args:
        file_path: Path of the document, relative to the document root
        titles: Header titles from the top of the document down to the section;
            an empty list selects the whole document
        storage_path: Custom document root (defaults to $MDTREE_ROOT or cwd)
        include_title: Whether to include the section's own header line

    Returns:
        Dict with section content and metadata
    """
    store = DocumentStore(storage_path)
    try:
        document = store.load(file_path)
    except MdTreeError as e:
        return {"error": str(e)}

    section = document.dig(*titles)
    if section is None:
        return {"error": f"Section not found: {format_section_path(titles)}"}

    return {
        "file": file_path,
        "path": format_section_path(titles),
        "title": section.title,
        "level": section.level,
        "keys": section.keys(),
        "content": serialize(section, include_own_title=include_title),
    }
