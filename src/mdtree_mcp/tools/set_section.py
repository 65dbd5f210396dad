"""Tool to replace or add a section in a markdown document."""

import logging
import os
from typing import Optional

from ..errors import MdTreeError
from ..storage.document_store import DocumentStore
from .get_section import format_section_path

logger = logging.getLogger(__name__)


def _read_only() -> bool:
    return os.environ.get('MDTREE_READ_ONLY', '').lower() in ('true', '1', 'yes')


def set_section(
    file_path: str,
    titles: list[str],
    content: str,
    storage_path: Optional[str] = None,
) -> dict:
    """
    Replace a section's content, or append it if it does not exist yet.

    Headers in the new content are re-leveled under the section, so "# Foo"
    written into a level-2 section becomes a level-3 "### Foo". Every section
    above the last title must already exist.

    Args:
        file_path: Path of the document, relative to the document root
        titles: Header titles from the top of the document down to the section
        content: Markdown content for the section, without its own header line
        storage_path: Custom document root (defaults to $MDTREE_ROOT or cwd)

    Returns:
        Dict with the written section's metadata, or an error
    """
    if _read_only():
        logger.warning("Write blocked in read-only mode: %s", file_path)
        return {"error": "Writes are disabled (MDTREE_READ_ONLY is set)"}

    if not titles:
        return {"error": "At least one section title is required"}

    store = DocumentStore(storage_path)
    try:
        document = store.load(file_path)
    except MdTreeError as e:
        return {"error": str(e)}

    parent = document.dig(*titles[:-1])
    if parent is None:
        return {"error": f"Section not found: {format_section_path(titles[:-1])}"}

    # Keep the next section's header on its own line
    if content and not content.endswith("\n"):
        content += "\n"

    created = titles[-1] not in parent
    try:
        parent.set(titles[-1], content)
        store.save(file_path, document)
    except (MdTreeError, ValueError, OSError) as e:
        return {"error": str(e)}

    section = parent[titles[-1]]
    return {
        "success": True,
        "file": file_path,
        "path": format_section_path(titles),
        "level": section.level,
        "created": created,
        "keys": section.keys(),
    }
