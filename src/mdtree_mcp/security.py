"""Security utilities: path validation for documents read and written by the store."""

import logging
from pathlib import Path

from .errors import InvalidMarkdownPath

logger = logging.getLogger(__name__)

# Only these files are treated as markdown documents
DOC_EXTENSIONS = ('.md', '.markdown')


def is_markdown_filename(filename: str) -> bool:
    """Check if a filename has a markdown extension."""
    return Path(filename).suffix.lower() in DOC_EXTENSIONS


def validate_path_traversal(resolved_path: Path, base_path: Path) -> bool:
    """Check that a resolved path is within the base directory (no traversal/symlink escape)."""
    try:
        resolved_path.relative_to(base_path)
        return True
    except ValueError:
        return False


def resolve_document_path(path: str, base_path: Path) -> Path:
    """
    Resolve a document path against a base directory.

    Relative paths are joined to the base. Symlinks are resolved before the
    traversal check, so a link pointing outside the base is rejected too.

    Raises:
        InvalidMarkdownPath: the path escapes the base or is not a markdown file
    """
    base = base_path.resolve()
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = base / candidate
    resolved = candidate.resolve()

    if not validate_path_traversal(resolved, base):
        logger.warning("Path traversal detected, rejecting: %s", path)
        raise InvalidMarkdownPath(f"Path escapes document root: {path}")

    if not is_markdown_filename(resolved.name):
        logger.warning("Not a markdown file, rejecting: %s", path)
        raise InvalidMarkdownPath(f"Not a markdown file: {path}")

    return resolved
