"""Read and write markdown documents as nested sections keyed by header title."""

from pathlib import Path

from .errors import MdTreeError, InvalidMarkdownPath, HeaderTooDeep
from .parser import SectionNode, parse_text, serialize
from .storage.document_store import DocumentStore

__version__ = "0.1.0"


def markdown(content: str = "") -> SectionNode:
    """Create a document from markdown content."""
    return parse_text(content)


def markdown_file(path: str) -> SectionNode:
    """
    Create a document from a file.

    Any readable file is parsed; only the rooted DocumentStore restricts
    paths and extensions.

    Raises:
        InvalidMarkdownPath: the file is missing or unreadable
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise InvalidMarkdownPath(f"Could not find markdown file at {path}")

    try:
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidMarkdownPath(f"Could not read markdown file at {path}: {e}") from e

    return parse_text(content)


md = markdown
md_file = markdown_file

__all__ = [
    "MdTreeError",
    "InvalidMarkdownPath",
    "HeaderTooDeep",
    "SectionNode",
    "DocumentStore",
    "parse_text",
    "serialize",
    "markdown",
    "markdown_file",
    "md",
    "md_file",
]
