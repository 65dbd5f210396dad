"""Markdown document storage and retrieval."""

import logging
import os
from pathlib import Path
from typing import Optional

from ..errors import InvalidMarkdownPath
from ..parser.hierarchy import SectionNode, parse_text, serialize
from ..security import DOC_EXTENSIONS, resolve_document_path, validate_path_traversal

logger = logging.getLogger(__name__)


class DocumentStore:
    """Reads and writes markdown documents under a root directory."""

    def __init__(self, base_path: Optional[str] = None):
        if base_path:
            self.base_path = Path(base_path)
        else:
            # Default to $MDTREE_ROOT, then the working directory
            self.base_path = Path(os.environ.get("MDTREE_ROOT") or os.getcwd())
        self.base_path = self.base_path.resolve()

    def resolve(self, path: str) -> Path:
        """Resolve a document path, rejecting anything outside the root."""
        return resolve_document_path(path, self.base_path)

    def relative(self, path: Path) -> str:
        """Path of a resolved document relative to the root, with forward slashes."""
        return path.relative_to(self.base_path).as_posix()

    def read_text(self, path: str) -> str:
        """
        Read a document's raw markdown.

        Raises:
            InvalidMarkdownPath: the file is missing, unreadable or not allowed
        """
        file_path = self.resolve(path)
        if not file_path.is_file():
            raise InvalidMarkdownPath(f"Could not find markdown file at {path}")

        try:
            # newline='' keeps line endings as written
            with open(file_path, "r", encoding="utf-8", newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidMarkdownPath(f"Could not read markdown file at {path}: {e}") from e

        logger.debug("Read %d chars from %s", len(content), file_path)
        return content

    def load(self, path: str) -> SectionNode:
        """Load and parse a document."""
        return parse_text(self.read_text(path))

    def save(self, path: str, document: SectionNode, create_dir: bool = True) -> Path:
        """
        Write a document back out as markdown.

        Args:
            path: Document path, relative to the root
            document: The document (or section) to write
            create_dir: Create missing parent directories

        Returns:
            The resolved path written to
        """
        file_path = self.resolve(path)
        if create_dir:
            file_path.parent.mkdir(parents=True, exist_ok=True)

        file_path.write_text(serialize(document), encoding="utf-8", newline="")
        logger.debug("Wrote %s", file_path)
        return file_path

    def list_documents(self, max_depth: int = 5) -> list[str]:
        """List markdown documents under the root, as sorted relative paths."""
        documents: list[str] = []

        def walk(directory: Path, depth: int) -> None:
            if depth > max_depth:
                return
            try:
                entries = sorted(directory.iterdir())
            except OSError as e:
                logger.warning("Could not list %s: %s", directory, e)
                return

            for entry in entries:
                if entry.name.startswith('.'):
                    continue
                if not validate_path_traversal(entry.resolve(), self.base_path):
                    logger.warning("Symlink escapes document root, skipping: %s", entry)
                    continue
                if entry.is_dir():
                    walk(entry, depth + 1)
                elif entry.suffix.lower() in DOC_EXTENSIONS:
                    documents.append(self.relative(entry))

        walk(self.base_path, 0)
        return sorted(documents)
