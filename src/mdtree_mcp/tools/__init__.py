"""MCP tool implementations."""

from .list_documents import list_documents
from .get_outline import get_outline
from .get_section import get_section
from .set_section import set_section

__all__ = ["list_documents", "get_outline", "get_section", "set_section"]
