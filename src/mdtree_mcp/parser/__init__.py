"""Markdown parsing utilities."""

from .markdown import Section, scan_sections, find_code_blocks
from .hierarchy import SectionNode, parse_text, serialize, MAX_HEADER_LEVEL

__all__ = [
    "Section",
    "scan_sections",
    "find_code_blocks",
    "SectionNode",
    "parse_text",
    "serialize",
    "MAX_HEADER_LEVEL",
]
