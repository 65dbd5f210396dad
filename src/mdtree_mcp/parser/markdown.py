"""Markdown scanning to extract header sections, skipping fenced code."""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# A fence opener (3+ backticks or tildes, optional info string) up to the first
# line holding only the same fence character, at least as long as the opener.
# Closers may end in \r so CRLF documents keep their code blocks.
FENCE_PATTERN = re.compile(
    r'^(?P<fence>(?P<char>[`~])(?P=char){2,})(?!(?P=char))[^\n]*\n'
    r'.*?'
    r'^(?P=fence)(?P=char)*[ \t\r]*$',
    re.MULTILINE | re.DOTALL,
)

# ATX header: 1-6 '#', whitespace, then a non-empty title
HEADER_PATTERN = re.compile(r'^(?P<hashes>#{1,6})[ \t]+(?P<title>\S.*)$', re.MULTILINE)


@dataclass
class Section:
    """A header found in markdown, with everything after it."""
    title: str
    level: int
    header_span: tuple[int, int]
    content_span: tuple[int, int]
    content: str = ""


def find_code_blocks(content: str) -> list[tuple[int, int]]:
    """
    Find fenced code blocks in markdown content.

    Returns (start, end) offsets for each block, end exclusive. A fence that
    is never closed is not a code block.
    """
    return [m.span() for m in FENCE_PATTERN.finditer(content)]


def _in_code_block(offset: int, blocks: list[tuple[int, int]]) -> bool:
    return any(start <= offset < end for start, end in blocks)


def scan_sections(content: str) -> list[Section]:
    """
    Scan markdown content for ATX header sections.

    Every section's content runs from just after its header line to the end
    of the text, not to the next header; nested sections are separated by
    re-scanning each section's content.
    """
    blocks = find_code_blocks(content)
    end = len(content)
    sections: list[Section] = []

    for match in HEADER_PATTERN.finditer(content):
        if _in_code_block(match.start(), blocks):
            continue

        # Skip the newline ending the header line, if there is one
        content_start = min(match.end() + 1, end)
        sections.append(Section(
            title=match.group('title'),
            level=len(match.group('hashes')),
            header_span=match.span(),
            content_span=(content_start, end),
            content=content[content_start:end],
        ))

    logger.debug("Scanned %d sections (%d code blocks)", len(sections), len(blocks))
    return sections
