"""Build a hierarchical section tree from markdown, and write it back out."""

import logging
from typing import Iterator, Optional

from ..errors import HeaderTooDeep
from .markdown import scan_sections

logger = logging.getLogger(__name__)

MAX_HEADER_LEVEL = 6

# One past the deepest header level, so the first header is always a child
LOWEST_CHILD_PRECEDENCE = MAX_HEADER_LEVEL + 1


class SectionNode:
    """
    A markdown document or one of its sections, keyed by header title.

    The root node has an empty title and level 0. Every other node's level is
    its parent's level plus one, so moving a subtree re-levels its headers
    when it is written back out.

    Nodes are not thread-safe; callers must serialize mutation of a tree.
    """

    def __init__(self, source: str = "", title: str = "", parent: Optional["SectionNode"] = None):
        self.title = title
        self._parent = parent
        self._children: list["SectionNode"] = []
        self._content = ""

        if parent is not None and not title:
            raise ValueError("Section title must not be empty")
        if not self.is_root and self.level > MAX_HEADER_LEVEL:
            raise HeaderTooDeep(title, self.level)

        self._parse(source)

    @property
    def parent(self) -> Optional["SectionNode"]:
        return self._parent

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def level(self) -> int:
        parent = self.parent
        if parent is None:
            return 0
        return parent.level + 1

    @property
    def own_content(self) -> str:
        """Text between this node's header and its first child header."""
        return self._content

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str) -> None:
        self.set_content(value)

    @property
    def children(self) -> list["SectionNode"]:
        return list(self._children)

    def _parse(self, source: str) -> None:
        """Populate own content and direct children from markdown source."""
        sections = scan_sections(source)

        if not sections:
            self._content = source
            return

        self._content = source[:sections[0].header_span[0]]

        level = self.level
        last_child_level = LOWEST_CHILD_PRECEDENCE
        for section in sections:
            # Sibling or ancestor header: the rest belongs to someone else
            if section.level <= level:
                break

            # Deeper headers are picked up by the previous child's own parse
            if section.level <= last_child_level:
                self._children.append(
                    SectionNode(section.content, title=section.title, parent=self)
                )
                last_child_level = section.level

    def height(self) -> int:
        """Depth of the deepest descendant, relative to this node."""
        if not self._children:
            return 0
        return 1 + max(child.height() for child in self._children)

    def set_content(self, value: str) -> None:
        """
        Replace this node's content and children with parsed markdown.

        The new text is parsed as a standalone document and grafted under this
        node, so its headers are re-leveled relative to this node. Raises
        HeaderTooDeep, leaving the node untouched, if any grafted section
        would go past h6.
        """
        fresh = SectionNode(value)

        deepest = self.level + fresh.height()
        if fresh._children and deepest > MAX_HEADER_LEVEL:
            title = _deepest_title(fresh)
            raise HeaderTooDeep(title, deepest)

        for child in self._children:
            child._parent = None
        for child in fresh._children:
            child._parent = self
        self._children = fresh._children
        self._content = fresh._content
        logger.debug("Replaced content of '%s' (%d children)", self.title, len(self._children))

    def get(self, title: str) -> Optional["SectionNode"]:
        """Return the first direct child with the given title, or None."""
        for child in self._children:
            if child.title == title:
                return child
        return None

    def set(self, title: str, content: str) -> None:
        """Set a direct child's content, appending a new child if needed."""
        if not title:
            raise ValueError("Section title must not be empty")

        child = self.get(title)
        if child is not None:
            child.set_content(content)
            return

        child = SectionNode(title=title, parent=self)
        child.set_content(content)
        self._children.append(child)

    def dig(self, *titles: str) -> Optional["SectionNode"]:
        """Follow a path of titles down the tree; None if any step is missing."""
        node: Optional[SectionNode] = self
        for title in titles:
            node = node.get(title)
            if node is None:
                return None
        return node

    def keys(self) -> list[str]:
        return [child.title for child in self._children]

    def walk(self, depth: int = 0) -> Iterator[tuple["SectionNode", int]]:
        """Yield (node, depth) for every descendant, depth-first."""
        for child in self._children:
            yield child, depth
            yield from child.walk(depth + 1)

    def to_outline(self, max_depth: Optional[int] = None) -> list[dict]:
        """Nested title/level outline of this node's descendants."""
        outline = []
        for child in self._children:
            children = []
            if max_depth is None or child.level < max_depth:
                children = child.to_outline(max_depth)
            outline.append({
                "title": child.title,
                "level": child.level,
                "children": children,
            })
        return outline

    def __getitem__(self, title: str) -> "SectionNode":
        child = self.get(title)
        if child is None:
            raise KeyError(title)
        return child

    def __setitem__(self, title: str, content: str) -> None:
        self.set(title, content)

    def __contains__(self, title: object) -> bool:
        return any(child.title == title for child in self._children)

    def __iter__(self) -> Iterator[tuple[str, "SectionNode"]]:
        for child in list(self._children):
            yield child.title, child

    def __len__(self) -> int:
        return len(self._children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SectionNode):
            return NotImplemented
        return serialize(self) == serialize(other)

    __hash__ = None

    def __str__(self) -> str:
        return serialize(self)

    def __repr__(self) -> str:
        return f"SectionNode(title={self.title!r}, level={self.level}, children={self.keys()!r})"


def _deepest_title(node: SectionNode) -> str:
    deepest, title = -1, node.title
    for child, depth in node.walk():
        if depth > deepest:
            deepest, title = depth, child.title
    return title


def _render(node: SectionNode, include_own_title: bool) -> str:
    parts = []
    if include_own_title and not node.is_root:
        parts.append(f"{'#' * node.level} {node.title}\n")
    parts.append(node.own_content)
    parts.extend(_render(child, True) for child in node._children)
    return "".join(parts)


def serialize(node: SectionNode, include_own_title: bool = True) -> str:
    """
    Write a node and its descendants back out as markdown.

    A newline is appended if the text does not already end with one.
    """
    text = _render(node, include_own_title)
    if not text.endswith("\n"):
        text += "\n"
    return text


def parse_text(content: str) -> SectionNode:
    """Parse markdown text into a root SectionNode."""
    return SectionNode(content)
