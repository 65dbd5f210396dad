"""Exceptions raised by mdtree-mcp."""


class MdTreeError(Exception):
    """Base error for mdtree-mcp."""


class InvalidMarkdownPath(MdTreeError):
    """A markdown path cannot be found, read, or is not allowed."""


class HeaderTooDeep(MdTreeError):
    """A section would be placed below the deepest header level (h6)."""

    def __init__(self, title: str, level: int):
        self.title = title
        self.level = level
        super().__init__(f"Section '{title}' would be at level {level}, deeper than h6")
