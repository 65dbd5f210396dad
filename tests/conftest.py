"""Shared test fixtures for mdtree-mcp tests."""

import pytest


@pytest.fixture
def basic_markdown():
    """Return markdown content with a normal header hierarchy."""
    return (
        "# H1-1\n"
        "H1-1-content\n"
        "\n"
        "## H2-1\n"
        "H2-1-content\n"
        "\n"
        "## H2-2\n"
        "H2-2-content\n"
        "\n"
        "### H3-1\n"
        "H3-1-content\n"
        "\n"
    )


@pytest.fixture
def sample_markdown():
    """Return sample markdown content with preamble, code blocks and several levels."""
    return """Preamble before any header.

# Getting Started

Welcome to the documentation.

## Installation

Install with pip:

```bash
# this is a shell comment, not a header
pip install my-package
```

## Configuration

### Basic Config

Set environment variables.

### Advanced Config

~~~yaml
# also not a header
server:
  port: 8080
~~~

## API Reference

#### GET /users

Returns a list of users.
"""


@pytest.fixture
def skip_markdown():
    """Return markdown content that skips header levels."""
    return (
        "# Title\n"
        "intro\n"
        "\n"
        "### Skipped\n"
        "deep\n"
        "\n"
        "## Normal\n"
        "text\n"
        "\n"
        "#### Deep skip\n"
        "more\n"
    )


@pytest.fixture
def skip_fixed_markdown():
    """Return the skip-level content as it is written back out."""
    return (
        "# Title\n"
        "intro\n"
        "\n"
        "## Skipped\n"
        "deep\n"
        "\n"
        "## Normal\n"
        "text\n"
        "\n"
        "### Deep skip\n"
        "more\n"
    )


@pytest.fixture
def six_levels():
    """Return markdown nested through all six header levels."""
    return "".join(f"{'#' * n} L{n}\ncontent {n}\n" for n in range(1, 7))


@pytest.fixture
def doc_root(tmp_path, basic_markdown):
    """Create a temporary document root with a few markdown files."""
    (tmp_path / "README.md").write_text(basic_markdown, encoding="utf-8")

    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "guide.md").write_text(
        "# Guide\n\n## Getting Started\n\nStart here.\n\n## Advanced\n\nAdvanced topics.\n",
        encoding="utf-8",
    )

    # Not documents
    (tmp_path / "notes.txt").write_text("# Not markdown\n", encoding="utf-8")
    hidden = tmp_path / ".hidden"
    hidden.mkdir()
    (hidden / "secret.md").write_text("# Hidden\n", encoding="utf-8")

    return tmp_path
