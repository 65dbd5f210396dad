"""Tests for MCP tool implementations."""

from mdtree_mcp.tools.get_outline import get_outline
from mdtree_mcp.tools.get_section import format_section_path, get_section
from mdtree_mcp.tools.list_documents import list_documents
from mdtree_mcp.tools.set_section import set_section


class TestListDocuments:
    def test_basic(self, doc_root):
        result = list_documents(storage_path=str(doc_root))
        assert result["count"] == 2
        assert result["documents"] == ["README.md", "docs/guide.md"]

    def test_empty_root(self, tmp_path):
        result = list_documents(storage_path=str(tmp_path))
        assert result["count"] == 0


class TestGetOutline:
    def test_basic(self, doc_root):
        result = get_outline("README.md", storage_path=str(doc_root))
        assert "error" not in result
        assert result["keys"] == ["H1-1"]
        assert result["section_count"] == 4
        h1 = result["outline"][0]
        assert h1["title"] == "H1-1"
        assert [c["title"] for c in h1["children"]] == ["H2-1", "H2-2"]

    def test_max_depth(self, doc_root):
        result = get_outline("README.md", storage_path=str(doc_root), max_depth=2)
        h22 = result["outline"][0]["children"][1]
        assert h22["title"] == "H2-2"
        assert h22["children"] == []

    def test_missing_file(self, doc_root):
        result = get_outline("missing.md", storage_path=str(doc_root))
        assert "error" in result

    def test_traversal_rejected(self, doc_root):
        result = get_outline("../outside.md", storage_path=str(doc_root))
        assert "error" in result


class TestGetSection:
    def test_nested_section(self, doc_root):
        result = get_section("README.md", ["H1-1", "H2-2", "H3-1"], storage_path=str(doc_root))
        assert "error" not in result
        assert result["level"] == 3
        assert result["content"] == "### H3-1\nH3-1-content\n\n"
        assert result["path"] == "H1-1 > H2-2 > H3-1"

    def test_without_title(self, doc_root):
        result = get_section(
            "README.md", ["H1-1", "H2-1"], storage_path=str(doc_root), include_title=False
        )
        assert result["content"] == "H2-1-content\n\n"

    def test_whole_document(self, doc_root, basic_markdown):
        result = get_section("README.md", [], storage_path=str(doc_root))
        assert result["level"] == 0
        assert result["content"] == basic_markdown
        assert result["path"] == "(document)"

    def test_missing_section(self, doc_root):
        result = get_section("README.md", ["H1-1", "missing", "X"], storage_path=str(doc_root))
        assert result["error"] == "Section not found: H1-1 > missing > X"

    def test_missing_file(self, doc_root):
        result = get_section("nope.md", ["H1-1"], storage_path=str(doc_root))
        assert "error" in result


class TestSetSection:
    def test_update_existing(self, doc_root):
        result = set_section("README.md", ["H1-1"], "Much shorter, ahh...\n", storage_path=str(doc_root))
        assert result["success"] is True
        assert result["created"] is False
        assert (doc_root / "README.md").read_text(encoding="utf-8") == "# H1-1\nMuch shorter, ahh...\n"

    def test_create_new(self, doc_root, basic_markdown):
        result = set_section("README.md", ["H1-new"], "Look at this fancy content...\n", storage_path=str(doc_root))
        assert result["created"] is True
        assert result["level"] == 1
        written = (doc_root / "README.md").read_text(encoding="utf-8")
        assert written == basic_markdown + "# H1-new\nLook at this fancy content...\n"

    def test_reflows_headers(self, doc_root):
        result = set_section(
            "docs/guide.md", ["Guide", "Advanced"], "# Topics\nlist\n", storage_path=str(doc_root)
        )
        assert result["keys"] == ["Topics"]
        written = (doc_root / "docs" / "guide.md").read_text(encoding="utf-8")
        assert written.endswith("## Advanced\n### Topics\nlist\n")

    def test_missing_parent(self, doc_root):
        result = set_section("README.md", ["Nope", "Child"], "text\n", storage_path=str(doc_root))
        assert result["error"] == "Section not found: Nope"

    def test_no_titles(self, doc_root):
        result = set_section("README.md", [], "text\n", storage_path=str(doc_root))
        assert "error" in result

    def test_too_deep_leaves_file_unchanged(self, doc_root, basic_markdown):
        content = "# a\n## b\n### c\n#### d\n"
        result = set_section("README.md", ["H1-1", "H2-2", "H3-1"], content, storage_path=str(doc_root))
        assert "error" in result
        assert "h6" in result["error"]
        assert (doc_root / "README.md").read_text(encoding="utf-8") == basic_markdown

    def test_read_only(self, doc_root, basic_markdown, monkeypatch):
        monkeypatch.setenv("MDTREE_READ_ONLY", "true")
        result = set_section("README.md", ["H1-1"], "changed\n", storage_path=str(doc_root))
        assert "error" in result
        assert (doc_root / "README.md").read_text(encoding="utf-8") == basic_markdown

    def test_content_without_trailing_newline(self, tmp_path):
        (tmp_path / "d.md").write_text("# A\nx\n# B\ny\n", encoding="utf-8")
        result = set_section("d.md", ["A"], "new", storage_path=str(tmp_path))
        assert result["success"] is True
        assert (tmp_path / "d.md").read_text(encoding="utf-8") == "# A\nnew\n# B\ny\n"
        assert get_outline("d.md", storage_path=str(tmp_path))["keys"] == ["A", "B"]

    def test_empty_content(self, tmp_path):
        (tmp_path / "d.md").write_text("# A\nx\n# B\ny\n", encoding="utf-8")
        set_section("d.md", ["A"], "", storage_path=str(tmp_path))
        assert (tmp_path / "d.md").read_text(encoding="utf-8") == "# A\n# B\ny\n"

    def test_missing_file(self, doc_root):
        result = set_section("nope.md", ["A"], "text\n", storage_path=str(doc_root))
        assert "error" in result
        assert not (doc_root / "nope.md").exists()


class TestFormatSectionPath:
    def test_path(self):
        assert format_section_path(["A", "B"]) == "A > B"

    def test_empty(self):
        assert format_section_path([]) == "(document)"
