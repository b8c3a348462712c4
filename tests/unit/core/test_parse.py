"""Unit tests for core/parse.py"""

import pytest

from octopub.core.models import ParsedDoc, ScalarValue
from octopub.core.parse import _strip_frontmatter, discover_files, parse_file, parse_text


def test_strip_frontmatter_with_yaml():
    """_strip_frontmatter extracts YAML header and returns body."""
    text = "---\ntitle: Hello\n---\n# Body\n"
    fm, body = _strip_frontmatter(text)
    assert fm == {"title": "Hello"}
    assert body == "# Body\n"


def test_strip_frontmatter_no_frontmatter():
    """_strip_frontmatter returns empty dict and full text when no header."""
    text = "# No frontmatter\n"
    fm, body = _strip_frontmatter(text)
    assert fm == {}
    assert body == text


def test_strip_frontmatter_invalid_yaml():
    """Malformed YAML raises ValueError."""
    with pytest.raises(ValueError, match="Invalid YAML frontmatter"):
        _strip_frontmatter("---\ntitle: [unclosed\n---\nbody\n")


def test_strip_frontmatter_not_a_mapping():
    """A YAML header that is not a mapping raises ValueError."""
    with pytest.raises(ValueError, match="expected a mapping"):
        _strip_frontmatter("---\n- a\n- b\n---\nbody\n")


def test_discover_files_single(tmp_path):
    """discover_files returns a list with one file when given a file path."""
    f = tmp_path / "doc.md"
    f.write_text("# Hello")
    assert discover_files(f) == [f]


def test_discover_files_non_md_skipped(tmp_path):
    """discover_files ignores non-markdown files."""
    (tmp_path / "notes.txt").write_text("text")
    assert discover_files(tmp_path) == []


def test_discover_files_dir(tmp_path):
    """discover_files finds .md, .mdx and .markdown files recursively."""
    (tmp_path / "a.md").write_text("a")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.mdx").write_text("b")
    (sub / "c.markdown").write_text("c")
    assert len(discover_files(tmp_path)) == 3


def test_parse_text_builds_options():
    """parse_text turns frontmatter into ExportOptions and keeps the body."""
    doc = parse_text("---\ntitle: Hi\npublished: true\n---\nBody\n")
    assert doc.options["title"] == ScalarValue("Hi")
    assert doc.options["published"] == ScalarValue("true")
    assert doc.markdown == "Body\n"


def test_parse_file(tmp_path):
    """parse_file produces a ParsedDoc carrying the source path."""
    f = tmp_path / "doc.md"
    f.write_text("---\ntitle: My Doc\n---\n# Body\n")
    doc = parse_file(f)
    assert isinstance(doc, ParsedDoc)
    assert doc.path == f
    assert "---" not in doc.markdown
