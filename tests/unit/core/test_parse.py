"""Unit tests for core/parse.py"""

import pytest

from docdiff.core.parse import (
    ParsedDoc, _strip_frontmatter, discover_files, export_text, first_heading, parse_file,
)
from docdiff.core.utils.text import sha256


def test_strip_frontmatter_with_yaml():
    """_strip_frontmatter extracts YAML header and returns body."""
    fm, body = _strip_frontmatter("---\ntitle: Hello\n---\n# Body\n")
    assert fm == {"title": "Hello"}
    assert body == "# Body\n"


def test_strip_frontmatter_no_frontmatter():
    text = "# No frontmatter\n"
    assert _strip_frontmatter(text) == ({}, text)


def test_strip_frontmatter_non_mapping_raises():
    with pytest.raises(ValueError, match="expected a mapping"):
        _strip_frontmatter("---\n- a\n- b\n---\nbody\n")


# --- first_heading ---

@pytest.mark.parametrize("markdown,expected", [
    ("# Title\n\nBody\n", "Title"),
    ('intro\n\n## Sub *heading*\n{: id="h"}\n', "Sub *heading*"),
    ("no headings here\n", None),
    ("", None),
])
def test_first_heading(markdown, expected):
    assert first_heading(markdown) == expected


# --- export_text ---

KRAMDOWN = '# Title\n{: id="t1"}\n\nBody text\n{: id="p1" updated="2024"}\n'


def test_export_kramdown_is_source():
    assert export_text(KRAMDOWN, "kramdown") == KRAMDOWN


def test_export_markdown_drops_attribute_lines():
    assert export_text(KRAMDOWN, "markdown") == "# Title\n\nBody text\n"


def test_export_unknown_format():
    with pytest.raises(ValueError, match="Unknown format"):
        export_text(KRAMDOWN, "html")


# --- discover_files / parse_file ---

def test_discover_files_single(tmp_path):
    f = tmp_path / "doc.md"
    f.write_text("# Hello")
    assert discover_files(f) == [f]


def test_discover_files_dir(tmp_path):
    """discover_files finds .md and .mdx files recursively and ignores others."""
    (tmp_path / "a.md").write_text("a")
    (tmp_path / "notes.txt").write_text("text")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.mdx").write_text("b")
    assert [p.name for p in discover_files(tmp_path)] == ["a.md", "b.mdx"]


def test_parse_file_title_from_heading(tmp_path):
    f = tmp_path / "My Notes.md"
    f.write_text("# Weekly notes\n\nBody.\n")
    doc = parse_file(f)
    assert isinstance(doc, ParsedDoc)
    assert doc.slug == "my-notes"
    assert doc.title == "Weekly notes"
    assert doc.hash == sha256(doc.markdown)


def test_parse_file_frontmatter_wins(tmp_path):
    f = tmp_path / "anything.md"
    f.write_text("---\nslug: custom-slug\ntitle: Custom\n---\n# Body\n")
    doc = parse_file(f)
    assert (doc.slug, doc.title) == ("custom-slug", "Custom")
    assert doc.markdown == "# Body\n"


def test_parse_file_title_falls_back_to_slug(tmp_path):
    f = tmp_path / "plain.md"
    f.write_text("just text\n")
    assert parse_file(f).title == "plain"
