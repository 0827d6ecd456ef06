"""Unit tests for core/parse.py"""

import pytest

from mdsection.core.parse import discover_files, make_parser, strip_frontmatter


def test_strip_frontmatter_with_yaml():
    """strip_frontmatter extracts YAML header and returns body."""
    text = "---\ntitle: Hello\n---\n# Body\n"
    fm, body = strip_frontmatter(text)
    assert fm == {"title": "Hello"}
    assert body == "# Body\n"


def test_strip_frontmatter_no_frontmatter():
    """strip_frontmatter returns empty dict and full text when no header."""
    text = "# No frontmatter\n"
    fm, body = strip_frontmatter(text)
    assert fm == {}
    assert body == text


def test_strip_frontmatter_invalid_yaml():
    """Malformed frontmatter raises ValueError."""
    with pytest.raises(ValueError, match="Invalid YAML frontmatter"):
        strip_frontmatter("---\nkey: [unclosed\n---\nbody\n")


def test_strip_frontmatter_not_a_mapping():
    """Frontmatter that is not a mapping raises ValueError."""
    with pytest.raises(ValueError, match="expected a mapping"):
        strip_frontmatter("---\n- a\n- b\n---\nbody\n")


def test_make_parser_unknown_preset():
    """An unknown preset name raises ValueError."""
    with pytest.raises(ValueError, match="Unknown parser preset"):
        make_parser("no-such-preset")


def test_discover_files_single(tmp_path):
    """discover_files returns a list with one file when given a file path."""
    f = tmp_path / "doc.md"
    f.write_text("# Hello")
    assert discover_files(f) == [f]


def test_discover_files_non_md_skipped(tmp_path):
    """discover_files ignores non-.md/.mdx files."""
    (tmp_path / "notes.txt").write_text("text")
    assert discover_files(tmp_path) == []


def test_discover_files_dir(tmp_path):
    """discover_files finds all .md and .mdx files recursively."""
    (tmp_path / "a.md").write_text("a")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.mdx").write_text("b")
    files = discover_files(tmp_path)
    assert len(files) == 2
