"""Unit tests for core/utils/text.py"""

import pytest

from docdiff.core.utils.text import (
    is_marked_line, join_lines, normalize_line_endings, normalize_lines, sha256, slugify,
)


# --- normalize_lines ---

@pytest.mark.parametrize("text,expected", [
    ("", []),
    (None, []),
    ("foo", ["foo"]),
    ("foo\n", ["foo"]),
    ("a\nb\nc\n", ["a", "b", "c"]),
    ("a\nb\nc", ["a", "b", "c"]),
    ("\n", [""]),
    ("\n\n", ["", ""]),
    ("a\n\nb\n", ["a", "", "b"]),
    ("a\n\n", ["a", ""]),
])
def test_normalize_lines(text, expected):
    """normalize_lines splits on LF and drops only the synthetic trailing entry."""
    assert normalize_lines(text) == expected


@pytest.mark.parametrize("text", ["a\r\nb\r\n", "a\rb\r", "a\nb\n", "a\r\nb\rc\n"])
def test_normalize_lines_unifies_line_endings(text):
    """CRLF, CR and LF all split the same way."""
    assert normalize_lines(text)[:2] == ["a", "b"]


def test_normalize_lines_crlf_not_double_counted():
    """A CRLF pair is one line break, not two."""
    assert normalize_lines("x\r\n\r\ny") == ["x", "", "y"]


def test_normalize_line_endings_none():
    assert normalize_line_endings(None) == ""


# --- join_lines ---

@pytest.mark.parametrize("lines,expected", [
    ([], ""),
    ([""], "\n"),
    (["a", "b"], "a\nb\n"),
])
def test_join_lines(lines, expected):
    """join_lines terminates every line with LF."""
    assert join_lines(lines) == expected


# --- is_marked_line ---

@pytest.mark.parametrize("content,expected", [
    ('{: id="abc"}', True),
    ('   {: id="abc" updated="20240101"}', True),
    ('{: style="color: red"}  ', True),
    ("plain text", False),
    ("{:id}", False),
    ('{: ', False),
    ("", False),
    ("text {: id=\"abc\"}", False),
])
def test_is_marked_line(content, expected):
    """Only brace-colon attribute annotations are marked."""
    assert is_marked_line(content) is expected


# --- sha256 / slugify ---

def test_sha256_is_64_hex_chars():
    digest = sha256("hello")
    assert len(digest) == 64
    assert digest == sha256("hello")


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("my_file_name", "my-file-name"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("Special! Ch@rs#", "special-chrs"),
    ("", ""),
])
def test_slugify(text, expected):
    assert slugify(text) == expected
