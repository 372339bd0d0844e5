"""Text helpers: line normalization, marker detection, hashing, and slugs"""

import hashlib
import re
from typing import Optional


# kramdown inline attribute list, e.g. `{: id="20240101-abc" updated="..."}`
MARKER_RE = re.compile(r'^\s*\{:\s+.*}')


def normalize_line_endings(text: Optional[str]) -> str:
    """Return text with every CRLF / CR line ending rewritten as LF; None becomes ''."""
    if not text:
        return ''
    return text.replace('\r\n', '\n').replace('\r', '\n')


def normalize_lines(text: Optional[str]) -> list[str]:
    """Split text into lines without newline characters.

    A final line without a trailing newline counts the same as one with it,
    so "foo" and "foo\\n" both give ["foo"]. Blank lines inside the text are
    kept; empty input gives no lines at all.
    """
    processed = normalize_line_endings(text)
    if processed and not processed.endswith('\n'):
        processed += '\n'
    lines = processed.split('\n')
    if lines and lines[-1] == '':
        lines.pop()
    return lines


def join_lines(lines: list[str]) -> str:
    """Inverse of normalize_lines: LF-joined with a trailing newline, '' for no lines."""
    return ''.join(f"{line}\n" for line in lines)


def is_marked_line(content: str) -> bool:
    """True when the line is an inline attribute annotation rather than prose."""
    return MARKER_RE.match(content.strip()) is not None


def sha256(content: str) -> str:
    """Hex SHA-256 of the UTF-8 encoded text; fits the String(64) hash columns."""
    return hashlib.sha256(content.encode('utf-8')).hexdigest()


def slugify(text: str) -> str:
    """Lowercase, hyphen-separated identifier built from word characters only."""
    text = re.sub(r'[^\w\s-]', '', text.lower())
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')
