"""File discovery, frontmatter extraction, and title detection for ingested documents"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt

from docdiff.core.utils.text import is_marked_line, join_lines, normalize_lines, sha256, slugify


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}
EXPORT_FORMATS = ('markdown', 'kramdown')


@dataclass
class ParsedDoc:
    """A source file read from disk, ready to store; not persisted itself."""
    path:        Path
    slug:        str
    title:       str
    markdown:    str              # body only (frontmatter stripped), kramdown source
    hash:        str


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def first_heading(markdown: str) -> str | None:
    """Inline text of the first heading in the document, or None."""
    tokens = MarkdownIt("commonmark").parse(markdown)
    for i, tok in enumerate(tokens):
        if tok.type == 'heading_open' and i + 1 < len(tokens) and tokens[i + 1].type == 'inline':
            text = tokens[i + 1].content.strip()
            if text:
                return text
    return None


def export_text(markdown: str, fmt: str = 'kramdown') -> str:
    """Document text in the requested form.

    'kramdown' is the stored source unchanged; 'markdown' drops inline
    attribute lines such as `{: id="..."}`.
    """
    if fmt == 'kramdown':
        return markdown
    if fmt == 'markdown':
        return join_lines([line for line in normalize_lines(markdown) if not is_marked_line(line)])
    raise ValueError(f"Unknown format '{fmt}'; expected one of: {', '.join(EXPORT_FORMATS)}")


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def parse_file(path: Path) -> ParsedDoc:
    """Read a markdown file; slug and title come from frontmatter when present."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = _strip_frontmatter(raw)
    slug = str(frontmatter.get('slug') or slugify(path.stem))
    title = str(frontmatter.get('title') or first_heading(body) or slug)
    return ParsedDoc(
        path=path,
        slug=slug,
        title=title,
        markdown=body,
        hash=sha256(body),
    )
