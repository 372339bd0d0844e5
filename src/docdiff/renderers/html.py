"""HTML fragment renderer for embedding a diff in a host page.

Produces markup only; the host supplies the stylesheet. Class names:
``diff-stats``, ``diff-header``, ``diff-line`` plus one of
``diff-line-added`` / ``diff-line-removed`` / ``diff-line-context``, and
``diff-line-id`` on changed rows that hold an inline attribute line.
"""

import html
import re

from docdiff.core.models import DiffKind, DiffRecord, DiffResult


NBSP = "&nbsp;"
_EDGE_WS_RE = re.compile(r'^(\s*)(.*?)(\s*)$', re.DOTALL)


def escape_content(text: str) -> str:
    """HTML-escape text, keeping runs of spaces and tabs visible."""
    escaped = html.escape(text, quote=False)
    if escaped == "":
        return NBSP
    escaped = re.sub(r' {2,}', lambda m: NBSP * len(m.group(0)), escaped)
    return escaped.replace("\t", NBSP * 4)


def line_content(content: str) -> str:
    """Row body with leading/trailing whitespace wrapped in highlight spans."""
    if content.strip() == "":
        return f'<span class="empty-line">{NBSP}</span>'
    leading, middle, trailing = _EDGE_WS_RE.match(content).groups()
    parts = []
    if leading:
        parts.append(f'<span class="leading-whitespace">{escape_content(leading)}</span>')
    if middle:
        parts.append(escape_content(middle))
    if trailing:
        parts.append(f'<span class="trailing-whitespace">{escape_content(trailing)}</span>')
    return "".join(parts)


class HtmlRenderer:
    """Render a DiffResult as a two-gutter HTML table of div rows."""

    def __init__(self, old_title: str = "", new_title: str = ""):
        self.old_title = old_title
        self.new_title = new_title

    def _row_class(self, rec: DiffRecord) -> str:
        css = f"diff-line-{rec.kind.value}"
        if rec.kind != DiffKind.context and rec.is_marked_line:
            css += " diff-line-id"
        return css

    def _row(self, rec: DiffRecord) -> str:
        old = rec.old_line_number if rec.old_line_number is not None else ""
        new = rec.new_line_number if rec.new_line_number is not None else ""
        prefix = {DiffKind.added: "+", DiffKind.removed: "-"}.get(rec.kind, NBSP)
        return (
            f'<div class="diff-line {self._row_class(rec)}">'
            f'<div class="diff-line-number old-line-number">{old}</div>'
            f'<div class="diff-line-number new-line-number">{new}</div>'
            f'<div class="diff-line-content"><span class="diff-prefix">{prefix}</span>'
            f'{line_content(rec.content)}</div>'
            f'</div>'
        )

    def render(self, result: DiffResult) -> str:
        stats = result.stats
        parts = [
            '<div class="diff-header"><div class="diff-file-header">',
            f'<div class="diff-file-title old-file"><span class="diff-file-name">'
            f'{html.escape(self.old_title)}</span></div>',
            f'<div class="diff-file-title new-file"><span class="diff-file-name">'
            f'{html.escape(self.new_title)}</span></div>',
            '</div></div>',
            '<div class="diff-content">',
            '<div class="diff-stats"><span class="diff-stat-item">'
            f'<span class="diff-stat-additions">+{stats.additions}</span>'
            f'<span class="diff-stat-deletions">-{stats.deletions}</span>'
            '</span></div>',
        ]
        parts.extend(self._row(rec) for rec in result.lines)
        parts.append('</div>')
        return "\n".join(parts) + "\n"
