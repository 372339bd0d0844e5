"""Two-column (side-by-side) diff renderer"""

from itertools import zip_longest
from typing import Optional

import typer

from docdiff.core.models import DiffKind, DiffRecord, DiffResult
from docdiff.renderers.base import GAP_MARKER, PREFIXES, format_stats, number_width, with_gaps


SEPARATOR = " | "


class SplitRenderer:
    """Render old lines on the left and new lines on the right.

    A run of removed lines followed by a run of added lines is paired up row
    by row; whichever run is longer leaves blank cells on the other side.
    Each column is padded or truncated to `width` characters.
    """

    def __init__(self, width: int = 60, color: bool = False, show_stats: bool = True):
        self.width = width
        self.color = color
        self.show_stats = show_stats

    def _cell(self, rec: Optional[DiffRecord], number: Optional[int], digits: int) -> str:
        if rec is None:
            return " " * self.width
        text = f"{number:>{digits}} {PREFIXES[rec.kind]} {rec.content}"
        if len(text) > self.width:
            text = text[:self.width - 1] + "~"
        text = text.ljust(self.width)
        if self.color and rec.kind != DiffKind.context:
            fg = typer.colors.GREEN if rec.kind == DiffKind.added else typer.colors.RED
            return typer.style(text, fg=fg, dim=rec.is_marked_line)
        return text

    def _pair(self, left: Optional[DiffRecord], right: Optional[DiffRecord], digits: int) -> str:
        old = self._cell(left, left.old_line_number if left else None, digits)
        new = self._cell(right, right.new_line_number if right else None, digits)
        return f"{old}{SEPARATOR}{new}".rstrip()

    def render_lines(self, result: DiffResult) -> list[str]:
        digits = number_width(result.lines)
        out = [format_stats(result.stats)] if self.show_stats else []
        removed: list[DiffRecord] = []
        added: list[DiffRecord] = []

        def flush() -> None:
            for left, right in zip_longest(removed, added):
                out.append(self._pair(left, right, digits))
            removed.clear()
            added.clear()

        for rec in with_gaps(result.lines):
            if rec is not None and rec.kind == DiffKind.removed:
                if added:
                    flush()
                removed.append(rec)
            elif rec is not None and rec.kind == DiffKind.added:
                added.append(rec)
            else:
                flush()
                if rec is None:
                    out.append(f"{GAP_MARKER.ljust(self.width)}{SEPARATOR}{GAP_MARKER}")
                else:
                    out.append(self._pair(rec, rec, digits))
        flush()
        return out

    def render(self, result: DiffResult) -> str:
        return "\n".join(self.render_lines(result)) + "\n"
