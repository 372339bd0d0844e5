"""Single-column (merged) diff renderer with optional ANSI colors.

Each row carries both line-number gutters, a +/-/space prefix, and the line
content. Collapsed stretches of unchanged lines show up as a gap marker.
Marked (inline attribute) lines on changed rows are dimmed so the prose
changes stand out.
"""

import typer

from docdiff.core.models import DiffKind, DiffRecord, DiffResult
from docdiff.renderers.base import GAP_MARKER, PREFIXES, format_stats, number_width, with_gaps


COLORS = {DiffKind.added: typer.colors.GREEN, DiffKind.removed: typer.colors.RED}


class UnifiedRenderer:
    """Render a DiffResult as merged old/new rows.

    Parameters
    ----------
    color : bool, default False
        Wrap added/removed rows in ANSI colors.
    show_stats : bool, default True
        Prepend a '+A -D (C changes)' summary line.
    """

    def __init__(self, color: bool = False, show_stats: bool = True):
        self.color = color
        self.show_stats = show_stats

    def _row(self, rec: DiffRecord, width: int) -> str:
        old = "" if rec.old_line_number is None else str(rec.old_line_number)
        new = "" if rec.new_line_number is None else str(rec.new_line_number)
        row = f"{old:>{width}} {new:>{width}} {PREFIXES[rec.kind]}"
        if rec.content:
            row += f" {rec.content}"
        if not self.color or rec.kind == DiffKind.context:
            return row
        return typer.style(row, fg=COLORS[rec.kind], dim=rec.is_marked_line)

    def render_lines(self, result: DiffResult) -> list[str]:
        width = number_width(result.lines)
        out = [format_stats(result.stats)] if self.show_stats else []
        for rec in with_gaps(result.lines):
            if rec is None:
                gap = f"{'':>{width}} {'':>{width}} {GAP_MARKER}"
                out.append(typer.style(gap, fg=typer.colors.CYAN) if self.color else gap)
            else:
                out.append(self._row(rec, width))
        return out

    def render(self, result: DiffResult) -> str:
        return "\n".join(self.render_lines(result)) + "\n"
