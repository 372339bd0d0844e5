"""Shared helpers for diff renderers"""

from typing import Iterator, Optional, Sequence

from docdiff.core.models import DiffKind, DiffRecord, DiffStats


GAP_MARKER = "..."
PREFIXES = {DiffKind.added: "+", DiffKind.removed: "-", DiffKind.context: " "}


def format_stats(stats: DiffStats) -> str:
    """One-line change summary, e.g. '+3 -1 (4 changes)'."""
    noun = "change" if stats.changes == 1 else "changes"
    return f"+{stats.additions} -{stats.deletions} ({stats.changes} {noun})"


def number_width(records: Sequence[DiffRecord]) -> int:
    """Digits needed for the widest line number on either side."""
    widest = max(
        (n for r in records for n in (r.old_line_number, r.new_line_number) if n is not None),
        default=0,
    )
    return max(len(str(widest)), 1)


def with_gaps(records: Sequence[DiffRecord]) -> Iterator[Optional[DiffRecord]]:
    """Yield records, with None wherever collapsed context was skipped between them.

    A gap exists when a side's line number jumps by more than one from the
    last number seen on that side (or starts past line 1).
    """
    last_old = last_new = 0
    for rec in records:
        jumped = (
            (rec.old_line_number is not None and rec.old_line_number != last_old + 1)
            or (rec.new_line_number is not None and rec.new_line_number != last_new + 1)
        )
        if jumped:
            yield None
        if rec.old_line_number is not None:
            last_old = rec.old_line_number
        if rec.new_line_number is not None:
            last_new = rec.new_line_number
        yield rec
