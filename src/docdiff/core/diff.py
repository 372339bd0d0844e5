"""Line diff engine: classify lines against their LCS, collapse context, count changes"""

import logging
from typing import Optional, Sequence

from docdiff.core.align import longest_common_subsequence
from docdiff.core.models import DiffKind, DiffRecord, DiffResult, DiffStats
from docdiff.core.utils.text import is_marked_line, normalize_lines


DEFAULT_CONTEXT_LINES = 3

logger = logging.getLogger(__name__)


def classify_lines(a: Sequence[str], b: Sequence[str], lcs: Sequence[str]) -> list[DiffRecord]:
    """Merge a and b along their LCS into context / removed / added records.

    Removed lines are emitted before added lines whenever both are pending,
    so a replaced block reads as all deletions followed by all additions.
    """
    records: list[DiffRecord] = []
    i = j = k = 0
    old_num = new_num = 1

    while i < len(a) or j < len(b):
        if k < len(lcs) and i < len(a) and j < len(b) and a[i] == lcs[k] and b[j] == lcs[k]:
            records.append(DiffRecord(
                kind=DiffKind.context,
                old_line_number=old_num,
                new_line_number=new_num,
                content=a[i],
                is_marked_line=is_marked_line(a[i]),
            ))
            i += 1
            j += 1
            k += 1
            old_num += 1
            new_num += 1
        elif i < len(a) and (k >= len(lcs) or a[i] != lcs[k]):
            records.append(DiffRecord(
                kind=DiffKind.removed,
                old_line_number=old_num,
                content=a[i],
                is_marked_line=is_marked_line(a[i]),
            ))
            i += 1
            old_num += 1
        else:
            records.append(DiffRecord(
                kind=DiffKind.added,
                new_line_number=new_num,
                content=b[j],
                is_marked_line=is_marked_line(b[j]),
            ))
            j += 1
            new_num += 1

    return records


def _nearest_change_distances(records: Sequence[DiffRecord]) -> tuple[list[Optional[int]], list[Optional[int]]]:
    """Per index, distance back to the previous change and forward to the next (None if absent)."""
    before: list[Optional[int]] = []
    last = None
    for i, rec in enumerate(records):
        before.append(i - last if last is not None else None)
        if rec.kind != DiffKind.context:
            last = i

    after: list[Optional[int]] = [None] * len(records)
    nxt = None
    for i in range(len(records) - 1, -1, -1):
        after[i] = nxt - i if nxt is not None else None
        if records[i].kind != DiffKind.context:
            nxt = i

    return before, after


def collapse_context(records: Sequence[DiffRecord], window: int = DEFAULT_CONTEXT_LINES) -> list[DiffRecord]:
    """Drop context records farther than `window` rows from any added/removed record.

    Changed records are always kept and nothing is renumbered, so absolute
    line positions stay recoverable from the collapsed list.
    """
    before, after = _nearest_change_distances(records)
    kept = []
    for rec, back, ahead in zip(records, before, after):
        if rec.kind != DiffKind.context:
            kept.append(rec)
        elif (back is not None and back <= window) or (ahead is not None and ahead <= window):
            kept.append(rec)
    return kept


def diff_stats(records: Sequence[DiffRecord]) -> DiffStats:
    """Count added and removed records; context rows do not count."""
    additions = sum(1 for r in records if r.kind == DiffKind.added)
    deletions = sum(1 for r in records if r.kind == DiffKind.removed)
    return DiffStats(additions=additions, deletions=deletions, changes=additions + deletions)


def diff_lines(a: Sequence[str], b: Sequence[str]) -> list[DiffRecord]:
    """Full, uncollapsed record list for two already-normalized line sequences."""
    return classify_lines(a, b, longest_common_subsequence(a, b))


def compute_diff(
    text_a: Optional[str],
    text_b: Optional[str],
    context_lines: int = DEFAULT_CONTEXT_LINES,
    collapse: bool = True,
    ) -> DiffResult:
    """Diff two texts line by line. None or empty input is treated as an empty document.

    Stats are counted on the returned (collapsed) record list.
    Pass collapse=False to keep every context line for a full-document view.
    Identical texts are returned uncollapsed: with no change to anchor a
    window, the whole document is shown as context.
    """
    a, b = normalize_lines(text_a), normalize_lines(text_b)
    logger.debug("Diffing %d old line(s) against %d new line(s)", len(a), len(b))

    records = diff_lines(a, b)
    if collapse and any(r.kind != DiffKind.context for r in records):
        records = collapse_context(records, context_lines)
    return DiffResult(lines=records, stats=diff_stats(records))
