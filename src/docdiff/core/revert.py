"""Undo a single changed line of a diff on the new side"""

import logging
from typing import Optional, Sequence

from docdiff.core.diff import diff_lines
from docdiff.core.models import DiffKind, DiffRecord
from docdiff.core.utils.text import join_lines, normalize_lines
from docdiff.errors import RevertError


logger = logging.getLogger(__name__)


def find_record(records: Sequence[DiffRecord], kind: DiffKind, line_number: int) -> int:
    """Index of the added record with that new line number, or removed record with that old one."""
    if kind == DiffKind.context:
        raise RevertError("Context lines are unchanged; there is nothing to revert")
    attr = "new_line_number" if kind == DiffKind.added else "old_line_number"
    for i, rec in enumerate(records):
        if rec.kind == kind and getattr(rec, attr) == line_number:
            return i
    side = "new" if kind == DiffKind.added else "old"
    raise RevertError(f"No {kind.value} line at {side} line {line_number}")


def anchor_position(records: Sequence[DiffRecord], index: int, line_count: Optional[int] = None) -> int:
    """0-based insertion point in the new document for the record at `index`.

    Policy: just after the nearest preceding record that has a new line
    number; else just before the nearest following one; else 0. The result
    is clamped to [0, line_count] when line_count is given.
    """
    position = 0
    for rec in reversed(records[:index]):
        if rec.new_line_number is not None:
            position = rec.new_line_number
            break
    else:
        for rec in records[index + 1:]:
            if rec.new_line_number is not None:
                position = rec.new_line_number - 1
                break
    if line_count is not None:
        position = min(max(position, 0), line_count)
    return position


def revert_line(old_text: Optional[str], new_text: Optional[str], kind: DiffKind, line_number: int) -> str:
    """Return new_text with one changed line undone.

    An added line (identified by its new line number) is deleted. A removed
    line (identified by its old line number) is re-inserted at its anchor
    position. Raises RevertError when the diff has no such line.
    """
    kind = DiffKind(kind)
    old_lines, new_lines = normalize_lines(old_text), normalize_lines(new_text)
    records = diff_lines(old_lines, new_lines)
    index = find_record(records, kind, line_number)
    rec = records[index]

    if kind == DiffKind.added:
        del new_lines[rec.new_line_number - 1]
    else:
        new_lines.insert(anchor_position(records, index, len(new_lines)), rec.content)

    logger.debug("Reverted %s line %d", kind.value, line_number)
    return join_lines(new_lines)
