"""Value models produced by the diff engine"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class DiffKind(str, Enum):
    """Closed set of row kinds in a line diff"""
    context = "context"
    added = "added"
    removed = "removed"


class DiffRecord(BaseModel):
    """One row of a line diff, numbered on the side(s) it belongs to."""
    model_config = ConfigDict(frozen=True)

    kind: DiffKind
    content: str
    old_line_number: Optional[int] = None    # set for context and removed rows
    new_line_number: Optional[int] = None    # set for context and added rows
    is_marked_line: bool = False

    @model_validator(mode="after")
    def _check_numbering(self) -> "DiffRecord":
        has_old = self.old_line_number is not None
        has_new = self.new_line_number is not None
        expected = {
            DiffKind.context: (True, True),
            DiffKind.removed: (True, False),
            DiffKind.added: (False, True),
        }[self.kind]
        if (has_old, has_new) != expected:
            raise ValueError(f"{self.kind.value} record has inconsistent line numbers")
        return self


class DiffStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    additions: int = 0
    deletions: int = 0
    changes: int = 0


class DiffResult(BaseModel):
    """Ordered diff rows plus their change counts. Safe to render more than once."""
    model_config = ConfigDict(frozen=True)

    lines: tuple[DiffRecord, ...] = ()
    stats: DiffStats = DiffStats()

    @property
    def is_identical(self) -> bool:
        return self.stats.changes == 0
