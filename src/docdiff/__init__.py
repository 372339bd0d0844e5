"""Line-level diffs between text documents"""

from docdiff.core.diff import compute_diff
from docdiff.core.models import DiffKind, DiffRecord, DiffResult, DiffStats

__all__ = ["compute_diff", "DiffKind", "DiffRecord", "DiffResult", "DiffStats"]
