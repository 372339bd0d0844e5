"""Pipeline step functions: ingest, compare, and revert against the document store"""

import logging
from pathlib import Path

from sqlmodel import Session

from docdiff.core.diff import DEFAULT_CONTEXT_LINES, compute_diff
from docdiff.core.models import DiffKind, DiffResult
from docdiff.core.parse import discover_files, export_text, parse_file
from docdiff.core.revert import revert_line
from docdiff.crud.documents import add_document, resolve_document, update_markdown
from docdiff.crud.models import Document


logger = logging.getLogger(__name__)


def run_add(session: Session, path: str, max_versions: int = 10) -> list[tuple[str, Document]]:
    """Store every markdown file under path. Returns (status, doc) pairs.

    Flushes but does not commit. Raises RuntimeError naming the file that failed.
    """
    results = []
    for p in discover_files(Path(path)):
        try:
            doc, status = add_document(session, parse_file(p), max_versions)
        except Exception as e:
            raise RuntimeError(f"Failed to add {p}: {e}") from e
        results.append((status, doc))
    return results


def compare_documents(
    session: Session,
    key_a: str,
    key_b: str,
    fmt: str = 'kramdown',
    swap: bool = False,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    collapse: bool = True,
    ) -> tuple[Document, Document, DiffResult]:
    """Diff two stored documents; returns (left, right, result) with left as the old side.

    swap=True compares b against a. Raises DocumentNotFoundError for an unknown key.
    """
    left, right = resolve_document(session, key_a), resolve_document(session, key_b)
    if swap:
        left, right = right, left
    logger.info("Comparing %s -> %s (%s)", left.slug, right.slug, fmt)
    result = compute_diff(
        export_text(left.markdown, fmt),
        export_text(right.markdown, fmt),
        context_lines=context_lines,
        collapse=collapse,
    )
    return left, right, result


def revert_document(session: Session, old_key: str, new_key: str, max_versions: int = 10) -> bool:
    """Overwrite the new document's source with the old one's. Returns False if already equal."""
    old, new = resolve_document(session, old_key), resolve_document(session, new_key)
    changed = update_markdown(session, new, old.markdown, max_versions)
    if changed:
        logger.info("Reverted %s to the content of %s", new.slug, old.slug)
    return changed


def revert_document_line(
    session: Session,
    old_key: str,
    new_key: str,
    kind: DiffKind,
    line_number: int,
    max_versions: int = 10,
    ) -> Document:
    """Undo one added or removed line in the new document and store the result.

    Works on the kramdown source so attribute lines are never lost.
    Raises RevertError when the diff has no such line.
    """
    old, new = resolve_document(session, old_key), resolve_document(session, new_key)
    reverted = revert_line(old.markdown, new.markdown, kind, line_number)
    update_markdown(session, new, reverted, max_versions)
    logger.info("Reverted %s line %d in %s", DiffKind(kind).value, line_number, new.slug)
    return new
