"""Document version persistence: save, prune, list, diff, and revert operations"""

import logging
from datetime import datetime
from uuid import UUID

from sqlalchemy import func
from sqlmodel import Session, select

from docdiff.core.diff import DEFAULT_CONTEXT_LINES, compute_diff
from docdiff.core.models import DiffResult
from docdiff.crud.models import Document, DocumentVersion


logger = logging.getLogger(__name__)


def get_version(session: Session, document_id: UUID, version_num: int) -> DocumentVersion:
    """Return one stored version. Raises ValueError if it does not exist."""
    v = session.exec(
        select(DocumentVersion)
        .where(DocumentVersion.document_id == document_id)
        .where(DocumentVersion.version_num == version_num)
    ).one_or_none()
    if v is None:
        raise ValueError(f"Version {version_num} not found for document {document_id}")
    return v


def diff_versions(
    session: Session,
    document_id: UUID,
    from_num: int,
    to_num: int,
    context: int = DEFAULT_CONTEXT_LINES,
    ) -> DiffResult:
    """Line diff between two stored versions. Raises ValueError if either is missing."""
    v_from, v_to = get_version(session, document_id, from_num), get_version(session, document_id, to_num)
    return compute_diff(v_from.markdown, v_to.markdown, context_lines=context)


def list_versions(session: Session, document_id: UUID) -> list[DocumentVersion]:
    """Return all versions for a document ordered by version_num ascending."""
    return list(
        session.exec(
            select(DocumentVersion)
            .where(DocumentVersion.document_id == document_id)
            .order_by(DocumentVersion.version_num.asc())
        ).all()
    )


def prune_versions(session: Session, document_id: UUID, max_versions: int) -> int:
    """Delete oldest versions beyond max_versions. Returns count deleted. No-op if max_versions=0."""
    if max_versions == 0:
        return 0

    versions = list_versions(session, document_id)
    excess = len(versions) - max_versions
    if excess <= 0:
        return 0

    for v in versions[:excess]:
        session.delete(v)
    session.flush()
    logger.debug("Pruned %d version(s) of document %s", excess, document_id)
    return excess


def save_version(session: Session, doc: Document, max_versions: int = 10) -> DocumentVersion:
    """Snapshot current Document state as a new immutable version.

    Computes next version_num as MAX(version_num)+1 for this document.
    Calls prune_versions after saving if max_versions > 0.
    """
    result = session.exec(
        select(func.max(DocumentVersion.version_num))
        .where(DocumentVersion.document_id == doc.id)
    ).one()

    version = DocumentVersion(
        document_id=doc.id,
        version_num=(result or 0) + 1,
        markdown=doc.markdown,
        hash=doc.hash,
        title=doc.title,
    )
    session.add(version)
    session.flush()

    if max_versions > 0:
        prune_versions(session, doc.id, max_versions)

    return version


def revert_to_version(session: Session, doc: Document, version_num: int, max_versions: int = 10) -> Document:
    """Promote a prior version's content as a new edit of the current Document.

    Snapshots the current Document state first (so it becomes part of history),
    then overwrites doc fields with the target version's content.
    Flushes but does not commit; the caller controls the transaction.
    Raises ValueError if version_num is not found for this document.
    """
    target = get_version(session, doc.id, version_num)
    # Read before snapshotting: pruning may delete the target row.
    markdown, content_hash, title = target.markdown, target.hash, target.title
    save_version(session, doc, max_versions=max_versions)

    doc.markdown = markdown
    doc.hash = content_hash
    if title is not None:
        doc.title = title
    doc.updated_at = datetime.now()
    session.add(doc)
    session.flush()

    logger.info("Rolled back %s to version %d", doc.slug, version_num)
    return doc
