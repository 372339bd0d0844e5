"""Document persistence: lookup, upsert from parsed files, and content edits"""

import logging
from datetime import datetime

from sqlmodel import Session, select

from docdiff.core.parse import ParsedDoc
from docdiff.core.utils.text import sha256
from docdiff.crud.models import Document
from docdiff.crud.versioning import save_version
from docdiff.errors import DocumentNotFoundError


logger = logging.getLogger(__name__)


def get_by_path(session: Session, path: str) -> Document | None:
    """Return the Document with the given source path, or None if not found."""
    return session.exec(select(Document).where(Document.path == path)).one_or_none()


def get_by_slug(session: Session, slug: str) -> Document | None:
    """Return the Document with the given slug, or None if not found.

    Slugs are not unique; when several files share one, the lowest path wins.
    """
    return session.exec(select(Document).where(Document.slug == slug).order_by(Document.path)).first()


def resolve_document(session: Session, key: str) -> Document:
    """Look a document up by slug, then by path. Raises DocumentNotFoundError."""
    doc = get_by_slug(session, key) or get_by_path(session, key)
    if doc is None:
        raise DocumentNotFoundError(key)
    return doc


def get_all_documents(session: Session) -> list[Document]:
    """Return all documents ordered by slug."""
    return list(session.exec(select(Document).order_by(Document.slug)).all())


def add_document(session: Session, parsed: ParsedDoc, max_versions: int = 10) -> tuple[Document, str]:
    """Create or update the Document stored under parsed.path.

    Returns (doc, status) where status is 'created', 'updated', or 'unchanged'.
    An update snapshots the previous content first.
    Flushes but does not commit; the caller controls the transaction.
    """
    path = str(parsed.path)
    doc = get_by_path(session, path)

    if doc:
        if doc.hash == parsed.hash:
            return doc, 'unchanged'
        save_version(session, doc, max_versions)
        doc.slug = parsed.slug
        doc.title = parsed.title
        doc.markdown = parsed.markdown
        doc.hash = parsed.hash
        doc.updated_at = datetime.now()
        session.add(doc)
        session.flush()
        logger.info("Updated %s from %s", doc.slug, path)
        return doc, 'updated'

    doc = Document(
        slug=parsed.slug,
        title=parsed.title,
        markdown=parsed.markdown,
        hash=parsed.hash,
        path=path,
    )
    session.add(doc)
    session.flush()
    logger.info("Stored %s from %s", doc.slug, path)
    return doc, 'created'


def update_markdown(session: Session, doc: Document, markdown: str, max_versions: int = 10) -> bool:
    """Replace a document's source, snapshotting the old content first.

    Returns False (and writes nothing) when the content is unchanged.
    """
    new_hash = sha256(markdown)
    if new_hash == doc.hash:
        return False
    save_version(session, doc, max_versions)
    doc.markdown = markdown
    doc.hash = new_hash
    doc.updated_at = datetime.now()
    session.add(doc)
    session.flush()
    return True
