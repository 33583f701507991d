"""Document persistence: create, lookup, listing"""

import logging
from typing import Optional

from sqlmodel import Session, select

from distillmd.crud.tables import Document


logger = logging.getLogger(__name__)


def create_document(session: Session, title: str, summary_md: str = "", tags: Optional[list[str]] = None) -> Document:
    """Add a new Document. Flushes but does not commit; caller controls the transaction."""
    doc = Document(title=title, summary_md=summary_md, tags=list(tags or []))
    session.add(doc)
    session.flush()
    logger.debug("Created document %s (%r)", doc.id, title)
    return doc


def get_document(session: Session, document_id: str) -> Document | None:
    """Return the Document with the given id, or None if not found."""
    return session.get(Document, document_id)


def require_document(session: Session, document_id: str) -> Document:
    """Return the Document with the given id. Raises ValueError if it does not exist."""
    doc = get_document(session, document_id)
    if doc is None:
        raise ValueError(f"Document {document_id} not found")
    return doc


def list_documents(session: Session) -> list[Document]:
    """Return all documents, most recently updated first."""
    return list(session.exec(select(Document).order_by(Document.updated_at.desc())).all())
