"""Database table definitions for stored documents and their version history"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Column, DateTime, String, Text, UniqueConstraint
from sqlmodel import Field, SQLModel


class Document(SQLModel, table=True):
    """A stored document; `markdown` is the full kramdown source including attribute lines"""
    __tablename__ = "documents"
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    slug: str = Field(..., index=True, nullable=False)
    title: str = Field(default="", sa_column=Column(Text, nullable=False))
    markdown: str = Field(..., sa_column=Column(Text, nullable=False))
    hash: str = Field(..., sa_column=Column(String(64), nullable=False))
    path: str = Field(..., sa_column=Column(Text, nullable=False, unique=True))
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
    updated_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))


class DocumentVersion(SQLModel, table=True):
    """Immutable snapshot of a Document taken before it was edited."""
    __tablename__ = "document_versions"
    __table_args__ = (UniqueConstraint("document_id", "version_num", name="uq_docver_doc_num"),)
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    document_id: UUID = Field(..., foreign_key="documents.id", index=True, nullable=False)
    version_num: int = Field(..., nullable=False, description="Monotonically increasing per-document version number")
    markdown: str = Field(..., sa_column=Column(Text, nullable=False))
    hash: str = Field(..., sa_column=Column(String(64), nullable=False))
    title: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
