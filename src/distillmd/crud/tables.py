"""Database table definitions for documents and their editable blocks"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import uuid4

from sqlalchemy import JSON, Column, DateTime, Text
from sqlmodel import Field, SQLModel


def _new_id() -> str:
    return str(uuid4())


class Document(SQLModel, table=True):
    """A summarized source and its markdown summary, the conversion source for blocks"""
    __tablename__ = "documents"
    id: str = Field(default_factory=_new_id, primary_key=True)
    title: str = Field(..., nullable=False)
    summary_md: str = Field(default="", sa_column=Column(Text, nullable=False))
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    blocks_migrated: bool = Field(default=False, nullable=False, description="Whether summary_md was converted to blocks")
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
    updated_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))


class BlockRow(SQLModel, table=True):
    """Stored form of a core Block; properties are kept as JSON"""
    __tablename__ = "blocks"
    id: str = Field(primary_key=True)
    document_id: str = Field(..., foreign_key="documents.id", index=True, nullable=False)
    parent_id: Optional[str] = Field(default=None)
    type: str = Field(..., nullable=False, description="BlockType value")
    content: str = Field(default="", sa_column=Column(Text, nullable=False))
    properties: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    position: int = Field(..., nullable=False, description="Position of the block within the document")
    created_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
    updated_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
