"""Data models for blocks, parsed sections, and extracted view models"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def new_block_id() -> str:
    """Return a fresh opaque block identifier."""
    return str(uuid4())


class BlockType(str, Enum):
    """Restrict block content to a predefined set of editor elements"""
    text = "text"
    heading1 = "heading1"
    heading2 = "heading2"
    heading3 = "heading3"
    bullet = "bullet"
    numbered = "numbered"
    todo = "todo"
    toggle = "toggle"
    quote = "quote"
    callout = "callout"
    divider = "divider"
    code = "code"
    timestamp = "timestamp"
    ai_summary = "ai_summary"
    embed = "embed"
    image = "image"
    video = "video"
    audio = "audio"
    file = "file"
    bookmark = "bookmark"
    page = "page"
    table = "table"


class Block(BaseModel):
    """The fundamental, independently addressable unit of document content.

    Blocks are immutable values: editor operations return copies made with
    ``model_copy(update=...)`` and never change a block in place. Copies get
    their own properties dict; a block reused unchanged across snapshots is the
    same object, so its properties must not be mutated by callers.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_block_id)
    document_id: str
    parent_id: Optional[str] = None     # reserved for nesting; flat list operations carry it through
    type: BlockType = BlockType.text
    content: str = ""
    properties: dict[str, Any] = Field(default_factory=dict)
    position: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class BlockDraft(BaseModel):
    """Converter output: a typed block without identity or owning document."""
    type: BlockType
    content: str
    properties: dict[str, Any] = Field(default_factory=dict)
    position: int = 0


class SectionItemType(str, Enum):
    heading = "heading"
    bullet = "bullet"
    quote = "quote"
    text = "text"
    timestamp_item = "timestamp-item"
    alpha_list = "alpha-list"
    roman_list = "roman-list"
    highlight_box = "highlight-box"
    subsection = "subsection"


class SectionItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: SectionItemType
    content: str
    marker: Optional[str] = None
    timestamp: Optional[str] = None


class ParsedSection(BaseModel):
    """Derived read-only grouping of summary content under one heading."""
    model_config = ConfigDict(frozen=True)

    number: str
    title: str
    description: Optional[str] = None
    timestamp: Optional[str] = None
    items: tuple[SectionItem, ...] = ()


class TocEntry(BaseModel):
    level: int
    number: str
    title: str
    id: str


class Quote(BaseModel):
    content: str
    timestamp: Optional[str] = None


class Priority(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class ActionItem(BaseModel):
    content: str
    priority: Priority = Priority.medium


class Term(BaseModel):
    term: str
    explanation: str


class Insights(BaseModel):
    """All heuristic extractions for one summary, bundled for rendering."""
    intro: str = ""
    toc: list[TocEntry] = []
    quotes: list[Quote] = []
    actions: list[ActionItem] = []
    terms: list[Term] = []
    key_points: list[str] = []
    keywords: list[str] = []


class SaveStatus(str, Enum):
    """Latest known state of the auto-save round trip; process-local only."""
    saved = "saved"
    saving = "saving"
    unsaved = "unsaved"
    error = "error"
