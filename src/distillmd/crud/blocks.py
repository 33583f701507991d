"""Block persistence: snapshot replacement and first-open migration from markdown"""

import logging
from datetime import datetime
from typing import Sequence

from sqlmodel import Session, select

from distillmd.core.extract.blocks import markdown_to_blocks, materialize_blocks
from distillmd.core.models import Block, BlockType
from distillmd.crud.documents import require_document
from distillmd.crud.tables import BlockRow


logger = logging.getLogger(__name__)


def _row_to_block(r: BlockRow) -> Block:
    return Block(
        id=r.id,
        document_id=r.document_id,
        parent_id=r.parent_id,
        type=BlockType(r.type),
        content=r.content,
        properties=dict(r.properties or {}),
        position=r.position,
        created_at=r.created_at,
        updated_at=r.updated_at,
    )


def _apply(row: BlockRow, block: Block, position: int) -> BlockRow:
    row.parent_id = block.parent_id
    row.type = block.type.value
    row.content = block.content
    row.properties = dict(block.properties)
    row.position = position
    row.updated_at = block.updated_at
    return row


def get_blocks(session: Session, document_id: str) -> list[Block]:
    """Blocks of a document ordered by position. Raises ValueError for an unknown document."""
    require_document(session, document_id)
    rows = session.exec(
        select(BlockRow)
        .where(BlockRow.document_id == document_id)
        .order_by(BlockRow.position.asc())
    ).all()
    return [_row_to_block(r) for r in rows]


def replace_blocks(session: Session, document_id: str, blocks: Sequence[Block]) -> int:
    """Make the stored blocks of a document equal to `blocks`.

    Upserts every given block at its list index and deletes stored blocks that
    are absent from the list. Returns the number of deleted rows.
    Flushes but does not commit; caller controls the transaction.
    """
    doc = require_document(session, document_id)
    existing = {
        r.id: r for r in session.exec(select(BlockRow).where(BlockRow.document_id == document_id)).all()
    }
    keep = set()
    for position, block in enumerate(blocks):
        keep.add(block.id)
        row = existing.get(block.id)
        if row is None:
            row = BlockRow(id=block.id, document_id=document_id, type=block.type.value,
                           position=position, created_at=block.created_at)
        session.add(_apply(row, block, position))

    removed = [r for block_id, r in existing.items() if block_id not in keep]
    for row in removed:
        session.delete(row)

    doc.updated_at = datetime.now()
    session.add(doc)
    session.flush()
    logger.debug("Replaced blocks for %s: %d kept, %d removed", document_id, len(keep), len(removed))
    return len(removed)


def migrate_document_to_blocks(session: Session, document_id: str) -> list[Block]:
    """Convert summary_md into stored blocks the first time a document is opened.

    Later calls return the stored blocks unchanged. Flushes but does not commit.
    """
    doc = require_document(session, document_id)
    if doc.blocks_migrated:
        return get_blocks(session, document_id)

    blocks = materialize_blocks(markdown_to_blocks(doc.summary_md), document_id)
    replace_blocks(session, document_id, blocks)
    doc.blocks_migrated = True
    session.add(doc)
    session.flush()
    logger.info("Migrated document %s to %d blocks", document_id, len(blocks))
    return blocks
