"""Pure transforms over an ordered block list.

Every function takes the current snapshot and returns a new list with
positions rewritten to ``0..n-1``. When an operation does not apply (unknown
id, boundary move, unchanged type) the input list object itself is returned,
so callers can detect a no-op with ``result is blocks``.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Sequence

from distillmd.core.models import Block, BlockType, new_block_id


logger = logging.getLogger(__name__)


class MoveDirection(str, Enum):
    up = "up"
    down = "down"


def _index_of(blocks: Sequence[Block], block_id: str) -> int:
    """Index of block_id in blocks, or -1."""
    return next((i for i, b in enumerate(blocks) if b.id == block_id), -1)


def _touch(block: Block, **changes) -> Block:
    return block.model_copy(update={'properties': dict(block.properties), **changes, 'updated_at': datetime.now()})


def normalize_positions(blocks: Sequence[Block]) -> list[Block]:
    """Rewrite positions to match list order; blocks already in place are reused."""
    return [
        b if b.position == i else b.model_copy(update={'position': i, 'properties': dict(b.properties)})
        for i, b in enumerate(blocks)
    ]


def make_block(
    document_id: str,
    block_type: BlockType = BlockType.text,
    content: str = "",
    properties: Optional[dict[str, Any]] = None,
    parent_id: Optional[str] = None,
    ) -> Block:
    """A new block with a fresh id; its position is assigned on insertion."""
    now = datetime.now()
    return Block(
        document_id=document_id,
        parent_id=parent_id,
        type=block_type,
        content=content,
        properties=dict(properties or {}),
        created_at=now,
        updated_at=now,
    )


def insert_after(blocks: Sequence[Block], after_id: Optional[str], new_block: Block) -> list[Block]:
    """Insert new_block after after_id, or append when after_id is None."""
    if after_id is None:
        return normalize_positions([*blocks, new_block])
    i = _index_of(blocks, after_id)
    if i < 0:
        logger.warning("insert_after: unknown anchor block %s", after_id)
        return blocks
    return normalize_positions([*blocks[:i + 1], new_block, *blocks[i + 1:]])


def split_block(blocks: Sequence[Block], block_id: str, before: str, after: str) -> list[Block]:
    """Keep `before` in the block; move `after` into a new text block right below it."""
    i = _index_of(blocks, block_id)
    if i < 0:
        logger.warning("split_block: unknown block %s", block_id)
        return blocks
    source = blocks[i]
    tail = make_block(source.document_id, BlockType.text, after, parent_id=source.parent_id)
    return normalize_positions([*blocks[:i], _touch(source, content=before), tail, *blocks[i + 1:]])


def merge_with_previous(blocks: Sequence[Block], block_id: str) -> tuple[list[Block], Optional[int]]:
    """Append a block's content to its predecessor and drop it.

    Returns (blocks, merge_point) where merge_point is the length of the
    previous block's original content, for cursor placement. The first block
    and unknown ids are no-ops with merge_point None.
    """
    i = _index_of(blocks, block_id)
    if i <= 0:
        if i < 0:
            logger.warning("merge_with_previous: unknown block %s", block_id)
        return blocks, None
    previous, current = blocks[i - 1], blocks[i]
    merged = _touch(previous, content=previous.content + current.content)
    return normalize_positions([*blocks[:i - 1], merged, *blocks[i + 1:]]), len(previous.content)


def delete_block(blocks: Sequence[Block], block_id: str) -> list[Block]:
    i = _index_of(blocks, block_id)
    if i < 0:
        return blocks
    return normalize_positions([*blocks[:i], *blocks[i + 1:]])


def duplicate_block(blocks: Sequence[Block], block_id: str) -> list[Block]:
    """Insert a copy with a fresh id directly after the source."""
    i = _index_of(blocks, block_id)
    if i < 0:
        return blocks
    now = datetime.now()
    copy = blocks[i].model_copy(update={
        'id': new_block_id(),
        'properties': dict(blocks[i].properties),
        'created_at': now,
        'updated_at': now,
    })
    return normalize_positions([*blocks[:i + 1], copy, *blocks[i + 1:]])


def move_block(blocks: Sequence[Block], block_id: str, direction: MoveDirection) -> list[Block]:
    """Swap with the neighbour in `direction`; no-op at either end."""
    i = _index_of(blocks, block_id)
    j = i - 1 if MoveDirection(direction) == MoveDirection.up else i + 1
    if i < 0 or not 0 <= j < len(blocks):
        return blocks
    moved = list(blocks)
    moved[i], moved[j] = moved[j], moved[i]
    return normalize_positions(moved)


def reorder_block(blocks: Sequence[Block], dragged_id: str, drop_index: int) -> list[Block]:
    """Drag-and-drop: remove the dragged block and reinsert it before the block at drop_index.

    drop_index refers to the list before removal, so a target after the
    source shifts down by one once the dragged block is taken out.
    """
    source = _index_of(blocks, dragged_id)
    if source < 0:
        return blocks
    target = max(0, min(drop_index, len(blocks)))
    if target > source:
        target -= 1
    if target == source:
        return blocks
    remaining = [b for b in blocks if b.id != dragged_id]
    remaining.insert(target, blocks[source])
    return normalize_positions(remaining)


def retype_block(blocks: Sequence[Block], block_id: str, new_type: BlockType) -> list[Block]:
    """Change only the type tag; content and properties are preserved."""
    i = _index_of(blocks, block_id)
    if i < 0 or blocks[i].type == BlockType(new_type):
        return blocks
    return normalize_positions([*blocks[:i], _touch(blocks[i], type=BlockType(new_type)), *blocks[i + 1:]])


def update_content(blocks: Sequence[Block], block_id: str, content: str) -> list[Block]:
    i = _index_of(blocks, block_id)
    if i < 0 or blocks[i].content == content:
        return blocks
    return normalize_positions([*blocks[:i], _touch(blocks[i], content=content), *blocks[i + 1:]])


def update_properties(blocks: Sequence[Block], block_id: str, properties: dict[str, Any]) -> list[Block]:
    """Merge properties into the block's map; a None value removes the key."""
    i = _index_of(blocks, block_id)
    if i < 0:
        return blocks
    merged = {**blocks[i].properties, **properties}
    merged = {k: v for k, v in merged.items() if v is not None}
    if merged == blocks[i].properties:
        return blocks
    return normalize_positions([*blocks[:i], _touch(blocks[i], properties=merged), *blocks[i + 1:]])
