"""Block store interface used by the auto-save coordinator"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence

from sqlalchemy.engine import Engine
from sqlmodel import Session

from distillmd.core.models import Block
from distillmd.crud import blocks as block_crud


logger = logging.getLogger(__name__)


class BlockStore(ABC):
    @abstractmethod
    def get_blocks(self, document_id: str) -> list[Block]:
        raise NotImplementedError

    @abstractmethod
    def replace_blocks(self, document_id: str, blocks: Sequence[Block]) -> None:
        """Persist `blocks` as the complete, ordered content of the document."""
        raise NotImplementedError


@dataclass
class MemoryBlockStore(BlockStore):
    _blocks: dict[str, list[Block]] = field(default_factory=dict)
    calls: int = 0

    def get_blocks(self, document_id: str) -> list[Block]:
        return list(self._blocks.get(document_id, []))

    def replace_blocks(self, document_id: str, blocks: Sequence[Block]) -> None:
        self.calls += 1
        self._blocks[document_id] = list(blocks)


class SQLBlockStore(BlockStore):
    """One committed transaction per call."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def get_blocks(self, document_id: str) -> list[Block]:
        with Session(self.engine) as session:
            return block_crud.get_blocks(session, document_id)

    def replace_blocks(self, document_id: str, blocks: Sequence[Block]) -> None:
        with Session(self.engine) as session:
            block_crud.replace_blocks(session, document_id, blocks)
            session.commit()
        logger.debug("Stored %d blocks for %s", len(blocks), document_id)
