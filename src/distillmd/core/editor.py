"""Stateful document editor: snapshot ownership, change listeners, slash palette"""

import logging
from enum import Enum
from typing import Callable, Optional, Sequence

from pydantic import BaseModel

from distillmd.core import editing
from distillmd.core.editing import MoveDirection
from distillmd.core.models import Block, BlockType


logger = logging.getLogger(__name__)

SLASH_PLACEHOLDER = "/"

ChangeListener = Callable[[list[Block]], None]


class SlashCommand(BaseModel):
    id: str
    label: str
    label_en: str
    description: str
    block_type: BlockType
    category: str = "basic"
    shortcut: Optional[str] = None


SLASH_COMMANDS: list[SlashCommand] = [
    SlashCommand(id="text", label="텍스트", label_en="Text", description="일반 텍스트", block_type=BlockType.text),
    SlashCommand(id="page", label="페이지", label_en="Page", description="하위 페이지 생성", block_type=BlockType.page),
    SlashCommand(id="h1", label="제목 1", label_en="Heading 1", description="대제목", block_type=BlockType.heading1, shortcut="/h1"),
    SlashCommand(id="h2", label="제목 2", label_en="Heading 2", description="중제목", block_type=BlockType.heading2, shortcut="/h2"),
    SlashCommand(id="h3", label="제목 3", label_en="Heading 3", description="소제목", block_type=BlockType.heading3, shortcut="/h3"),
    SlashCommand(id="table", label="표", label_en="Table", description="간단한 표", block_type=BlockType.table),
    SlashCommand(id="bullet", label="글머리 기호 목록", label_en="Bulleted list", description="간단한 목록", block_type=BlockType.bullet),
    SlashCommand(id="number", label="번호 매기기 목록", label_en="Numbered list", description="순서가 있는 목록", block_type=BlockType.numbered),
    SlashCommand(id="todo", label="할 일 목록", label_en="To-do list", description="체크박스로 할 일 관리", block_type=BlockType.todo),
    SlashCommand(id="toggle", label="토글 목록", label_en="Toggle list", description="접고 펼칠 수 있는 목록", block_type=BlockType.toggle),
    SlashCommand(id="quote", label="인용", label_en="Quote", description="인용구 캡처", block_type=BlockType.quote),
    SlashCommand(id="divider", label="구분선", label_en="Divider", description="블록 시각적 분리", block_type=BlockType.divider),
    SlashCommand(id="callout", label="콜아웃", label_en="Callout", description="글 강조", block_type=BlockType.callout),
    SlashCommand(id="image", label="이미지", label_en="Image", description="이미지 업로드 또는 임베드", block_type=BlockType.image, category="media"),
    SlashCommand(id="video", label="동영상", label_en="Video", description="동영상 업로드 또는 임베드", block_type=BlockType.video, category="media"),
    SlashCommand(id="audio", label="오디오", label_en="Audio", description="오디오 업로드 또는 임베드", block_type=BlockType.audio, category="media"),
    SlashCommand(id="code", label="코드", label_en="Code", description="코드 스니펫 캡처", block_type=BlockType.code, category="media"),
    SlashCommand(id="file", label="파일", label_en="File", description="파일 업로드 또는 임베드", block_type=BlockType.file, category="media"),
    SlashCommand(id="bookmark", label="웹 북마크", label_en="Web bookmark", description="링크 미리보기 저장", block_type=BlockType.bookmark, category="media"),
]


def filter_commands(query: str, commands: Sequence[SlashCommand] = SLASH_COMMANDS) -> list[SlashCommand]:
    """Case-insensitive search over labels, description and id; a leading "/" matches shortcuts."""
    query = (query or "").strip().lower()
    if not query:
        return list(commands)
    bare = query.removeprefix("/")
    return [
        c for c in commands
        if bare in c.label.lower()
        or bare in c.label_en.lower()
        or bare in c.description.lower()
        or bare in c.id
        or (c.shortcut and query in c.shortcut.lower())
    ]


class PaletteMode(str, Enum):
    convert_in_place = "convert_in_place"
    insert_after = "insert_after"


class PaletteState(BaseModel):
    """Idle when mode is None; otherwise open and anchored at block_id."""
    mode: Optional[PaletteMode] = None
    block_id: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.mode is not None


IDLE = PaletteState()


class DocumentEditor:
    """Owns the current block snapshot of one document.

    Each operation runs a pure transform from ``distillmd.core.editing`` and
    commits the result. Listeners are notified only when the transform
    produced a new list; no-ops return the same object and are not reported.
    """

    def __init__(self, document_id: str, blocks: Sequence[Block] = ()):
        self.document_id = document_id
        self._blocks: list[Block] = editing.normalize_positions(blocks)
        self._listeners: list[ChangeListener] = []
        self.palette: PaletteState = IDLE

    @property
    def blocks(self) -> list[Block]:
        return self._blocks

    def get(self, block_id: str) -> Optional[Block]:
        return next((b for b in self._blocks if b.id == block_id), None)

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _commit(self, result: list[Block], op: str) -> bool:
        if result is self._blocks:
            logger.debug("%s: no change", op)
            return False
        self._blocks = result
        logger.debug("%s: committed %d blocks", op, len(result))
        for listener in list(self._listeners):
            listener(result)
        return True

    # Block operations

    def add_block(
        self,
        block_type: BlockType = BlockType.text,
        content: str = "",
        after_id: Optional[str] = None,
        properties: Optional[dict] = None,
        ) -> Optional[Block]:
        """Create a block after after_id (or at the end); returns it, or None if the anchor is unknown."""
        block = editing.make_block(self.document_id, block_type, content, properties)
        if not self._commit(editing.insert_after(self._blocks, after_id, block), "insert_after"):
            return None
        return self.get(block.id)

    def split(self, block_id: str, before: str, after: str) -> Optional[Block]:
        """Split at the cursor; returns the new trailing block."""
        result = editing.split_block(self._blocks, block_id, before, after)
        if not self._commit(result, "split_block"):
            return None
        i = next(i for i, b in enumerate(result) if b.id == block_id)
        return result[i + 1]

    def merge_with_previous(self, block_id: str) -> Optional[int]:
        result, merge_point = editing.merge_with_previous(self._blocks, block_id)
        self._commit(result, "merge_with_previous")
        return merge_point

    def delete(self, block_id: str) -> bool:
        return self._commit(editing.delete_block(self._blocks, block_id), "delete_block")

    def duplicate(self, block_id: str) -> bool:
        return self._commit(editing.duplicate_block(self._blocks, block_id), "duplicate_block")

    def move(self, block_id: str, direction: MoveDirection) -> bool:
        return self._commit(editing.move_block(self._blocks, block_id, direction), "move_block")

    def reorder(self, dragged_id: str, drop_index: int) -> bool:
        return self._commit(editing.reorder_block(self._blocks, dragged_id, drop_index), "reorder_block")

    def retype(self, block_id: str, new_type: BlockType) -> bool:
        return self._commit(editing.retype_block(self._blocks, block_id, new_type), "retype_block")

    def update_content(self, block_id: str, content: str) -> bool:
        return self._commit(editing.update_content(self._blocks, block_id, content), "update_content")

    def update_properties(self, block_id: str, properties: dict) -> bool:
        return self._commit(editing.update_properties(self._blocks, block_id, properties), "update_properties")

    # Slash palette

    def open_slash_menu(self, block_id: str) -> bool:
        """Open in convert-in-place mode; only from a block that is empty or holds just "/"."""
        block = self.get(block_id)
        if block is None or block.content.strip() not in ("", SLASH_PLACEHOLDER):
            return False
        self.palette = PaletteState(mode=PaletteMode.convert_in_place, block_id=block_id)
        return True

    def open_insert_menu(self, anchor_id: str) -> bool:
        """Open in insert-after mode from an explicit insert affordance."""
        if self.get(anchor_id) is None:
            return False
        self.palette = PaletteState(mode=PaletteMode.insert_after, block_id=anchor_id)
        return True

    def select_slash_command(self, block_type: BlockType) -> Optional[Block]:
        """Apply the selection for the open palette and return to idle.

        Convert mode retypes the anchor and clears a "/" placeholder; insert
        mode adds an empty block of that type after the anchor. Returns the
        affected block, or None when the palette was idle.
        """
        state, self.palette = self.palette, IDLE
        if not state.is_open:
            return None
        if state.mode == PaletteMode.insert_after:
            return self.add_block(block_type, after_id=state.block_id)
        self._clear_placeholder(state.block_id)
        self.retype(state.block_id, block_type)
        return self.get(state.block_id)

    def close_slash_menu(self) -> None:
        """Return to idle without a selection, clearing a "/" placeholder left in the anchor."""
        state, self.palette = self.palette, IDLE
        if state.mode == PaletteMode.convert_in_place:
            self._clear_placeholder(state.block_id)

    def _clear_placeholder(self, block_id: str) -> None:
        block = self.get(block_id)
        if block is not None and block.content.strip() == SLASH_PLACEHOLDER:
            self.update_content(block_id, "")
