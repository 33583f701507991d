"""Markdown <-> flat block list conversion for the editable document view"""

import re
from datetime import datetime
from typing import Callable, Sequence, Union

from distillmd.core.models import Block, BlockDraft, BlockType
from distillmd.core.utils.patterns import TIMESTAMP_RE


CALLOUT_ICONS = ('💡', '⚠️', '⚠', '📌', '✅', '❌', '🔥', '💭', '📝', '🎯', '🚀')
DEFAULT_CALLOUT_ICON = '💡'

FENCE = '```'
DIVIDER_RE = re.compile(r'^(?:-{3,}|\*{3,})$')
TODO_RE = re.compile(r'^[-*]\s*\[([ xX])\]\s*(.*)$')
BULLET_RE = re.compile(r'^[-*]\s+(.*)$')
NUMBERED_RE = re.compile(r'^\d+\.\s+(.*)$')
CALLOUT_RE = re.compile(r'^>\s*(' + '|'.join(map(re.escape, CALLOUT_ICONS)) + r')\s*(.*)$')
QUOTE_RE = re.compile(r'^>\s?(.*)$')
IMAGE_RE = re.compile(r'^!\[([^\]]*)\]\(([^)\s]*)\)$')
TOGGLE_RE = re.compile(r'^([▶▼])\s+(.*)$')

HEADINGS = [('### ', BlockType.heading3), ('## ', BlockType.heading2), ('# ', BlockType.heading1)]


def _draft(kind: BlockType, content: str, **properties) -> BlockDraft:
    return BlockDraft(type=kind, content=content.strip(), properties=properties)


def _line_to_draft(line: str) -> BlockDraft:
    """Map one non-blank, non-fence line to a draft; first matching form wins."""
    for prefix, kind in HEADINGS:
        if line.startswith(prefix):
            return _draft(kind, line[len(prefix):])
    if DIVIDER_RE.match(line):
        return _draft(BlockType.divider, '')
    if m := TODO_RE.match(line):
        return _draft(BlockType.todo, m.group(2), checked=m.group(1).lower() == 'x')
    if m := BULLET_RE.match(line):
        return _draft(BlockType.bullet, m.group(1))
    if m := NUMBERED_RE.match(line):
        return _draft(BlockType.numbered, m.group(1))
    if m := CALLOUT_RE.match(line):
        return _draft(BlockType.callout, m.group(2), icon=m.group(1))
    if m := QUOTE_RE.match(line):
        return _draft(BlockType.quote, m.group(1))
    if m := IMAGE_RE.match(line):
        return _draft(BlockType.image, m.group(1), image_url=m.group(2))
    if m := TOGGLE_RE.match(line):
        return _draft(BlockType.toggle, m.group(2), collapsed=m.group(1) == '▶')
    if m := TIMESTAMP_RE.search(line):
        return _draft(BlockType.timestamp, line[:m.start()] + line[m.end():], timestamp=m.group(1))
    return _draft(BlockType.text, line)


def markdown_to_blocks(markdown: str) -> list[BlockDraft]:
    """Convert summary markdown into drafts with sequential positions; blank lines are dropped."""
    lines = (markdown or '').splitlines()
    drafts: list[BlockDraft] = []
    i = 0
    while i < len(lines):
        line = lines[i].strip()
        if line.startswith(FENCE):
            language = line[len(FENCE):].strip()
            body: list[str] = []
            i += 1
            while i < len(lines) and not lines[i].strip().startswith(FENCE):
                body.append(lines[i])
                i += 1
            drafts.append(BlockDraft(type=BlockType.code, content='\n'.join(body), properties={'language': language}))
        elif line:
            drafts.append(_line_to_draft(line))
        i += 1
    return [d.model_copy(update={'position': n}) for n, d in enumerate(drafts)]


def materialize_blocks(drafts: Sequence[BlockDraft], document_id: str) -> list[Block]:
    """Give drafts fresh ids and an owning document; positions follow list order."""
    now = datetime.now()
    return [
        Block(
            document_id=document_id,
            type=d.type,
            content=d.content,
            properties=dict(d.properties),
            position=n,
            created_at=now,
            updated_at=now,
        )
        for n, d in enumerate(drafts)
    ]


def _table(rows: list[list[str]]) -> str:
    if not rows:
        return ''
    lines = ['| ' + ' | '.join(rows[0]) + ' |', '| ' + ' | '.join('---' for _ in rows[0]) + ' |']
    lines += ['| ' + ' | '.join(row) + ' |' for row in rows[1:]]
    return '\n'.join(lines)


AnyBlock = Union[Block, BlockDraft]

RENDERERS: dict[BlockType, Callable[[str, dict], str]] = {
    BlockType.heading1:   lambda c, p: f'# {c}',
    BlockType.heading2:   lambda c, p: f'## {c}',
    BlockType.heading3:   lambda c, p: f'### {c}',
    BlockType.bullet:     lambda c, p: f'- {c}',
    BlockType.numbered:   lambda c, p: f'1. {c}',
    BlockType.todo:       lambda c, p: f"- [{'x' if p.get('checked') else ' '}] {c}",
    BlockType.quote:      lambda c, p: f'> {c}',
    BlockType.callout:    lambda c, p: f"> {p.get('icon') or DEFAULT_CALLOUT_ICON} {c}",
    BlockType.code:       lambda c, p: f"{FENCE}{p.get('language') or ''}\n{c}\n{FENCE}",
    BlockType.divider:    lambda c, p: '---',
    BlockType.timestamp:  lambda c, p: f"[{p.get('timestamp') or '00:00:00'}] {c}",
    BlockType.ai_summary: lambda c, p: f'> ✨ **AI Summary**\n> {c}',
    BlockType.embed:      lambda c, p: p.get('embed_url') or c,
    BlockType.toggle:     lambda c, p: f"{'▶' if p.get('collapsed') else '▼'} {c}",
    BlockType.image:      lambda c, p: f"![{p.get('image_caption') or c}]({p.get('image_url') or ''})",
    BlockType.table:      lambda c, p: _table(p.get('table_data') or [['']]),
}


def block_to_markdown(block: AnyBlock) -> str:
    render = RENDERERS.get(block.type)
    return render(block.content, block.properties or {}) if render else block.content


def blocks_to_markdown(blocks: Sequence[AnyBlock]) -> str:
    """Render blocks back to markdown, one blank line between blocks."""
    return '\n\n'.join(block_to_markdown(b) for b in blocks)
