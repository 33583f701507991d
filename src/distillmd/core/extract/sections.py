"""Line classification and grouping of summary markdown into ParsedSections.

Each non-blank line is classified independently by the first matching rule
in ``STRUCTURE_RULES`` then ``ITEM_RULES``; the resulting events are then
grouped into sections without any cross-line mutable state. Two numbering
schemes coexist: ``1. Title`` lines carry their own number, while ``##`` and
``###`` headings are numbered by their ordinal among all sections. A summary
mixing both can therefore produce duplicate or out-of-sequence numbers.
"""

import re
from dataclasses import dataclass
from itertools import takewhile
from typing import Callable, Optional, Union

from distillmd.core.models import ParsedSection, SectionItem, SectionItemType
from distillmd.core.utils.patterns import (
    HEADING_SECTION_RE,
    LEADING_TIMESTAMP_RE,
    NUMBERED_SECTION_RE,
    SUBSECTION_RE,
    TITLE_RE,
    split_timestamp,
    strip_intro_marker,
    unbold,
)


@dataclass(frozen=True)
class SectionStart:
    """A classified line that opens a new top-level section."""
    title: str
    number: Optional[str] = None        # None: numbered by ordinal among sections
    timestamp: Optional[str] = None


@dataclass(frozen=True)
class Skip:
    """A recognised line that contributes nothing (document title)."""


Event = Union[SectionStart, SectionItem, Skip]
Rule = tuple[re.Pattern, Callable[[re.Match], Optional[Event]]]

QUOTE_GLYPHS = '"\'“”‘’「」'


def _item(kind: SectionItemType, content: str, **extra) -> SectionItem:
    return SectionItem(type=kind, content=content.strip(), **extra)


def _heading_section(m: re.Match) -> SectionStart:
    title, timestamp = split_timestamp(m.group(1))
    return SectionStart(title=unbold(title), timestamp=timestamp)


def _highlight(m: re.Match) -> SectionItem:
    marker = m.group(1).rstrip(':').strip()
    return _item(SectionItemType.highlight_box, unbold(m.group(2)), marker=marker)


def _bullet(m: re.Match) -> SectionItem:
    body = m.group(1)
    ts = LEADING_TIMESTAMP_RE.match(body)
    if ts:
        return _item(SectionItemType.timestamp_item, body[ts.end():], timestamp=ts.group(1))
    return _item(SectionItemType.bullet, body)


def _quote(m: re.Match) -> Optional[SectionItem]:
    content = m.group(1).strip().strip(QUOTE_GLYPHS).strip()
    return _item(SectionItemType.quote, content) if content else None


STRUCTURE_RULES: list[Rule] = [
    (TITLE_RE,            lambda m: Skip()),
    (HEADING_SECTION_RE,  _heading_section),
    (NUMBERED_SECTION_RE, lambda m: SectionStart(title=unbold(m.group(2)), number=m.group(1))),
    (SUBSECTION_RE,       lambda m: _item(SectionItemType.subsection, unbold(m.group(2)), marker=m.group(1))),
]

ITEM_RULES: list[Rule] = [
    (re.compile(r'^#{4,}\s+(.+)$'),
        lambda m: _item(SectionItemType.heading, m.group(1))),
    (re.compile(r'^(?:[-*]\s+|>\s*)?(?:\*\*)?(💡|📌|⚠️?|TIP:|팁:|NOTE:)(?:\*\*)?\s*(.*)$', re.IGNORECASE),
        _highlight),
    (re.compile(r'^([a-zA-Z])[.)]\s+(.+)$'),
        lambda m: _item(SectionItemType.alpha_list, m.group(2), marker=m.group(1))),
    (re.compile(r'^(i{1,3}|iv|vi{0,3}|ix|x)[.)]\s+(.+)$'),
        lambda m: _item(SectionItemType.roman_list, m.group(2), marker=m.group(1))),
    (re.compile(r'^[-*]\s+(.+)$'), _bullet),
    (re.compile(r'^>\s?(.*)$'), _quote),
    (re.compile(r'^(.+)$'),
        lambda m: _item(SectionItemType.text, m.group(1))),
]


def classify_line(line: str) -> Optional[Event]:
    """Classify one raw line; first matching rule wins. None for blank or dropped lines."""
    text = strip_intro_marker(line)
    if not text:
        return None
    for pattern, classify in STRUCTURE_RULES + ITEM_RULES:
        m = pattern.match(text)
        if m:
            return classify(m)
    return None


def _build_section(start: SectionStart, body: list, ordinal: int) -> ParsedSection:
    """Leading text lines become the description; everything after is an item."""
    lead = list(takewhile(lambda e: e.type == SectionItemType.text, body))
    return ParsedSection(
        number=start.number or str(ordinal),
        title=start.title,
        description=' '.join(e.content for e in lead) or None,
        timestamp=start.timestamp,
        items=tuple(body[len(lead):]),
    )


def group_sections(events: list) -> list[ParsedSection]:
    """Group classified events into sections; events before the first section are dropped."""
    events = [e for e in events if isinstance(e, (SectionStart, SectionItem))]
    starts = [i for i, e in enumerate(events) if isinstance(e, SectionStart)]
    bounds = zip(starts, starts[1:] + [len(events)])
    return [
        _build_section(events[a], events[a + 1:b], ordinal)
        for ordinal, (a, b) in enumerate(bounds, start=1)
    ]


def parse_sections(markdown: str) -> list[ParsedSection]:
    """Parse summary markdown into ordered sections. Never raises."""
    if not isinstance(markdown, str) or not markdown:
        return []
    return group_sections([classify_line(line) for line in markdown.splitlines()])
