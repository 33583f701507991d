"""Action item extraction with keyword-based priority"""

import re

from distillmd.core.models import ActionItem, Priority
from distillmd.core.utils.patterns import BULLET_RE


ACTION_PATTERNS = [
    # explicit markers: - TODO: ..., - **할 일**: ...
    re.compile(r'^[ \t]*[-*][ \t]*(?:\*\*)?(?:TODO|할\s*일|실행|해야\s*할|Action|액션)(?:\*\*)?[:\s]+([^\n]+)',
               re.IGNORECASE | re.MULTILINE),
    # strike-marker phrasing: - ~복습~를 해야 합니다
    re.compile(r'^[ \t]*[-*][ \t]*~(.+?)~를?\s*(?:해야|하세요|합니다|하기)', re.IGNORECASE | re.MULTILINE),
    # Korean imperative suffixes: - 코드를 직접 작성해보세요
    re.compile(r'^[ \t]*[-*][ \t]*(.+?)(?:을|를)\s*(?:해야|하세요|합니다|해보세요|추천)', re.IGNORECASE | re.MULTILINE),
]
HIGH_RE = re.compile(r'중요|필수|반드시|꼭|urgent|critical', re.IGNORECASE)
LOW_RE = re.compile(r'선택|나중에|가능하면|optional', re.IGNORECASE)
ACTION_VERB_RE = re.compile(r'해야|하세요|합니다|하기|실행|적용|시도', re.IGNORECASE)

MIN_ACTION_LEN = 5
FALLBACK_BULLETS = 5
MAX_ACTIONS = 10


def priority_of(content: str) -> Priority:
    """Urgency keywords win over deferral keywords; default is medium."""
    if HIGH_RE.search(content):
        return Priority.high
    if LOW_RE.search(content):
        return Priority.low
    return Priority.medium


def extract_actions(markdown: str, limit: int = MAX_ACTIONS) -> list[ActionItem]:
    """Run each pattern over the summary; fall back to action-verb bullets when none match."""
    markdown = markdown or ''
    actions: list[ActionItem] = []
    seen: set[str] = set()

    for pattern in ACTION_PATTERNS:
        for m in pattern.finditer(markdown):
            content = (m.group(1) or '').strip()
            if len(content) > MIN_ACTION_LEN and content not in seen:
                seen.add(content)
                actions.append(ActionItem(content=content, priority=priority_of(content)))

    if not actions:
        for bullet in BULLET_RE.findall(markdown)[:FALLBACK_BULLETS]:
            content = bullet.strip()
            if ACTION_VERB_RE.search(content):
                actions.append(ActionItem(content=content, priority=Priority.medium))

    return actions[:limit]
