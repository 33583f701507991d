"""Intro text, key points, and learning keywords"""

import re

from distillmd.core.utils.patterns import BULLET_RE, TITLE_RE, is_outline_start, strip_intro_marker


KEY_POINTS_SECTION_RE = re.compile(
    r'^#{2,3}\s*핵심\s*정리.*?(?=^#{2,3}\s|\Z)', re.IGNORECASE | re.MULTILINE | re.DOTALL,
)
KEYWORD_SECTION_RE = re.compile(
    r'^#{2,4}\s*(?:추가\s*학습\s*키워드|관련\s*키워드|더\s*알아보기).*?(?=^#{2,3}\s|\Z)',
    re.IGNORECASE | re.MULTILINE | re.DOTALL,
)

FALLBACK_KEY_POINTS = 5
MAX_KEYWORDS = 10


def extract_intro(markdown: str) -> str:
    """Lines before the first numbered or heading line, minus the title and intro markers."""
    lines: list[str] = []
    for raw in (markdown or '').splitlines():
        line = raw.strip()
        if not line or TITLE_RE.match(line):
            continue
        if is_outline_start(line):
            break
        line = strip_intro_marker(line)
        if line:
            lines.append(line)
    return '\n'.join(lines)


def _section_bullets(pattern: re.Pattern, markdown: str) -> list[str]:
    section = pattern.search(markdown)
    if not section:
        return []
    return [b.strip() for b in BULLET_RE.findall(section.group(0))]


def extract_key_points(markdown: str) -> list[str]:
    """Bullets of a 핵심 정리 section; otherwise the first few bullets of the summary."""
    markdown = markdown or ''
    points = _section_bullets(KEY_POINTS_SECTION_RE, markdown)
    if points:
        return points
    return [b.strip() for b in BULLET_RE.findall(markdown)[:FALLBACK_KEY_POINTS]]


def extract_keywords(markdown: str, fallback: list[str] | None = None, limit: int = MAX_KEYWORDS) -> list[str]:
    """Distinct bullets of a learning-keyword section, else the fallback tags."""
    keywords = list(dict.fromkeys(k for k in _section_bullets(KEYWORD_SECTION_RE, markdown or '') if k))
    if not keywords:
        keywords = list(fallback or [])
    return keywords[:limit]
