"""Quote extraction: block quotes, quoted spans, and labelled insights"""

import re

from distillmd.core.models import Quote
from distillmd.core.utils.patterns import TIMESTAMP_RE


QUOTE_RE = re.compile(
    r'^[ \t]*>[ \t]*["“]?([^"“”\n]+)["”]?'     # > "block quote"
    r'|["“]([^"“”\n]+)["”]',                    # "inline quoted span"
    re.MULTILINE,
)
INSIGHT_RE = re.compile(r'\*\*(?:Insight|인사이트|중요\s*인용)\*\*:\s*([^\n]+)', re.IGNORECASE)

MIN_QUOTE_LEN = 10
TIMESTAMP_WINDOW = 100
MAX_QUOTES = 10


def _distance(m: re.Match, start: int, end: int) -> int:
    """Characters between a token and the span [start, end); 0 when they overlap."""
    if m.end() <= start:
        return start - m.end()
    return max(0, m.start() - end)


def _nearby_timestamp(markdown: str, start: int, end: int) -> str | None:
    """Nearest [HH:MM] token within TIMESTAMP_WINDOW characters of a match."""
    candidates = TIMESTAMP_RE.finditer(markdown, max(0, start - TIMESTAMP_WINDOW), end + TIMESTAMP_WINDOW)
    nearest = min(candidates, key=lambda m: _distance(m, start, end), default=None)
    return nearest.group(1) if nearest else None


def extract_quotes(markdown: str, limit: int = MAX_QUOTES) -> list[Quote]:
    """Collect up to `limit` distinct quotes in document order, then labelled insights."""
    markdown = markdown or ''
    quotes: list[Quote] = []
    seen: set[str] = set()

    for m in QUOTE_RE.finditer(markdown):
        content = (m.group(1) or m.group(2) or '').strip()
        if len(content) <= MIN_QUOTE_LEN or content in seen:
            continue
        seen.add(content)
        quotes.append(Quote(content=content, timestamp=_nearby_timestamp(markdown, m.start(), m.end())))

    for m in INSIGHT_RE.finditer(markdown):
        content = m.group(1).strip()
        if content and content not in seen:
            seen.add(content)
            quotes.append(Quote(content=content))

    return quotes[:limit]
