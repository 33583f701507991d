"""Shared line patterns for AI summary markdown"""

import re


TIMESTAMP_RE = re.compile(r'\[(\d{1,2}:\d{2}(?::\d{2})?)\]')
LEADING_TIMESTAMP_RE = re.compile(r'^\[(\d{1,2}:\d{2}(?::\d{2})?)\]\s*')

TITLE_RE = re.compile(r'^#\s+\S')
INTRO_MARKER_RE = re.compile(r'^(?:\*\*)?\[(?:intro|인트로)\](?:\*\*)?:?\s*', re.IGNORECASE)

HEADING_SECTION_RE = re.compile(r'^#{2,3}\s+(.+)$')
NUMBERED_SECTION_RE = re.compile(r'^(\d+)\.(?!\d)\s+(.+)$')
SUBSECTION_RE = re.compile(r'^(\d+\.\d+)\.?\s+(.+)$')

BULLET_RE = re.compile(r'^[ \t]*[-*][ \t]+(.+)$', re.MULTILINE)


def strip_intro_marker(line: str) -> str:
    """Return the stripped line with any leading [Intro]/[인트로] marker removed."""
    return INTRO_MARKER_RE.sub('', line.strip()).strip()


def split_timestamp(text: str) -> tuple[str, str | None]:
    """Remove the first [HH:MM] token from text; return (text, timestamp or None)."""
    m = TIMESTAMP_RE.search(text)
    if not m:
        return text.strip(), None
    return (text[:m.start()] + text[m.end():]).strip(), m.group(1)


def unbold(text: str) -> str:
    """Strip a single pair of ** wrapping the whole text."""
    text = text.strip()
    if len(text) > 4 and text.startswith('**') and text.endswith('**'):
        return text[2:-2].strip()
    return text


def is_outline_start(line: str) -> bool:
    """True for lines that end the intro: numbered sections, subsections, ##/### headings."""
    return bool(
        HEADING_SECTION_RE.match(line)
        or NUMBERED_SECTION_RE.match(line)
        or SUBSECTION_RE.match(line)
    )
