"""Table of contents derived from numbered summary lines"""

import re

from distillmd.core.models import TocEntry


TOC_LINE_RE = re.compile(r'^(\d+(?:\.\d+)?\.?)\s+(.+)$')
MAX_TITLE_LEN = 100


def _anchor(number: str, seen: dict[str, int]) -> str:
    """Anchor id for a section number, suffixed when the number repeats."""
    base = 'section-' + number.replace('.', '-')
    seen[base] = seen.get(base, 0) + 1
    return base if seen[base] == 1 else f'{base}-{seen[base]}'


def extract_toc(markdown: str) -> list[TocEntry]:
    """Return level 1/2 entries for `1. Title` and `1.1 Title` lines.

    Titles opening with ** or longer than 100 characters are rejected; they
    are almost always bold list items rather than outline headings.
    """
    entries: list[TocEntry] = []
    seen: dict[str, int] = {}
    for line in (markdown or '').splitlines():
        m = TOC_LINE_RE.match(line.strip())
        if not m:
            continue
        number, title = m.group(1).rstrip('.'), m.group(2).strip()
        if title.startswith('**') or len(title) > MAX_TITLE_LEN:
            continue
        entries.append(TocEntry(
            level=1 if '.' not in number else 2,
            number=number,
            title=title,
            id=_anchor(number, seen),
        ))
    return entries
