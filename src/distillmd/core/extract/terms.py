"""Glossary term extraction from bold definitions and concept sections"""

import re

from distillmd.core.models import Term


TERM_PATTERNS = [
    re.compile(r'\*\*([^*\n]+?)\*\*[ \t]*:[ \t]*([^\n]+)'),     # **Term**: explanation
    re.compile(r'\*\*([^*\n]+?):\*\*[ \t]*([^\n]+)'),           # **Term:** explanation
    re.compile(r'^[ \t]*####[ \t]*([^:\n]+):[ \t]*([^\n]+)', re.MULTILINE),
]
CONCEPT_SECTION_RE = re.compile(
    r'^#{2,4}\s*(?:핵심\s*개념|개념\s*설명|배경\s*지식).*?(?=^#{2,3}\s|\Z)',
    re.IGNORECASE | re.MULTILINE | re.DOTALL,
)
CONCEPT_BULLET_RE = re.compile(r'^[ \t]*[-*]\s+\*\*([^*\n]+)\*\*[:\s]+([^\n]+)', re.MULTILINE)

MAX_TERM_LEN = 50
MIN_EXPLANATION_LEN = 20
MAX_TERMS = 8


def _accept(term: str, explanation: str) -> bool:
    """Quality filter for pattern matches: short terms, substantial explanations."""
    return bool(term) and len(term) < MAX_TERM_LEN and len(explanation) >= MIN_EXPLANATION_LEN


def extract_terms(markdown: str, limit: int = MAX_TERMS) -> list[Term]:
    """Return up to `limit` terms, de-duplicated by term, in discovery order."""
    markdown = markdown or ''
    terms: dict[str, Term] = {}

    for pattern in TERM_PATTERNS:
        for m in pattern.finditer(markdown):
            term, explanation = m.group(1).strip(), m.group(2).strip()
            if _accept(term, explanation) and term not in terms:
                terms[term] = Term(term=term, explanation=explanation)

    section = CONCEPT_SECTION_RE.search(markdown)
    if section:
        # Bullets under an explicit concept heading skip the quality filter.
        for m in CONCEPT_BULLET_RE.finditer(section.group(0)):
            term, explanation = m.group(1).strip(), m.group(2).strip()
            if term and explanation and term not in terms:
                terms[term] = Term(term=term, explanation=explanation)

    return list(terms.values())[:limit]
