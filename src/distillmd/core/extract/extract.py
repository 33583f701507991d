"""Bundle every heuristic extraction for one summary into Insights"""

from distillmd.core.extract.actions import extract_actions
from distillmd.core.extract.outline import extract_intro, extract_key_points, extract_keywords
from distillmd.core.extract.quotes import extract_quotes
from distillmd.core.extract.terms import extract_terms
from distillmd.core.extract.toc import extract_toc
from distillmd.core.models import Insights


def extract_insights(markdown: str, tags: list[str] | None = None) -> Insights:
    """Run each extractor independently over the raw markdown."""
    return Insights(
        intro=extract_intro(markdown),
        toc=extract_toc(markdown),
        quotes=extract_quotes(markdown),
        actions=extract_actions(markdown),
        terms=extract_terms(markdown),
        key_points=extract_key_points(markdown),
        keywords=extract_keywords(markdown, fallback=tags),
    )
