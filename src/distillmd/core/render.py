"""markdown-it rendering of summary markdown to HTML and plain text"""

from markdown_it import MarkdownIt
from markdown_it.token import Token


def make_parser(preset: str = 'commonmark') -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def render_html(markdown: str, preset: str = 'commonmark') -> str:
    return make_parser(preset).render(markdown or '')


def _inline_text(token: Token) -> str:
    parts = []
    for child in token.children or []:
        if child.type in ('text', 'code_inline'):
            parts.append(child.content)
        elif child.type in ('softbreak', 'hardbreak'):
            parts.append('\n')
        elif child.type == 'image':
            parts.append(child.content)
    return ''.join(parts)


def to_plain_text(markdown: str, preset: str = 'commonmark') -> str:
    """Drop markdown syntax, keeping one paragraph of text per block-level element."""
    paragraphs = []
    for token in make_parser(preset).parse(markdown or ''):
        if token.type == 'inline':
            text = _inline_text(token)
        elif token.type in ('fence', 'code_block'):
            text = token.content.rstrip('\n')
        else:
            continue
        if text.strip():
            paragraphs.append(text)
    return '\n\n'.join(paragraphs)
