"""Export a document to md, txt, html or json and write it to disk"""

import html
import json
import re
from pathlib import Path
from typing import Optional

import yaml

from distillmd.core.render import render_html, to_plain_text


EXPORT_FORMATS = ('md', 'txt', 'html', 'json')

HTML_PAGE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<h1>{title}</h1>
{body}</body>
</html>
"""


def file_stem(title: str, fallback: str = 'document') -> str:
    """Lowercase, hyphenated filename stem; unicode letters are kept."""
    stem = re.sub(r'[^\w\s-]', '', title.lower())
    stem = re.sub(r'[-\s_]+', '-', stem).strip('-')
    return stem or fallback


def export_document(
    title: str,
    markdown: str,
    fmt: str = 'md',
    tags: Optional[list[str]] = None,
    preset: str = 'commonmark',
    ) -> str:
    """Render one document in the requested format.

    md prepends a YAML frontmatter block with title and tags; txt strips
    markdown syntax; html wraps the rendered body in a standalone page; json
    carries title, tags and the raw markdown.
    """
    tags = list(tags or [])
    if fmt == 'md':
        header = yaml.dump({'title': title, 'tags': tags}, default_flow_style=False, allow_unicode=True, sort_keys=False)
        return f"---\n{header}---\n\n{markdown.lstrip()}"
    if fmt == 'txt':
        return f"{title}\n\n{to_plain_text(markdown, preset)}\n"
    if fmt == 'html':
        return HTML_PAGE.format(title=html.escape(title), body=render_html(markdown, preset))
    if fmt == 'json':
        return json.dumps({'title': title, 'tags': tags, 'markdown': markdown}, ensure_ascii=False, indent=2)
    raise ValueError(f"Unknown export format {fmt!r}; expected one of {', '.join(EXPORT_FORMATS)}")


def write_export(
    title: str,
    markdown: str,
    output_dir: Path,
    fmt: str = 'md',
    tags: Optional[list[str]] = None,
    stem: Optional[str] = None,
    preset: str = 'commonmark',
    ) -> Path:
    """Write the export to output_dir / <stem>.<fmt> and return the path."""
    content = export_document(title, markdown, fmt, tags, preset)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"{stem or file_stem(title)}.{fmt}"
    path.write_text(content, encoding='utf-8')
    return path
