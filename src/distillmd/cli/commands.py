"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from sqlmodel import Session, SQLModel

from distillmd.config import Settings, load_config
from distillmd.core.extract.blocks import blocks_to_markdown
from distillmd.core.extract.extract import extract_insights
from distillmd.core.extract.sections import parse_sections
from distillmd.core.extract.toc import extract_toc
from distillmd.core.export import file_stem, write_export
from distillmd.crud.blocks import get_blocks, migrate_document_to_blocks
from distillmd.crud.database import init_db, make_engine
from distillmd.crud.documents import create_document, get_document, list_documents
from distillmd.logs import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and apply its log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def _read(file: Path) -> str:
    try:
        return file.read_text(encoding='utf-8')
    except OSError as e:
        _fail(f"Cannot read {file}", e)


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


def _default_title(markdown: str, file: Path) -> str:
    """First '# ' title line of the summary, else the file stem."""
    for line in markdown.splitlines():
        if line.startswith('# '):
            return line[2:].strip()
    return file.stem


def init_cmd(
    reset: Annotated[bool, typer.Option("--reset", help="Drop and recreate all tables")] = False,
    ):
    """Initialize database schema. Use --reset to clear existing data."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    if reset:
        SQLModel.metadata.drop_all(engine)
        typer.echo("Existing data cleared.")
    init_db(engine)
    typer.echo(f"Database initialized at: {settings.db_url}")


def sections_cmd(
    file: Annotated[Path, typer.Argument(help="Markdown summary to parse")],
    ):
    """Print the numbered sections of a summary as JSON."""
    _settings()
    sections = parse_sections(_read(file))
    _echo_json([s.model_dump(mode="json") for s in sections])


def toc_cmd(
    file: Annotated[Path, typer.Argument(help="Markdown summary to scan")],
    ):
    """Print the table of contents of a summary."""
    _settings()
    entries = extract_toc(_read(file))
    if not entries:
        typer.echo("No numbered sections found.")
        return
    for e in entries:
        indent = "  " * (e.level - 1)
        typer.echo(f"{indent}{e.number}. {e.title}  #{e.id}")


def insights_cmd(
    file: Annotated[Path, typer.Argument(help="Markdown summary to scan")],
    tags: Annotated[Optional[list[str]], typer.Option("--tag", help="Fallback keyword; repeatable")] = None,
    ):
    """Print intro, TOC, quotes, actions, terms, key points and keywords as JSON."""
    _settings()
    _echo_json(extract_insights(_read(file), tags=tags).model_dump(mode="json"))


def import_cmd(
    file: Annotated[Path, typer.Argument(help="Markdown summary to store")],
    title: Annotated[Optional[str], typer.Option("--title", help="Document title; defaults to the '# ' line or file name")] = None,
    tags: Annotated[Optional[list[str]], typer.Option("--tag", help="Document tag; repeatable")] = None,
    ):
    """Store a summary as a new document and convert it to blocks."""
    settings = _settings()
    markdown = _read(file)
    engine = make_engine(settings.db_url)
    init_db(engine)
    try:
        with Session(engine) as session:
            doc = create_document(session, title or _default_title(markdown, file), markdown, tags)
            blocks = migrate_document_to_blocks(session, doc.id)
            session.commit()
            doc_id = doc.id
    except Exception as e:
        _fail("Import failed", e)
    typer.echo(f"Imported {file} as {doc_id} ({len(blocks)} blocks)")


def documents_cmd():
    """List stored documents."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    init_db(engine)
    with Session(engine) as session:
        docs = list_documents(session)
        rows = [(d.id, d.title, d.blocks_migrated) for d in docs]
    if not rows:
        typer.echo("No documents found in database.")
        raise typer.Exit(1)
    for doc_id, title, migrated in rows:
        typer.echo(f"{doc_id}  {title}{'' if migrated else '  (not converted)'}")


def blocks_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    ):
    """List the blocks of a document, converting its summary on first open."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    init_db(engine)
    try:
        with Session(engine) as session:
            blocks = migrate_document_to_blocks(session, doc_id)
            session.commit()
    except ValueError as e:
        _fail(str(e))
    for b in blocks:
        typer.echo(f"{b.position:>3}  {b.type.value:<10} {b.content}")


def export_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    fmt: Annotated[Optional[str], typer.Option("--format", help="md, txt, html or json")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    ):
    """Write a document to the output directory in the chosen format."""
    settings = _settings(overrides={"export_format": fmt, "output_dir": out})
    engine = make_engine(settings.db_url)
    init_db(engine)
    with Session(engine) as session:
        doc = get_document(session, doc_id)
        if doc is None:
            _fail(f"Document {doc_id} not found")
        markdown = blocks_to_markdown(get_blocks(session, doc_id)) if doc.blocks_migrated else doc.summary_md
        title, tags = doc.title, list(doc.tags or [])

    try:
        path = write_export(
            title, markdown, Path(settings.output_dir), settings.export_format, tags,
            stem=file_stem(title, fallback=doc_id), preset=settings.parser_config,
        )
    except (OSError, ValueError) as e:
        _fail("Export failed", e)
    typer.echo(f"Exported {doc_id} -> {path}")
