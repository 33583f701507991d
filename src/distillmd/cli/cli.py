"""CLI entrypoint: Typer app definition and command registration"""

import typer

from distillmd.cli.commands import (
    blocks_cmd, documents_cmd, export_cmd, import_cmd, init_cmd, insights_cmd, sections_cmd, toc_cmd,
)


app = typer.Typer(name="distillmd", no_args_is_help=True, help="Structure and edit AI-generated markdown summaries")

app.command(name="init")(init_cmd)
app.command(name="sections")(sections_cmd)
app.command(name="toc")(toc_cmd)
app.command(name="insights")(insights_cmd)
app.command(name="import")(import_cmd)
app.command(name="documents")(documents_cmd)
app.command(name="blocks")(blocks_cmd)
app.command(name="export")(export_cmd)
