"""CLI entry point for gdocs-md."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError
from rich import print as rprint
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from gdocs_markdown.config import DEFAULT_CONFIG_TEMPLATE, GdocsMarkdownConfig, load_config
from gdocs_markdown.converter import ConversionResult, convert_document
from gdocs_markdown.document import Document, document_ref
from gdocs_markdown.logging_config import configure_logging
from gdocs_markdown.output import MarkdownWriter

app = typer.Typer(
    name="gdocs-md",
    help="Convert Google Docs documents (documents.get JSON) to markdown.",
)

config_app = typer.Typer(help="Manage gdocs-md configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: GdocsMarkdownConfig | None = None


def _get_config() -> GdocsMarkdownConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to gdocs-md.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


def _read_payload(source: str) -> dict:
    """Read a documents.get JSON payload from a file, or stdin for '-'."""
    if source == "-":
        raw = sys.stdin.read()
    else:
        path = Path(source)
        if not path.is_file():
            raise ValueError(f"File not found: {source}")
        raw = path.read_text(encoding="utf-8")
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {source}: {e}") from e
    if not isinstance(payload, dict):
        raise ValueError(f"Expected a JSON object in {source}, got {type(payload).__name__}")
    return payload


def _load_document(source: str) -> Document:
    payload = _read_payload(source)
    try:
        return Document.from_api(payload)
    except ValidationError as e:
        raise ValueError(f"Invalid document payload in {source}: {e}") from e


def _display_result(result: ConversionResult, dest: Path, status: str) -> None:
    rprint(
        Panel(
            f"[dim]Title:[/dim]     {escape(result.title) or '(untitled)'}\n"
            f"[dim]Document:[/dim]  {result.document_id or '-'}\n"
            f"[dim]Revision:[/dim]  {result.revision_id or '-'}\n"
            f"[dim]Path:[/dim]      {dest}",
            title=status,
            border_style="green",
        )
    )


@app.command()
def convert(
    source: str = typer.Argument(..., help="documents.get JSON file, or '-' for stdin"),
    output: str | None = typer.Option(None, "--output", "-o", help="Write markdown to file"),
    save: bool = typer.Option(
        False, "--save", help="Write into the configured output directory and index"
    ),
    force: bool = typer.Option(False, "--force", help="Rewrite even if the revision is unchanged"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Preview the --save path without writing"),
) -> None:
    """Convert a saved Google Docs document to markdown."""
    cfg = _get_config()

    try:
        document = _load_document(source)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    result = convert_document(document)
    if result is None:
        rprint(f"[red]Error:[/red] Document '{source}' has no body content")
        raise typer.Exit(1)

    if output:
        Path(output).write_text(result.markdown, encoding="utf-8")
        rprint(f"[green]Written to[/green] {output}")
    elif save:
        writer = MarkdownWriter(cfg.output)
        overwrite = force or cfg.output.overwrite
        if not overwrite and not dry_run and writer.is_current(result):
            rprint(
                f"[yellow]Up to date:[/yellow] {writer.path_for(result)} "
                f"(revision {result.revision_id}). Use --force to rewrite."
            )
            return
        dest = writer.write(result, dry_run=dry_run)
        _display_result(result, dest, "Dry Run" if dry_run else "Conversion Result")
    else:
        # Raw markdown: rich markup would swallow the [text]url link markers.
        typer.echo(result.markdown, nl=False)


@app.command("doc-id")
def doc_id(
    value: str = typer.Argument(..., help="Google Docs URL or document id"),
) -> None:
    """Print the document id for a Google Docs URL."""
    try:
        typer.echo(document_ref(value))
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.safe_dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default gdocs-md.yaml in current directory."""
    target = Path("gdocs-md.yaml")
    if target.exists() and not force:
        rprint("[yellow]gdocs-md.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
