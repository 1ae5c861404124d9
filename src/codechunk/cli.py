"""Command line interface for codechunk."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import List, Optional, get_args

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from codechunk.config import AppConfig
from codechunk.models import ChunkType, CodeChunk
from codechunk.parser import CodeParser, ParseError


console = Console()
app = typer.Typer(help="codechunk - extract functions and classes from source trees")

CHUNK_TYPES = get_args(ChunkType)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _display_path(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def _doc_summary(chunk: CodeChunk) -> str:
    if not chunk.doc_string:
        return ""
    return chunk.doc_string.splitlines()[0][:80]


@app.callback()
def main() -> None:
    """codechunk - extract functions and classes from source trees."""


@app.command()
def parse(
    directory: Path = typer.Argument(
        ..., help="Directory to scan for source files.", resolve_path=True
    ),
    as_json: bool = typer.Option(False, "--json", help="Print chunks as JSON"),
    chunk_type: Optional[str] = typer.Option(
        None, "--type", "-t", help=f"Only show one chunk type ({', '.join(CHUNK_TYPES)})"
    ),
    encoding: str = typer.Option(AppConfig().encoding, help="Source file encoding"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Extract code chunks from every supported file under a directory."""
    _setup_logging(verbose)
    if chunk_type is not None and chunk_type not in CHUNK_TYPES:
        raise typer.BadParameter(f"Unknown chunk type: {chunk_type}")

    parser = CodeParser(AppConfig(encoding=encoding))
    try:
        chunks: List[CodeChunk] = asyncio.run(parser.parse_directory(directory))
    except (ParseError, OSError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    if chunk_type is not None:
        chunks = [chunk for chunk in chunks if chunk.chunk_type == chunk_type]

    if as_json:
        typer.echo(json.dumps([chunk.to_dict() for chunk in chunks], indent=2))
        return

    if not chunks:
        console.print("[yellow]No code chunks found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Type")
    table.add_column("Name")
    table.add_column("File")
    table.add_column("Lines")
    table.add_column("Doc")

    for chunk in chunks:
        table.add_row(
            chunk.chunk_type,
            escape(chunk.name),
            escape(_display_path(chunk.file_path, directory)),
            f"{chunk.start_line}-{chunk.end_line}",
            escape(_doc_summary(chunk)),
        )

    console.print(table)
    console.print(f"{len(chunks)} chunks")
