"""CLI command implementations"""

import logging
from datetime import datetime
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.loader import dump_documents, load_documents
from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.models import SearchRequest


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then apply the log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _repo(settings: Settings) -> MemoryRepo:
    """Load the configured data file into a fresh in-memory repository."""
    try:
        return MemoryRepo.seeded(load_documents(settings.data_file))
    except FileNotFoundError:
        _fail(f"Data file not found: {settings.data_file}")
    except ValueError as e:
        _fail("Could not load documents", e)


DataFile = Annotated[Optional[str], typer.Option("--data-file", help="YAML/JSON list of documents")]


def show_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    data_file: DataFile = None,
    ):
    """Print a single document as JSON."""
    repo = _repo(_settings(overrides={"data_file": data_file}))
    doc = repo.find_by_id(doc_id)
    if doc is None:
        _fail(f"Document not found: {doc_id}")
    typer.echo(doc.model_dump_json(indent=2))


def list_cmd(data_file: DataFile = None):
    """List document ids and titles."""
    repo = _repo(_settings(overrides={"data_file": data_file}))
    docs = repo.search(SearchRequest())
    if not docs:
        typer.echo("No documents found.")
        raise typer.Exit(1)
    for doc in docs:
        typer.echo(f"{doc.id}\t{doc.title}")


def search_cmd(
    title_prefix: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author: Annotated[Optional[list[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--from", help="Created strictly after")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--to", help="Created strictly before")] = None,
    data_file: DataFile = None,
    ):
    """Print documents matching every given filter as a JSON array."""
    repo = _repo(_settings(overrides={"data_file": data_file}))
    request = SearchRequest(
        title_prefixes=title_prefix,
        contains_contents=contains,
        author_ids=author,
        created_from=created_from,
        created_to=created_to,
    )
    typer.echo(dump_documents(repo.search(request)))
