"""CLI command implementations"""

from datetime import datetime
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.loader import load_documents, seed
from docstore.core.models import SearchRequest
from docstore.crud.memory_repo import MemoryRepo
from docstore.log import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _seeded_repo(path: str, settings: Settings) -> MemoryRepo:
    """Fresh store holding every document from the fixture file."""
    try:
        docs = load_documents(path)
    except ValueError as e:
        _fail(str(e))
    repo = MemoryRepo.from_settings(settings)
    seed(repo, docs)
    return repo


def root_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log at DEBUG level")] = False,
    ):
    """Configure logging before any command runs."""
    settings = _settings()
    configure_logging("DEBUG" if verbose else settings.log_level)


def load_cmd(
    path: Annotated[str, typer.Argument(help="YAML or JSON file of documents")],
    ):
    """Save every document in a file and print the assigned ids."""
    settings = _settings()
    try:
        docs = load_documents(path)
    except ValueError as e:
        _fail(str(e))
    repo = MemoryRepo.from_settings(settings)
    for doc in seed(repo, docs):
        typer.echo(f"  saved: {doc.id}")
    typer.echo(f"Loaded {len(docs)} document(s), {len(repo)} stored")


def search_cmd(
    path: Annotated[str, typer.Argument(help="YAML or JSON file of documents")],
    title_prefixes: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author_ids: Annotated[Optional[list[str]], typer.Option("--author-id", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", help="Inclusive lower bound (UTC)")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", help="Inclusive upper bound (UTC)")] = None,
    missing_created: Annotated[Optional[str], typer.Option("--missing-created", help="exclude or raise")] = None,
    ):
    """Search the documents in a file; all given filters must match."""
    settings = _settings(overrides={"missing_created": missing_created})
    repo = _seeded_repo(path, settings)
    request = SearchRequest(
        title_prefixes=title_prefixes or None,
        contains_contents=contains or None,
        author_ids=author_ids or None,
        created_from=created_from,
        created_to=created_to,
    )
    try:
        found = repo.search(request)
    except ValueError as e:
        _fail("Search failed", e)
    if not found:
        typer.echo("No documents matched.")
        raise typer.Exit(1)
    for doc in found:
        typer.echo(f"  {doc.id}: {doc.title or '(untitled)'}")
    typer.echo(f"Found {len(found)} document(s)")


def show_cmd(
    path: Annotated[str, typer.Argument(help="YAML or JSON file of documents")],
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    ):
    """Print one document as JSON."""
    repo = _seeded_repo(path, _settings())
    doc = repo.find_by_id(doc_id)
    if doc is None:
        typer.echo(f"No document with id '{doc_id}'.")
        raise typer.Exit(1)
    typer.echo(doc.model_dump_json(indent=2))
