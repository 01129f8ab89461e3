"""CLI command implementations"""

import json
import sys
from pathlib import Path
from typing import Annotated, Any, Optional

import typer

from wikidoc.config import Settings, load_config
from wikidoc.core.errors import ArticleParseError
from wikidoc.core.export import build_message
from wikidoc.core.load import LoadResult
from wikidoc.core.models import WikiContext
from wikidoc.core.parse.parser import parse_preview
from wikidoc.core.pipeline import run_export, run_load


FreestandingOpt = Annotated[
    Optional[bool],
    typer.Option("--freestanding/--no-freestanding", help="Skip platform emoji and channel substitution"),
]
DirArg = Annotated[Optional[str], typer.Argument(help="Article file or directory (default: articles_dir)")]


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


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _load(settings: Settings) -> LoadResult:
    try:
        return run_load(settings.articles_dir, WikiContext.from_settings(settings))
    except RuntimeError as e:
        _fail(str(e))


def preview_cmd(
    path: Annotated[str, typer.Argument(help="Article file to preview, or '-' for stdin")],
    freestanding: FreestandingOpt = None,
    ):
    """Parse a single unnamed article and print its message payload."""
    settings = _settings(overrides={"freestanding": freestanding})
    try:
        content = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"Cannot read {path}", e)

    try:
        article, _ = parse_preview(content, WikiContext.from_settings(settings))
    except ArticleParseError as e:
        typer.echo(f"Parse error: {e}", err=True)
        raise typer.Exit(1)
    _echo_json(build_message(article, settings.embed_color))


def check_cmd(
    path: DirArg = None,
    freestanding: FreestandingOpt = None,
    ):
    """Parse every article and report the ones that fail."""
    settings = _settings(overrides={"articles_dir": path, "freestanding": freestanding})
    result = _load(settings)
    for failed, message in result.failures:
        typer.echo(f"  {failed}: {message}")
    typer.echo(
        f"Loaded {len(result.library)} article(s), "
        f"{len(result.library.aliases)} alias(es), "
        f"{len(result.failures)} failure(s)"
    )
    if result.failures:
        raise typer.Exit(1)


def show_cmd(
    query: Annotated[str, typer.Argument(help="Article name, title or alias")],
    path: DirArg = None,
    mention: Annotated[Optional[str], typer.Option("--mention", help="Mention prefixed to the message")] = None,
    freestanding: FreestandingOpt = None,
    ):
    """Print the message payload of an article found by name, title or alias."""
    settings = _settings(overrides={"articles_dir": path, "freestanding": freestanding})
    library = _load(settings).library
    article = library.lookup(query)
    if article is None:
        typer.echo("Couldn't find article", err=True)
        raise typer.Exit(1)
    _echo_json(build_message(article, settings.embed_color, mention=mention))


def search_cmd(
    query: Annotated[str, typer.Argument(help="Case-insensitive title fragment")],
    path: DirArg = None,
    ):
    """List article titles containing the query."""
    settings = _settings(overrides={"articles_dir": path})
    for title in _load(settings).library.search_titles(query):
        typer.echo(title)


def export_cmd(
    path: DirArg = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    freestanding: FreestandingOpt = None,
    ):
    """Write one JSON file (article, aliases, message payload) per article."""
    settings = _settings(overrides={"articles_dir": path, "output_dir": out, "freestanding": freestanding})
    result = _load(settings)
    output_dir = Path(settings.output_dir)
    try:
        exported = run_export(result.library, output_dir, settings.embed_color)
    except OSError as e:
        _fail("Export failed", e)
    for name, json_path in exported:
        typer.echo(f"  {name} -> {json_path}")
    typer.echo(f"Exported {len(exported)} article(s) to {output_dir}/")
    if result.failures:
        typer.echo(f"Skipped {len(result.failures)} article(s) that failed to parse", err=True)
