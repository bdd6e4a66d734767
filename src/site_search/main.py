"""Main CLI entry point for site search.

This module provides the command-line interface for querying the site
catalog: ranked search, related content, popular terms, category
listings and catalog validation.
"""

import json
import sys
import traceback
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import click

from . import __version__
from .catalog.loader import load_catalog, load_default_catalog
from .catalog.models import Catalog, SearchItem
from .config.logging import configure_logging
from .config.settings import Settings, load_settings
from .exceptions import SiteSearchError
from .search.search_engine import SearchService


class CLIError(Exception):
    """Base CLI error with user-friendly messages."""

    def __init__(self, message: str, suggestion: Optional[str] = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)


class CLIContext:
    """Global CLI context management."""

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        catalog_path: Optional[Union[str, Path]] = None,
    ):
        self.verbose = verbose
        self.quiet = quiet
        self.settings: Settings = load_settings()
        self.catalog_path = catalog_path or self.settings.catalog.get_catalog_path()
        self._service: Optional[SearchService] = None

    @property
    def service(self) -> SearchService:
        """Search service over the selected catalog, loaded on first use."""
        if self._service is None:
            self._service = SearchService(self.load_catalog(), self.settings.search)
        return self._service

    def load_catalog(self) -> Catalog:
        if self.catalog_path:
            return load_catalog(self.catalog_path)
        return load_default_catalog()


def handle_cli_error(error: Exception, ctx: Optional[click.Context] = None):
    """Global CLI error handler."""
    if isinstance(error, CLIError):
        click.echo(f"Error: {error.message}", err=True)
        if error.suggestion:
            click.echo(f"Suggestion: {error.suggestion}", err=True)
    elif isinstance(error, SiteSearchError):
        click.echo(f"Error: {error}", err=True)
    else:
        verbose = False
        if ctx and ctx.obj:
            verbose = ctx.obj.get("verbose", False)

        click.echo(f"Unexpected error: {str(error)}", err=True)
        if verbose:
            click.echo(traceback.format_exc(), err=True)
        else:
            click.echo("Run with --verbose for detailed error information", err=True)

    sys.exit(1)


def _get_context(ctx: click.Context) -> CLIContext:
    return ctx.obj["cli_context"]


def _item_to_dict(item: SearchItem) -> Dict[str, Any]:
    return {
        "title": item.title,
        "description": item.description,
        "url": item.url,
        "keywords": list(item.keywords),
        "category": item.category,
    }


def _echo_items(items: List[SearchItem], output_format: str) -> None:
    if output_format == "json":
        click.echo(json.dumps([_item_to_dict(item) for item in items], indent=2))
        return

    for position, item in enumerate(items, start=1):
        category = f" [{item.category}]" if item.category else ""
        click.echo(f"{position:>2}. {item.title}{category}")
        click.echo(f"    {item.url}")
        click.echo(f"    {item.description}")


format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)


@click.group()
@click.version_option(version=__version__, prog_name="site-search")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output with detailed logging",
)
@click.option(
    "--quiet", "-q", is_flag=True, help="Enable quiet mode with minimal output"
)
@click.option(
    "--catalog",
    type=click.Path(exists=True, dir_okay=False),
    help="Catalog file (YAML or JSON). Defaults to the packaged site catalog",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, catalog: Optional[str]):
    """Site search over the association's content catalog.

    \b
    Examples:
      site-search search "epilepsy training"
      site-search search membership --category membership --limit 3
      site-search related /training/pet
      site-search popular --limit 10
      site-search validate my_catalog.yaml
    """
    if verbose and quiet:
        raise click.BadParameter("Cannot use both --verbose and --quiet options")

    ctx.ensure_object(dict)
    try:
        cli_context = CLIContext(verbose=verbose, quiet=quiet, catalog_path=catalog)
    except SiteSearchError as e:
        handle_cli_error(e, ctx)
        return

    ctx.obj["cli_context"] = cli_context
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "ERROR"
    elif cli_context.settings.debug:
        level = "DEBUG"
    else:
        level = cli_context.settings.logging.level
    configure_logging(
        level=level,
        log_file=cli_context.settings.get_log_file_path(),
        json_logs=cli_context.settings.logging.json_format,
        enable_performance_logging=cli_context.settings.logging.enable_performance,
    )


@cli.command()
@click.argument("query", nargs=-1, required=True)
@click.option("--limit", "-n", type=click.IntRange(min=0), help="Maximum results")
@click.option(
    "--category",
    "categories",
    multiple=True,
    help="Only return entries in this category (repeatable)",
)
@click.option("--no-fuzzy", is_flag=True, help="Disable multi-term partial matching")
@click.option("--no-exact-boost", is_flag=True, help="Disable the exact title boost")
@click.option("--explain", is_flag=True, help="Show how each result was scored")
@format_option
@click.pass_context
def search(
    ctx: click.Context,
    query: tuple,
    limit: Optional[int],
    categories: tuple,
    no_fuzzy: bool,
    no_exact_boost: bool,
    explain: bool,
    output_format: str,
):
    """Search the catalog.

    QUERY words are joined with single spaces.
    """
    cli_context = _get_context(ctx)
    query_text = " ".join(query)
    category = list(categories) if categories else None

    try:
        service = cli_context.service
        result = service.search(
            query_text,
            limit=limit,
            category=category,
            fuzzy_match=not no_fuzzy,
            boost_exact_matches=not no_exact_boost,
        )
        explanations = []
        if explain:
            explanations = service.explain_search(
                query_text,
                limit=limit,
                category=category,
                fuzzy_match=not no_fuzzy,
                boost_exact_matches=not no_exact_boost,
            )
    except Exception as e:
        handle_cli_error(e, ctx)
        return

    if output_format == "json":
        payload: Dict[str, Any] = {
            "query": query_text,
            "total_matches": result.total_matches,
            "results": [_item_to_dict(item) for item in result.results],
        }
        if explain:
            payload["explanations"] = explanations
        click.echo(json.dumps(payload, indent=2))
        return

    if not result.results:
        click.echo(f"No results for '{query_text}'")
        return

    _echo_items(list(result.results), output_format)
    if explain:
        click.echo("")
        for explanation in explanations:
            click.echo(f"{explanation['url']}: {explanation['final_score']:.3f}")
            for step in explanation["calculation_steps"]:
                click.echo(f"    {step}")

    if result.has_more and not cli_context.quiet:
        remaining = result.total_matches - len(result.results)
        click.echo(f"\n{remaining} more result(s) of {result.total_matches}")


@cli.command()
@click.argument("url")
@click.option("--limit", "-n", type=click.IntRange(min=0), help="Maximum entries")
@format_option
@click.pass_context
def related(ctx: click.Context, url: str, limit: Optional[int], output_format: str):
    """Show entries related to the catalog entry at URL."""
    cli_context = _get_context(ctx)
    try:
        service = cli_context.service
        item = service.get_item(url)
        if item is None:
            raise CLIError(
                f"No catalog entry with url '{url}'",
                "Use 'site-search search' to find entry urls",
            )
        items = service.get_related_content(item, limit=limit)
    except Exception as e:
        handle_cli_error(e, ctx)
        return

    _echo_items(items, output_format)


@cli.command()
@click.option("--limit", "-n", type=click.IntRange(min=0), help="Number of terms")
@format_option
@click.pass_context
def popular(ctx: click.Context, limit: Optional[int], output_format: str):
    """Show the most common catalog keywords."""
    cli_context = _get_context(ctx)
    try:
        terms = cli_context.service.get_popular_search_terms(limit)
    except Exception as e:
        handle_cli_error(e, ctx)
        return

    if output_format == "json":
        click.echo(json.dumps(terms))
    else:
        for term in terms:
            click.echo(term)


@cli.command()
@click.argument("name")
@format_option
@click.pass_context
def category(ctx: click.Context, name: str, output_format: str):
    """List the entries in category NAME."""
    cli_context = _get_context(ctx)
    try:
        items = cli_context.service.get_items_by_category(name)
    except Exception as e:
        handle_cli_error(e, ctx)
        return

    if not items and output_format == "text":
        click.echo(f"No entries in category '{name}'")
        return
    _echo_items(items, output_format)


@cli.command()
@click.pass_context
def categories(ctx: click.Context):
    """List catalog categories."""
    cli_context = _get_context(ctx)
    try:
        service = cli_context.service
        names = service.categories()
    except Exception as e:
        handle_cli_error(e, ctx)
        return

    for name in names:
        count = len(service.get_items_by_category(name))
        click.echo(f"{name} ({count})")


@cli.command()
@click.argument("catalog_file", required=False, type=click.Path(dir_okay=False))
@click.pass_context
def validate(ctx: click.Context, catalog_file: Optional[str]):
    """Validate a catalog file (the active catalog by default)."""
    cli_context = _get_context(ctx)
    try:
        if catalog_file:
            catalog = load_catalog(catalog_file)
        else:
            catalog = cli_context.load_catalog()
    except Exception as e:
        handle_cli_error(e, ctx)
        return

    click.echo(
        f"Catalog OK: {len(catalog)} entries in {len(catalog.categories())} categories"
    )


if __name__ == "__main__":
    cli()
