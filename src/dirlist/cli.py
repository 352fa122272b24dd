"""Command line interface for dirlist."""

import json
import logging
from typing import Optional

import click

from .config.parser import ConfigurationError, load_config
from .listing import list_directory
from .models.config import BrowserConfig
from .models.listing_request import PaginationOptions
from .sidebar import get_sidebar_items
from .tools.fs_lister import RootUnavailableError


def _setup_logging(verbosity: int, config: BrowserConfig) -> None:
    level = getattr(logging, config.logging.level.value)
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="Configuration file (searched for when omitted)")
@click.pass_context
def main(ctx: click.Context, verbose: int, config_path: Optional[str]) -> None:
    """dirlist: list a directory ranked against a fuzzy query."""
    try:
        result = load_config(config_path)
    except ConfigurationError as e:
        raise click.ClickException(str(e))
    _setup_logging(verbose, result.config)
    for warning in result.warnings:
        logging.getLogger(__name__).info(warning)
    ctx.obj = result.config


# ── list ─────────────────────────────────────────────────────────────────

@main.command("list")
@click.argument("path", default=".")
@click.option("--query", "-q", default=None, help="Rank entries against this query")
@click.option("--folders-only/--all-entries", default=None,
              help="List folders only, or everything (default from config)")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Maximum number of entries")
@click.option("--offset", type=click.IntRange(min=0), default=0, help="Number of entries to skip")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_cmd(config: BrowserConfig, path: str, query: Optional[str], folders_only: Optional[bool],
             limit: Optional[int], offset: int, as_json: bool) -> None:
    """List PATH, most relevant entries first."""
    if folders_only is None:
        folders_only = config.listing.folders_only
    if limit is None:
        limit = config.listing.max_results

    pagination = None
    if limit is not None or offset:
        pagination = PaginationOptions(limit=limit, offset=offset)

    try:
        entries = list_directory(path, query=query, folders_only=folders_only, pagination=pagination)
    except RootUnavailableError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps([entry.to_dict() for entry in entries], indent=2))
        return

    if not entries:
        click.echo("No matching entries.")
        return

    for entry in entries:
        if entry.is_folder():
            name = click.style(f"{entry.name}/", fg="blue", bold=True)
            size = ""
        else:
            name = entry.name
            size = entry.get_size_human_readable() or ""
        relevance = f"[{entry.relevance}]" if query else ""
        click.echo(f"  {relevance:>5s} {size:>10s}  {name}")


# ── sidebar ──────────────────────────────────────────────────────────────

@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def sidebar(config: BrowserConfig, as_json: bool) -> None:
    """Show the well-known sidebar locations."""
    locations = get_sidebar_items(
        home=config.sidebar.home,
        extra=config.sidebar.extra,
        include_optional=config.sidebar.include_optional
    )

    if as_json:
        click.echo(json.dumps([location.to_dict() for location in locations], indent=2))
        return

    for location in locations:
        click.echo(f"  {click.style(location.name, fg='cyan', bold=True):30s}  {location.path}")


if __name__ == "__main__":
    main()
