"""Command-line interface for metascraper."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import BinaryIO, Optional

import click
import structlog

from metascraper import __version__
from metascraper.config import Config, load_config
from metascraper.exceptions import MetascraperError
from metascraper.fetcher import fetch_page
from metascraper.models import Page
from metascraper.observability import configure_logging
from metascraper.page import PageAssembler

logger = structlog.get_logger(__name__)


def _emit(page: Page, include_html: bool, indent: Optional[int]) -> None:
    click.echo(json.dumps(page.to_dict(include_html=include_html), indent=indent, ensure_ascii=False))


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), help="Configuration file path")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level (overrides the configuration file)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """metascraper - extract meta tags, microdata and text from HTML pages."""
    ctx.ensure_object(dict)
    settings = load_config(Path(config) if config else None)
    if log_level:
        settings.monitoring.log_level = log_level
    configure_logging(settings.monitoring)
    ctx.obj["config"] = settings


@cli.command()
@click.argument("source", type=click.File("rb"), default="-")
@click.option("--url", default="", help="URL the document was retrieved from")
@click.option("--include-html", is_flag=True, help="Include the raw HTML in the output")
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation")
@click.pass_context
def extract(ctx: click.Context, source: BinaryIO, url: str, include_html: bool, indent: int) -> None:
    """Extract metadata from an HTML file (or stdin) and print it as JSON."""
    settings: Config = ctx.obj["config"]
    try:
        page = PageAssembler(settings.parser).assemble(source.read(), url)
    except MetascraperError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    _emit(page, include_html, indent)


@cli.command()
@click.argument("url")
@click.option("--include-html", is_flag=True, help="Include the raw HTML in the output")
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation")
@click.pass_context
def fetch(ctx: click.Context, url: str, include_html: bool, indent: int) -> None:
    """Fetch a page over HTTP and print its metadata as JSON."""
    settings: Config = ctx.obj["config"]
    try:
        page = asyncio.run(fetch_page(url, settings))
    except MetascraperError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    _emit(page, include_html, indent)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
