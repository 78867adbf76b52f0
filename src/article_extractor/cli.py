"""Command-line interface for article extraction."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from article_extractor import __version__
from article_extractor.config import Config
from article_extractor.errors import ExtractionError
from article_extractor.models import Article
from article_extractor.observability import configure_logging
from article_extractor.utils.url import is_valid_url

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), help="Configuration file path")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """Extract the main article from web pages."""
    settings = Config.from_yaml(Path(config)) if config else Config()
    if log_level:
        settings.monitoring.log_level = log_level.upper()
    configure_logging(settings.monitoring)
    ctx.obj = {"config": settings}


@cli.command()
@click.argument("source")
@click.option("--base-url", default="", help="Base URL for resolving relative links (files and stdin)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text", "html", "summary"]),
    default="json",
    help="Output format",
)
@click.option("--min-content-length", type=int, default=None, help="Minimum length of the extracted text")
@click.option("--debug", is_flag=True, help="Log per-stage diagnostics")
@click.pass_context
def extract(
    ctx: click.Context,
    source: str,
    base_url: str,
    output_format: str,
    min_content_length: Optional[int],
    debug: bool,
) -> None:
    """Extract the article from SOURCE: a file path, '-' for stdin, or an http(s) URL."""
    config: Config = ctx.obj["config"]
    updates = {"debug": debug or config.extraction.debug}
    if min_content_length is not None:
        updates["min_content_length"] = min_content_length
    config = config.model_copy(update={"extraction": config.extraction.model_copy(update=updates)})
    extractor = config.extractor()

    try:
        if is_valid_url(source):
            article = asyncio.run(extractor.extract_from_url(source))
        else:
            html = sys.stdin.buffer.read() if source == "-" else Path(source).read_bytes()
            article = extractor.extract(html, base_url=base_url)
    except ExtractionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"Error: cannot read {source}: {e}", err=True)
        sys.exit(1)

    _render(article, output_format)


def _render(article: Article, output_format: str) -> None:
    if output_format == "json":
        click.echo(json.dumps(article.to_dict(), indent=2, ensure_ascii=False))
    elif output_format == "text":
        click.echo(article.text_content)
    elif output_format == "html":
        click.echo(article.content)
    else:
        table = Table(title=article.title or "Untitled", show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Author", article.author or "-")
        table.add_row("Published", article.published_at.isoformat() if article.published_at else "-")
        table.add_row("Lead image", article.lead_image.url if article.lead_image else "-")
        table.add_row("Words", str(article.word_count))
        table.add_row("Score", f"{article.score:.2f}")
        table.add_row("Confidence", f"{article.confidence:.2f}")
        table.add_row("Excerpt", article.excerpt)
        console.print(table)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
