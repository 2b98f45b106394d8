"""CLI entry point for photo gallery."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from photo_gallery.adapters.feeds import HttpFeedFetcher
from photo_gallery.adapters.render import HtmlGalleryRenderer
from photo_gallery.config import Settings, get_settings
from photo_gallery.core import EmptyGalleryError, WriteError
from photo_gallery.use_cases import GalleryService, PublishService

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure root logger with a console handler."""
    level = logging.DEBUG if debug else logging.INFO
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)


def build_publish_service(settings: Settings) -> PublishService:
    """Wire adapters and services from settings."""
    fetcher = HttpFeedFetcher(
        timeout=settings.http.timeout,
        user_agent=settings.http.user_agent,
    )
    renderer = HtmlGalleryRenderer(
        title=settings.output.title,
        refresh_seconds=settings.output.refresh_seconds,
    )
    return PublishService(
        gallery_service=GalleryService(fetcher, max_concurrency=settings.http.max_concurrency),
        renderer=renderer,
    )


def main(
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output HTML file path"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="YAML config file"),
    feed: Optional[list[str]] = typer.Option(None, "--feed", help="Feed URL (repeatable, replaces configured feeds)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Aggregate photo feeds into a static HTML gallery."""
    setup_logging(debug)
    settings = get_settings(config)

    sources = list(feed) if feed else settings.sources
    output = out or settings.output_path

    service = build_publish_service(settings)

    logger.info(f"Fetching {len(sources)} feeds")
    try:
        gallery = asyncio.run(service.publish(sources, output))
    except EmptyGalleryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except WriteError as e:
        typer.echo(f"Error generating HTML: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Generated {output} successfully with {len(gallery)} photos")


def app() -> None:
    """CLI entry point."""
    typer.run(main)


if __name__ == "__main__":
    app()
