"""Business logic use cases."""

import asyncio
import logging
from pathlib import Path

from photo_gallery.adapters.feeds import parse_photos
from photo_gallery.core import (
    EmptyGalleryError,
    FeedFetcher,
    FetchError,
    Gallery,
    GalleryRenderer,
    ParseError,
    PhotoRecord,
    Sink,
    sort_photos,
)

logger = logging.getLogger(__name__)


class GalleryService:
    """Service for collecting photos from feed sources into a gallery."""

    def __init__(self, fetcher: FeedFetcher, max_concurrency: int = 5) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.fetcher = fetcher
        self.max_concurrency = max_concurrency

    async def aggregate(self, sources: list[str]) -> Gallery:
        """Fetch all sources and merge their photos, newest first.

        Sources are fetched concurrently. Each one fills its own result slot,
        and slots are concatenated in source order before sorting, so fetch
        completion order never affects the result.

        Raises:
            EmptyGalleryError: if no source yielded any photo.
        """
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def bounded(source: str) -> list[PhotoRecord]:
            async with semaphore:
                return await self.collect_source(source)

        slots = await asyncio.gather(
            *(bounded(source) for source in sources), return_exceptions=True
        )

        all_photos: list[PhotoRecord] = []
        for source, photos in zip(sources, slots):
            if isinstance(photos, Exception):
                logger.error(f"Unexpected error collecting {source}: {photos!r}")
                continue
            if isinstance(photos, BaseException):
                raise photos
            logger.info(f"{source}: {len(photos)} photos")
            all_photos.extend(photos)

        if not all_photos:
            raise EmptyGalleryError()

        logger.info(f"Collected {len(all_photos)} photos from {len(sources)} sources")
        return Gallery(photos=tuple(sort_photos(all_photos)))

    async def collect_source(self, source: str) -> list[PhotoRecord]:
        """Fetch and parse one source.

        Fetch and parse failures are logged and yield no photos.
        """
        try:
            raw = await self.fetcher.fetch(source)
        except FetchError as e:
            logger.warning(f"Error fetching {source}: {e.cause}")
            return []

        try:
            return parse_photos(raw, source)
        except ParseError as e:
            logger.warning(f"Error parsing {source}: {e.cause}")
            return []


class PublishService:
    """Service for building and writing the gallery page."""

    def __init__(self, gallery_service: GalleryService, renderer: GalleryRenderer) -> None:
        self.gallery_service = gallery_service
        self.renderer = renderer

    async def publish(self, sources: list[str], sink: Sink) -> Gallery:
        """Aggregate sources and render the gallery to sink.

        Nothing is written if aggregation fails.

        Raises:
            EmptyGalleryError: if no photos were found.
            WriteError: if the page cannot be written.
        """
        gallery = await self.gallery_service.aggregate(sources)
        self.renderer.render(gallery, sink)
        if isinstance(sink, (str, Path)):
            logger.info(f"Gallery saved to {sink}")
        return gallery
