"""Core domain layer."""

from photo_gallery.core.entities import FeedItem, Gallery, MediaAttachment, PhotoRecord
from photo_gallery.core.errors import (
    EmptyGalleryError,
    FetchError,
    GalleryError,
    ParseError,
    WriteError,
)
from photo_gallery.core.interfaces import FeedFetcher, GalleryRenderer, Sink
from photo_gallery.core.ordering import PUB_DATE_FORMAT, parse_pub_date, sort_photos

__all__ = [
    "FeedItem",
    "Gallery",
    "MediaAttachment",
    "PhotoRecord",
    "GalleryError",
    "FetchError",
    "ParseError",
    "EmptyGalleryError",
    "WriteError",
    "FeedFetcher",
    "GalleryRenderer",
    "Sink",
    "PUB_DATE_FORMAT",
    "parse_pub_date",
    "sort_photos",
]
