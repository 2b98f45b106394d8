"""Feed adapters: fetching and parsing."""

from photo_gallery.adapters.feeds.http_fetcher import HttpFeedFetcher
from photo_gallery.adapters.feeds.media_rss_parser import (
    extract_photos,
    parse_feed,
    parse_photos,
)

__all__ = ["HttpFeedFetcher", "extract_photos", "parse_feed", "parse_photos"]
