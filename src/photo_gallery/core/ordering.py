"""Publication date parsing and gallery ordering."""

from datetime import datetime
from typing import Iterable, Optional

from photo_gallery.core.entities import PhotoRecord


# RFC 1123 with numeric zone, e.g. "Mon, 02 Jan 2006 15:04:05 -0700"
PUB_DATE_FORMAT = "%a, %d %b %Y %H:%M:%S %z"


def parse_pub_date(value: str) -> Optional[datetime]:
    """Parse a feed pubDate.

    Returns:
        Timezone-aware datetime, or None if the value does not match
        PUB_DATE_FORMAT.
    """
    if not value:
        return None

    try:
        return datetime.strptime(value.strip(), PUB_DATE_FORMAT)
    except ValueError:
        return None


def _sort_key(photo: PhotoRecord) -> tuple[int, float]:
    published = parse_pub_date(photo.published_at)
    if published is None:
        # Oldest possible value
        return (0, 0.0)
    return (1, published.timestamp())


def sort_photos(photos: Iterable[PhotoRecord]) -> list[PhotoRecord]:
    """Sort photos newest first.

    The sort is stable: photos with equal timestamps keep their input order.
    Photos with unparsable timestamps go after every parsable one.
    """
    return sorted(photos, key=_sort_key, reverse=True)
