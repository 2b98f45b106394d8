"""Core domain entities."""

from dataclasses import dataclass, field
from typing import Iterator


IMAGE_MEDIUM = "image"


@dataclass(frozen=True)
class MediaAttachment:
    """Media reference declared on a feed item (media:content)."""

    url: str
    type: str = ""
    medium: str = ""

    @property
    def is_image(self) -> bool:
        return self.medium == IMAGE_MEDIUM


@dataclass
class FeedItem:
    """Single entry of a feed channel."""

    pub_date: str
    link: str
    description: str = ""
    media: list[MediaAttachment] = field(default_factory=list)


@dataclass(frozen=True)
class PhotoRecord:
    """Photo extracted from a feed item."""

    image_url: str
    published_at: str
    permalink_url: str

    def __post_init__(self) -> None:
        if not self.image_url:
            raise ValueError("Image URL cannot be empty")


@dataclass(frozen=True)
class Gallery:
    """Photos from all sources, most recent first."""

    photos: tuple[PhotoRecord, ...] = ()

    def __iter__(self) -> Iterator[PhotoRecord]:
        return iter(self.photos)

    def __len__(self) -> int:
        return len(self.photos)
