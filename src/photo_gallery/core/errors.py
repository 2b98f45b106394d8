"""Errors raised by the gallery pipeline."""

from typing import Optional


class GalleryError(Exception):
    """Base class for gallery pipeline errors."""


class FetchError(GalleryError):
    """A feed could not be retrieved."""

    def __init__(self, source: str, cause: str) -> None:
        self.source = source
        self.cause = cause
        super().__init__(f"failed to fetch {source}: {cause}")


class ParseError(GalleryError):
    """A feed document does not have the expected shape."""

    def __init__(self, cause: str, source: Optional[str] = None) -> None:
        self.source = source
        self.cause = cause
        if source:
            super().__init__(f"failed to parse {source}: {cause}")
        else:
            super().__init__(f"failed to parse feed: {cause}")


class EmptyGalleryError(GalleryError):
    """No photos were collected from any source."""

    def __init__(self, message: str = "no photos found") -> None:
        super().__init__(message)


class WriteError(GalleryError):
    """The gallery document could not be composed or written."""
