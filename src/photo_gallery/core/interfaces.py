"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO, Union

from photo_gallery.core.entities import Gallery


Sink = Union[str, Path, TextIO]


class FeedFetcher(ABC):
    """Interface for retrieving raw feed documents."""

    @abstractmethod
    async def fetch(self, source: str) -> bytes:
        """Fetch the feed document at source.

        Raises:
            FetchError: on any transport, status or read failure.
        """
        pass


class GalleryRenderer(ABC):
    """Interface for rendering a gallery to an output sink."""

    @abstractmethod
    def render(self, gallery: Gallery, sink: Sink) -> None:
        """Write the rendered gallery to sink.

        Raises:
            WriteError: if the document cannot be composed or written.
        """
        pass
