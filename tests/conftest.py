"""Shared fixtures for gallery tests."""

import asyncio
from typing import Optional

import pytest

from photo_gallery.core import FeedFetcher, FetchError


def build_item(
    link: str,
    pub_date: str,
    media: list[tuple[str, str]],
    description: str = "Live photo",
) -> str:
    """Build an RSS <item>; media is a list of (url, medium) pairs."""
    contents = "\n".join(
        f'      <media:content url="{url}" type="image/jpeg" medium="{medium}"/>'
        for url, medium in media
    )
    return f"""    <item>
      <description>{description}</description>
      <pubDate>{pub_date}</pubDate>
      <link>{link}</link>
{contents}
    </item>"""


def build_feed(*items: str) -> bytes:
    """Wrap items in a Media RSS document."""
    body = "\n".join(items)
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:media="http://search.yahoo.com/mrss/">
  <channel>
    <title>Live Lake Erie</title>
{body}
  </channel>
</rss>
""".encode("utf-8")


class FakeFetcher(FeedFetcher):
    """Fetcher serving canned responses, with optional per-source delays."""

    def __init__(
        self,
        responses: dict[str, bytes],
        delays: Optional[dict[str, float]] = None,
    ) -> None:
        self.responses = responses
        self.delays = delays or {}
        self.calls: list[str] = []

    async def fetch(self, source: str) -> bytes:
        self.calls.append(source)
        await asyncio.sleep(self.delays.get(source, 0))
        if source not in self.responses:
            raise FetchError(source, "HTTP 404")
        return self.responses[source]


@pytest.fixture
def item():
    """Builder for RSS items."""
    return build_item


@pytest.fixture
def feed():
    """Builder for RSS documents."""
    return build_feed


@pytest.fixture
def fake_fetcher():
    """Factory for FakeFetcher instances."""
    return FakeFetcher
