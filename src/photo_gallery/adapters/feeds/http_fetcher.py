"""HTTP feed fetcher."""

import logging
from typing import Optional

import httpx

from photo_gallery.core import FeedFetcher, FetchError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "photo-gallery/0.1"


class HttpFeedFetcher(FeedFetcher):
    """Fetch feed documents with a single GET request."""

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize fetcher.

        Args:
            timeout: Seconds allowed per request
            user_agent: User-Agent header value
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport

    async def fetch(self, source: str) -> bytes:
        """Fetch raw feed bytes from source."""
        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
            transport=self.transport,
        ) as client:
            try:
                response = await client.get(source)
                response.raise_for_status()
                body = response.content
            except httpx.TimeoutException as e:
                raise FetchError(source, f"timed out after {self.timeout:g}s") from e
            except httpx.HTTPStatusError as e:
                raise FetchError(source, f"HTTP {e.response.status_code}") from e
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise FetchError(source, str(e) or e.__class__.__name__) from e

        logger.debug(f"Fetched {len(body)} bytes from {source}")
        return body
