"""Media RSS feed parsing."""

from typing import Optional
from xml.etree import ElementTree as ET

from photo_gallery.core import FeedItem, MediaAttachment, ParseError, PhotoRecord


MEDIA_NS = "http://search.yahoo.com/mrss/"
MEDIA_CONTENT = f"{{{MEDIA_NS}}}content"


def _text(parent: ET.Element, tag: str) -> str:
    elem = parent.find(tag)
    if elem is None or not elem.text:
        return ""
    return elem.text.strip()


def _parse_media(item: ET.Element) -> list[MediaAttachment]:
    """Collect image attachments of an item.

    Attachments with any other medium, or without a URL, are dropped.
    """
    media = []
    for content in item.findall(MEDIA_CONTENT):
        attachment = MediaAttachment(
            url=(content.get("url") or "").strip(),
            type=content.get("type", ""),
            medium=content.get("medium", ""),
        )
        if attachment.is_image and attachment.url:
            media.append(attachment)
    return media


def parse_feed(raw: bytes, source: Optional[str] = None) -> list[FeedItem]:
    """Parse a Media RSS document into feed items.

    Args:
        raw: Response body
        source: Feed URL, only used in error messages

    Raises:
        ParseError: if the document is not XML or has no channel.
    """
    if not raw or not raw.strip():
        raise ParseError("empty document", source)

    try:
        root = ET.fromstring(raw)
    except ET.ParseError as e:
        raise ParseError(str(e), source) from e

    # RSS 2.0 wraps the channel in <rss>, but a bare <channel> is accepted too
    channel = root if root.tag == "channel" else root.find("channel")
    if channel is None:
        raise ParseError(f"no channel element under <{root.tag}>", source)

    items = []
    for item in channel.findall("item"):
        items.append(FeedItem(
            description=_text(item, "description"),
            pub_date=_text(item, "pubDate"),
            link=_text(item, "link"),
            media=_parse_media(item),
        ))

    return items


def extract_photos(item: FeedItem) -> list[PhotoRecord]:
    """Project the image attachments of an item into photo records."""
    return [
        PhotoRecord(
            image_url=media.url,
            published_at=item.pub_date,
            permalink_url=item.link,
        )
        for media in item.media
        if media.is_image and media.url
    ]


def parse_photos(raw: bytes, source: Optional[str] = None) -> list[PhotoRecord]:
    """Parse a feed document and extract all its photos in document order."""
    photos: list[PhotoRecord] = []
    for item in parse_feed(raw, source):
        photos.extend(extract_photos(item))
    return photos
