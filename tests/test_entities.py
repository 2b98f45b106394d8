"""Tests for core entities."""

import pytest

from photo_gallery.core import Gallery, MediaAttachment, PhotoRecord


def test_photo_record_creation() -> None:
    """Test creating a valid photo record."""
    photo = PhotoRecord(
        image_url="https://files.mastodon.social/media/1.jpg",
        published_at="Tue, 14 May 2024 10:00:00 +0000",
        permalink_url="https://mastodon.social/@livelakeerie/1",
    )

    assert photo.image_url.endswith("1.jpg")
    assert photo.permalink_url == "https://mastodon.social/@livelakeerie/1"


def test_photo_record_validation() -> None:
    """Test photo record requires an image URL."""
    with pytest.raises(ValueError, match="Image URL cannot be empty"):
        PhotoRecord(
            image_url="",
            published_at="Tue, 14 May 2024 10:00:00 +0000",
            permalink_url="https://mastodon.social/@livelakeerie/1",
        )


def test_photo_record_is_immutable() -> None:
    """Test photo records cannot be modified."""
    photo = PhotoRecord("https://x/1.jpg", "", "https://x/1")

    with pytest.raises(AttributeError):
        photo.image_url = "https://x/2.jpg"  # type: ignore[misc]


def test_media_attachment_is_image() -> None:
    """Test only the exact "image" medium qualifies."""
    assert MediaAttachment(url="https://x/1.jpg", medium="image").is_image
    assert not MediaAttachment(url="https://x/1.mp4", medium="video").is_image
    assert not MediaAttachment(url="https://x/1.jpg", medium="Image").is_image
    assert not MediaAttachment(url="https://x/1.jpg").is_image


def test_gallery_iteration() -> None:
    """Test gallery exposes its photos in order."""
    photos = (
        PhotoRecord("https://x/2.jpg", "", "https://x/2"),
        PhotoRecord("https://x/1.jpg", "", "https://x/1"),
    )
    gallery = Gallery(photos=photos)

    assert len(gallery) == 2
    assert list(gallery) == list(photos)
    assert len(Gallery()) == 0
