import pytest

from viralclip.domain.models import Platform
from viralclip.infrastructure.metadata_provider import (
    PLACEHOLDER_DURATION,
    PLACEHOLDER_TITLE,
    extract_youtube_id,
    fetch_video_metadata,
)


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s", "dQw4w9WgXcQ"),
        ("https://youtu.be/abc123?si=xyz", "abc123"),
        ("https://www.youtube.com/embed/abc123#start", "abc123"),
        ("https://www.youtube.com/shorts/abc123", None),
        ("https://www.youtube.com/", None),
    ],
)
def test_extract_youtube_id(url, expected):
    assert extract_youtube_id(url) == expected


def test_youtube_metadata_has_thumbnail():
    metadata = fetch_video_metadata("https://youtu.be/abc123", Platform.YOUTUBE)

    assert metadata.title == PLACEHOLDER_TITLE
    assert metadata.duration == PLACEHOLDER_DURATION == 420
    assert metadata.thumbnail_url == "https://img.youtube.com/vi/abc123/maxresdefault.jpg"


def test_youtube_without_id_has_no_thumbnail():
    metadata = fetch_video_metadata("https://www.youtube.com/@channel", Platform.YOUTUBE)
    assert metadata.thumbnail_url is None


def test_other_platforms_have_no_thumbnail():
    # Even if the URL happens to look like a YouTube link.
    metadata = fetch_video_metadata("https://tiktok.com/?r=youtu.be/abc", Platform.TIKTOK)

    assert metadata.thumbnail_url is None
    assert metadata.duration == 420
