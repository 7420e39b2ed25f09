"""
Video metadata for supported platforms.

Nothing is fetched: every video gets the same placeholder title and duration.
A real provider would call the YouTube Data API (or the platform equivalent)
here. YouTube links still get a real thumbnail URL derived from the video id.
"""
import re
from typing import Optional

from viralclip.domain.models import Platform, VideoMetadata

PLACEHOLDER_TITLE = "Amazing Viral Video - Must Watch!"
PLACEHOLDER_DURATION = 420  # 7 minutes

YOUTUBE_THUMBNAIL_URL = "https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"

_YOUTUBE_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/embed/([^&\n?#]+)"),
]


def extract_youtube_id(url: str) -> Optional[str]:
    """Return the video id from a watch, short or embed link, or None."""
    for pattern in _YOUTUBE_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def fetch_video_metadata(url: str, platform: Platform) -> VideoMetadata:
    video_id = extract_youtube_id(url) if platform == Platform.YOUTUBE else None
    thumbnail_url = YOUTUBE_THUMBNAIL_URL.format(video_id=video_id) if video_id else None
    return VideoMetadata(
        title=PLACEHOLDER_TITLE,
        duration=PLACEHOLDER_DURATION,
        thumbnail_url=thumbnail_url,
    )
