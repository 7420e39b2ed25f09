"""
Classify a video URL by source platform using plain substring matching.
"""
from typing import List, Tuple

from viralclip.domain.models import Platform

# Checked in order; the first platform with a matching substring wins.
_PLATFORM_MARKERS: List[Tuple[Platform, Tuple[str, ...]]] = [
    (Platform.YOUTUBE, ("youtube.com", "youtu.be")),
    (Platform.TIKTOK, ("tiktok.com",)),
    (Platform.INSTAGRAM, ("instagram.com",)),
    (Platform.TWITTER, ("twitter.com", "x.com")),
    (Platform.FACEBOOK, ("facebook.com",)),
    (Platform.VIMEO, ("vimeo.com",)),
    (Platform.TWITCH, ("twitch.tv",)),
]


def detect_platform(url: str) -> Platform:
    """
    Return the platform whose domain appears in the URL, or Platform.UNKNOWN.
    No parsing is done, so "netflix.com" matches "x.com".
    """
    for platform, markers in _PLATFORM_MARKERS:
        if any(marker in url for marker in markers):
            return platform
    return Platform.UNKNOWN


def supported_platforms() -> List[Platform]:
    return [platform for platform, _ in _PLATFORM_MARKERS]
