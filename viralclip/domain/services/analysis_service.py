import logging

from viralclip.domain.models import AnalysisResult, Platform
from viralclip.domain.services.clip_heuristics import format_time, suggest_clips
from viralclip.domain.services.platform_classifier import detect_platform
from viralclip.infrastructure.metadata_provider import fetch_video_metadata

logger = logging.getLogger(__name__)


class UnsupportedPlatformError(ValueError):
    """The URL does not belong to any platform we recognise."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Unsupported video platform for URL: {url}")
        self.url = url


UNSUPPORTED_PLATFORM_MESSAGE = (
    "Unsupported video platform. Please use YouTube, TikTok, Instagram, Twitter/X, "
    "or other major platforms."
)


def analyze_video(url: str) -> AnalysisResult:
    """
    Full analysis for one URL:
    - Classify the platform (Unknown is rejected)
    - Look up (simulated) metadata
    - Run the clip heuristics on the video duration
    """
    platform = detect_platform(url)
    if platform == Platform.UNKNOWN:
        raise UnsupportedPlatformError(url)

    metadata = fetch_video_metadata(url, platform)
    clips = suggest_clips(metadata.duration)

    logger.info(
        "Analyzed %s video (%s): %d clip(s) suggested",
        platform.value,
        format_time(metadata.duration),
        len(clips),
    )
    for clip in clips:
        logger.debug(
            "Clip %s-%s score=%d",
            format_time(clip.start_time),
            format_time(clip.end_time),
            clip.score,
        )

    return AnalysisResult(
        video_url=url,
        platform=platform,
        title=metadata.title,
        duration=metadata.duration,
        clips=clips,
        thumbnail_url=metadata.thumbnail_url,
    )
