from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Platform(str, Enum):
    YOUTUBE = "YouTube"
    TIKTOK = "TikTok"
    INSTAGRAM = "Instagram"
    TWITTER = "Twitter/X"
    FACEBOOK = "Facebook"
    VIMEO = "Vimeo"
    TWITCH = "Twitch"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ClipSuggestion:
    start_time: int
    end_time: int
    score: int  # 0–100, fixed per rule
    reason: str
    keywords: List[str] = field(default_factory=list)

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


@dataclass(frozen=True)
class VideoMetadata:
    title: str
    duration: int  # seconds
    thumbnail_url: Optional[str] = None


@dataclass(frozen=True)
class AnalysisResult:
    video_url: str
    platform: Platform
    title: str
    duration: int
    clips: List[ClipSuggestion] = field(default_factory=list)
    thumbnail_url: Optional[str] = None
