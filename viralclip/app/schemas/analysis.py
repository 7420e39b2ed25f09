from typing import List, Optional

from pydantic import BaseModel

from viralclip.app.schemas.clips import CamelModel, ClipOut
from viralclip.domain.models import Platform


class AnalyzeRequest(BaseModel):
    # Optional so that a missing url is reported as a 400 by the route, not a schema error.
    url: Optional[str] = None


class AnalysisResponse(CamelModel):
    video_url: str
    platform: Platform
    title: str
    duration: int
    clips: List[ClipOut] = []
    thumbnail_url: Optional[str] = None


class PlatformsResponse(BaseModel):
    platforms: List[Platform]


class ErrorResponse(BaseModel):
    error: str
