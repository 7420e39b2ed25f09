import logging

from fastapi import APIRouter, HTTPException

from viralclip.app.schemas.analysis import (
    AnalysisResponse,
    AnalyzeRequest,
    ErrorResponse,
    PlatformsResponse,
)
from viralclip.app.schemas.clips import ClipOut
from viralclip.domain.services.analysis_service import (
    UNSUPPORTED_PLATFORM_MESSAGE,
    UnsupportedPlatformError,
    analyze_video,
)
from viralclip.domain.services.platform_classifier import supported_platforms

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analysis"])


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(body: AnalyzeRequest):
    """
    Classify a video URL and suggest up to 5 clips worth posting as shorts.
    """
    url = (body.url or "").strip()
    if not url:
        raise HTTPException(status_code=400, detail="Video URL is required")

    try:
        result = analyze_video(url)
    except UnsupportedPlatformError as e:
        raise HTTPException(status_code=400, detail=UNSUPPORTED_PLATFORM_MESSAGE) from e
    except Exception as e:
        logger.exception("Analysis error for %s", url)
        raise HTTPException(
            status_code=500,
            detail=str(e) or "Failed to analyze video",
        ) from e

    clips = [
        ClipOut(
            start_time=c.start_time,
            end_time=c.end_time,
            duration=c.duration,
            score=c.score,
            reason=c.reason,
            keywords=list(c.keywords),
        )
        for c in result.clips
    ]

    return AnalysisResponse(
        video_url=result.video_url,
        platform=result.platform,
        title=result.title,
        duration=result.duration,
        clips=clips,
        thumbnail_url=result.thumbnail_url,
    )


@router.get("/platforms", response_model=PlatformsResponse)
async def list_platforms():
    return PlatformsResponse(platforms=supported_platforms())
