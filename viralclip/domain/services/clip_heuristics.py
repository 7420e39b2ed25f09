import math
from typing import Callable, List, Optional

from viralclip.domain.models import ClipSuggestion

MAX_CLIPS = 5

HOOK_REASON = (
    "Strong hook with immediate engagement. First impressions are crucial for viral "
    "content. This segment captures attention within the first few seconds."
)
PEAK_REASON = (
    "Peak engagement moment with maximum energy and emotion. This section has the "
    "highest action density and audience retention potential."
)
PAYOFF_REASON = (
    "Satisfying conclusion with payoff. Creates a complete story arc that encourages "
    "shares and rewatches. Strong call-to-action potential."
)
BEST_SEGMENT_REASON = (
    "Most coherent standalone segment with complete narrative. Perfect pacing for "
    "shorts. Contains multiple engagement triggers."
)
REACTION_REASON = (
    "Surprise or wow moment that drives reactions and comments. High shareability "
    "factor. Creates emotional response."
)


def format_time(seconds: float) -> str:
    """Format seconds as M:SS (minutes are not padded)."""
    minutes = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    return f"{minutes}:{secs:02d}"


def _hook_clip(duration: int) -> Optional[ClipSuggestion]:
    """Opening of the video, up to 75 seconds."""
    if duration < 60:
        return None
    return ClipSuggestion(
        start_time=0,
        end_time=min(75, duration),
        score=92,
        reason=HOOK_REASON,
        keywords=["hook", "opening", "attention-grabbing", "first impression"],
    )


def _peak_clip(duration: int) -> Optional[ClipSuggestion]:
    """65 seconds starting at 40% of the video."""
    if duration < 180:
        return None
    start = math.floor(duration * 0.4)
    return ClipSuggestion(
        start_time=start,
        end_time=min(start + 65, duration),
        score=95,
        reason=PEAK_REASON,
        keywords=["climax", "high-energy", "emotional peak", "key moment"],
    )


def _payoff_clip(duration: int) -> Optional[ClipSuggestion]:
    """Last 80 seconds of the video."""
    if duration < 240:
        return None
    return ClipSuggestion(
        start_time=max(duration - 80, 0),
        end_time=duration,
        score=88,
        reason=PAYOFF_REASON,
        keywords=["payoff", "resolution", "conclusion", "satisfying"],
    )


def _best_segment_clip(duration: int) -> Optional[ClipSuggestion]:
    """
    90 seconds starting at 30% of the video.

    Unlike the other rules the end is not capped to the video duration. Under the
    300s gate start + 90 never passes the end of the video, so the cap only
    matters if the gate or the offsets change.
    """
    if duration < 300:
        return None
    start = math.floor(duration * 0.3)
    return ClipSuggestion(
        start_time=start,
        end_time=start + 90,
        score=89,
        reason=BEST_SEGMENT_REASON,
        keywords=["coherent", "standalone", "complete story", "balanced pacing"],
    )


def _reaction_clip(duration: int) -> Optional[ClipSuggestion]:
    """70 seconds starting at 55% of the video."""
    if duration < 150:
        return None
    start = math.floor(duration * 0.55)
    return ClipSuggestion(
        start_time=start,
        end_time=min(start + 70, duration),
        score=91,
        reason=REACTION_REASON,
        keywords=["surprise", "wow factor", "shareable", "reaction-worthy"],
    )


# Order matters: ties in score keep this order after sorting.
CLIP_RULES: List[Callable[[int], Optional[ClipSuggestion]]] = [
    _hook_clip,
    _peak_clip,
    _payoff_clip,
    _best_segment_clip,
    _reaction_clip,
]


def suggest_clips(duration: int, top_k: int = MAX_CLIPS) -> List[ClipSuggestion]:
    """
    Core heuristic:
    - Apply every duration-gated rule, each contributing at most one clip
    - Sort by score descending (stable, so rule order breaks ties)
    - Return the top_k clips

    Only the total duration is looked at; platform and content play no part.
    """
    clips: List[ClipSuggestion] = []
    for rule in CLIP_RULES:
        clip = rule(duration)
        if clip is not None:
            clips.append(clip)

    clips.sort(key=lambda c: c.score, reverse=True)
    return clips[:top_k]
