from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

from clipper.models.schemas import VideoInfo, TranscriptSegment, Highlight, ClipResult, Number


class VideoUrlRequest(BaseModel):
    """Model for requests that only carry a video URL."""
    url: Optional[str] = None


class ClipRequest(BaseModel):
    """Model for clip creation requests."""
    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = None
    start_time: Optional[Number] = Field(default=None, alias="startTime")
    duration: Optional[Number] = None
    clip_name: Optional[str] = Field(default=None, alias="clipName")


class HealthResponse(BaseModel):
    status: str = "online"
    ai: str
    timestamp: str


class VideoInfoResponse(VideoInfo):
    """Model for video info responses."""
    success: bool = True


class AnalysisResponse(BaseModel):
    """Model for analysis responses."""
    success: bool = True
    transcription: str
    segments: List[TranscriptSegment] = []
    highlights: List[Highlight] = []


class ClipResponse(ClipResult):
    """Model for clip creation responses."""
    success: bool = True
