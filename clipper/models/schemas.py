"""
Data models for the YouTube clipper application.
"""
from typing import Any, Optional, List, Union
from pydantic import BaseModel, ConfigDict, Field

from clipper.config import config

Number = Union[int, float]


class VideoInfo(BaseModel):
    """Metadata reported by the download utility for one video."""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    duration: Optional[Number] = None
    thumbnail: Optional[str] = None
    author: Optional[str] = None
    video_id: Optional[str] = Field(default=None, alias="videoId")


class TranscriptSegment(BaseModel):
    """A timestamped span of recognized speech. Provider fields pass through."""
    model_config = ConfigDict(extra="allow")

    start: float
    end: float
    text: str


class Transcript(BaseModel):
    text: str = ""
    segments: List[TranscriptSegment] = Field(default_factory=list)


class Highlight(BaseModel):
    """
    A clip candidate suggested by the language model.

    Fields are passed through as the model wrote them; the reply is only
    loosely constrained, so nothing here is coerced or rejected.
    """
    model_config = ConfigDict(extra="allow")

    start: Any = None
    end: Any = None
    title: Any = None
    reason: Any = None
    score: Any = None

    def sort_score(self) -> Number:
        """Score used for ordering; missing or non-numeric scores rank as 0."""
        if isinstance(self.score, (int, float)) and not isinstance(self.score, bool):
            return self.score
        return 0


class AnalysisResult(BaseModel):
    transcription: str
    segments: List[TranscriptSegment] = Field(default_factory=list)
    highlights: List[Highlight] = Field(default_factory=list)


class ClipResult(BaseModel):
    """Model describing a rendered clip in the downloads area."""
    model_config = ConfigDict(populate_by_name=True)

    download_url: str = Field(alias="downloadUrl")
    filename: str
    size: int


class TranscriptionConfig(BaseModel):
    """Configuration for transcription operations."""
    model: str = config.TRANSCRIPTION_MODEL
    language: Optional[str] = None
    response_format: str = "verbose_json"
    timestamp_granularities: List[str] = ["segment"]


class HighlightConfig(BaseModel):
    """Configuration for highlight extraction."""
    model: str = config.HIGHLIGHT_MODEL
    temperature: float = 0.3
    max_tokens: int = 1000
    max_highlights: int = 5
