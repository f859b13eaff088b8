"""
API routes for the YouTube clipper application.
"""

import traceback
from fastapi import APIRouter, Depends, Request

from clipper.api.schemas import (
    VideoUrlRequest,
    ClipRequest,
    HealthResponse,
    VideoInfoResponse,
    AnalysisResponse,
    ClipResponse,
)
from clipper.core.services import ClipperServices
from clipper.utils.error_handling import ClipperError, ValidationError
from clipper.utils.helpers import utc_timestamp
from clipper.utils.logger import logging

router = APIRouter(prefix="/api", tags=["clipper"])


def get_services(request: Request) -> ClipperServices:
    return request.app.state.services


@router.get("/health", response_model=HealthResponse)
async def health(services: ClipperServices = Depends(get_services)):
    """Report liveness and whether the AI endpoints are usable."""
    return HealthResponse(
        status="online",
        ai="enabled" if services.config.ai_enabled() else "disabled",
        timestamp=utc_timestamp(),
    )


@router.post("/video-info", response_model=VideoInfoResponse)
async def video_info(body: VideoUrlRequest, services: ClipperServices = Depends(get_services)):
    """Look up title, duration, thumbnail, author and id for a video URL."""
    if not body.url:
        raise ValidationError("URL missing")

    info = await services.downloader.get_video_info(body.url)
    return VideoInfoResponse(**info.model_dump())


@router.post("/analyze-video", response_model=AnalysisResponse)
async def analyze_video(body: VideoUrlRequest, services: ClipperServices = Depends(get_services)):
    """
    Transcribe the first minutes of a video and suggest highlight clips.

    - Requires GROQ_API_KEY
    - Highlights may be empty when the model answer cannot be used
    """
    if not body.url:
        raise ValidationError("URL missing")

    try:
        result = await services.analyzer.analyze(body.url)
    except ClipperError as e:
        if e.status_code >= 500:
            logging.error(f"Analysis error: {e.message}")
        raise
    except Exception as e:
        logging.error(f"Analysis error: {str(e)}")
        logging.error(traceback.format_exc())
        raise ClipperError(str(e)) from e

    return AnalysisResponse(
        transcription=result.transcription,
        segments=result.segments,
        highlights=result.highlights,
    )


@router.post("/create-clip", response_model=ClipResponse)
async def create_clip(body: ClipRequest, services: ClipperServices = Depends(get_services)):
    """Cut ``duration`` seconds from ``startTime`` into a downloadable MP4."""
    if not body.url or body.start_time is None or not body.duration:
        raise ValidationError("Missing parameters")

    clip = await services.clip_cutter.create_clip(
        body.url, body.start_time, body.duration, body.clip_name
    )
    return ClipResponse(**clip.model_dump())
