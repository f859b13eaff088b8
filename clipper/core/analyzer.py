"""
Audio extraction, transcription and highlight discovery for one video.
"""

import asyncio
from pathlib import Path
from typing import Optional

from clipper.core.highlights import HighlightExtractor
from clipper.core.transcriber import AudioTranscriber
from clipper.core.youtube_downloader import YouTubeDownloader
from clipper.models.schemas import AnalysisResult
from clipper.utils.error_handling import ConfigurationError
from clipper.utils.helpers import unique_suffix
from clipper.utils.logger import logging


def remove_temp_files(output_stem: Path) -> None:
    """Delete every file yt-dlp may have written for ``output_stem``."""
    for path in output_stem.parent.glob(f"{output_stem.name}.*"):
        try:
            path.unlink()
            logging.debug(f"Removed temporary file {path.name}")
        except FileNotFoundError:
            pass
        except OSError as e:
            logging.warning(f"Could not remove temporary file {path.name}: {str(e)}")


class VideoAnalyzer:
    """Runs extract -> transcribe -> highlight for a video URL."""

    def __init__(
        self,
        config,
        downloader: YouTubeDownloader,
        transcriber: Optional[AudioTranscriber],
        extractor: Optional[HighlightExtractor],
    ):
        self.config = config
        self.downloader = downloader
        self.transcriber = transcriber
        self.extractor = extractor

    async def analyze(self, url: str) -> AnalysisResult:
        """
        Transcribe the start of a video and suggest highlight clips.

        The temporary audio is removed whether or not the analysis succeeds.

        Raises:
            ConfigurationError: if no AI credential is configured
        """
        if not self.config.ai_enabled() or self.transcriber is None or self.extractor is None:
            raise ConfigurationError("GROQ_API_KEY not configured")

        output_stem = Path(self.config.TEMP_DIR) / f"audio-{unique_suffix()}"
        try:
            audio_path = await self.downloader.extract_audio(url, output_stem)
            transcript = await self.transcriber.transcribe(audio_path)
            highlights = await self.extractor.find_highlights(transcript)
        finally:
            await asyncio.to_thread(remove_temp_files, output_stem)

        return AnalysisResult(
            transcription=transcript.text,
            segments=transcript.segments,
            highlights=highlights,
        )
