"""
YouTube metadata and audio access through the yt-dlp executable.
"""

import json
import asyncio
from pathlib import Path
from typing import List

from clipper.core.process import run_command
from clipper.models.schemas import VideoInfo
from clipper.utils.error_handling import ExternalProcessError, VideoNotFoundError
from clipper.utils.logger import logging


class YouTubeDownloader:
    """Class to handle querying and downloading media with yt-dlp."""

    def __init__(self, config):
        """
        Initialize the downloader with configuration.

        Args:
            config: Application configuration (executable, formats, timeouts)
        """
        self.config = config

    async def get_video_info(self, url: str) -> VideoInfo:
        """
        Extract metadata for a video URL.

        Args:
            url: Video URL understood by yt-dlp

        Returns:
            VideoInfo with title, duration, thumbnail, author and id

        Raises:
            VideoNotFoundError: if yt-dlp fails or prints malformed output
        """
        args = [self.config.YTDLP_BIN, "--dump-json", "--no-warnings", url]
        try:
            result = await run_command(args, timeout=self.config.INFO_TIMEOUT)
            info = json.loads(result.stdout)
        except (ExternalProcessError, ValueError) as e:
            logging.error(f"Video lookup failed for {url}: {str(e)}")
            raise VideoNotFoundError("Video not found") from e

        if not isinstance(info, dict):
            raise VideoNotFoundError("Video not found")

        return VideoInfo(
            title=info.get("title"),
            duration=info.get("duration"),
            thumbnail=info.get("thumbnail"),
            author=info.get("uploader") or info.get("channel"),
            video_id=info.get("id"),
        )

    def audio_args(self, url: str, output_stem: Path) -> List[str]:
        return [
            self.config.YTDLP_BIN,
            "-x",
            "--audio-format", self.config.AUDIO_FORMAT,
            "--audio-quality", self.config.AUDIO_QUALITY,
            "-o", f"{output_stem}.%(ext)s",
            "--download-sections", self.config.AUDIO_SECTION,
            url,
        ]

    async def extract_audio(self, url: str, output_stem: Path) -> Path:
        """
        Download the first minutes of a video as an audio file.

        Args:
            url: Video URL
            output_stem: Target path without extension

        Returns:
            Path to the extracted audio file
        """
        output_stem = Path(output_stem)
        logging.info("🎵 Extracting audio...")
        await run_command(self.audio_args(url, output_stem), timeout=self.config.AUDIO_TIMEOUT)

        audio_path = output_stem.with_name(f"{output_stem.name}.{self.config.AUDIO_FORMAT}")
        if not await asyncio.to_thread(audio_path.is_file):
            raise ExternalProcessError(f"Audio file was not created: {audio_path.name}")
        return audio_path

    def stream_args(self, url: str) -> List[str]:
        """Arguments that make yt-dlp write a capped rendition of the video to stdout."""
        return [
            self.config.YTDLP_BIN,
            "-f", self.config.CLIP_FORMAT,
            "--no-warnings",
            "-o", "-",
            url,
        ]
