"""
Cut a sub-clip of a video straight from the download stream.
"""

import asyncio
import traceback
from pathlib import Path
from typing import List, Optional

from clipper.core.process import run_piped
from clipper.core.youtube_downloader import YouTubeDownloader
from clipper.models.schemas import ClipResult
from clipper.utils.error_handling import ClipCreationError
from clipper.utils.helpers import format_size_mb, sanitize_clip_name, seconds_arg, unique_suffix
from clipper.utils.logger import logging


class ClipCutter:
    """Class to render clips into the public downloads directory."""

    def __init__(self, config, downloader: YouTubeDownloader):
        self.config = config
        self.downloader = downloader

    def ffmpeg_args(self, start_time: float, duration: float, output_path: Path) -> List[str]:
        return [
            self.config.FFMPEG_BIN,
            "-ss", seconds_arg(start_time),
            "-i", "pipe:0",
            "-t", seconds_arg(duration),
            "-c:v", "libx264",
            "-preset", "ultrafast",
            "-c:a", "aac",
            "-movflags", "+faststart",
            "-y", str(output_path),
        ]

    async def create_clip(
        self, url: str, start_time: float, duration: float, clip_name: Optional[str] = None
    ) -> ClipResult:
        """
        Render ``duration`` seconds of the video starting at ``start_time``.

        Args:
            url: Video URL
            start_time: Offset in seconds, zero allowed
            duration: Clip length in seconds
            clip_name: Optional display name used for the filename

        Returns:
            ClipResult with the relative download URL, filename and size

        Raises:
            ClipCreationError: for any failure; the cause is only logged
        """
        safe_name = sanitize_clip_name(clip_name)
        output_file = f"{safe_name}-{unique_suffix()}.mp4"
        output_path = Path(self.config.DOWNLOADS_DIR) / output_file

        logging.info(f"✂️ Creating clip: {safe_name}")
        logging.info(f"   Start: {start_time}s, Duration: {duration}s")

        try:
            await run_piped(
                self.downloader.stream_args(url),
                self.ffmpeg_args(start_time, duration, output_path),
                timeout=self.config.CLIP_TIMEOUT,
                limit=self.config.CLIP_MAX_BUFFER,
            )

            if not await asyncio.to_thread(output_path.is_file):
                raise ClipCreationError("File not created")

            size = (await asyncio.to_thread(output_path.stat)).st_size
        except Exception as e:
            logging.error(f"❌ Clip error: {str(e)}")
            logging.debug(traceback.format_exc())
            raise ClipCreationError("Clip creation failed") from e

        logging.info(f"✅ Clip created: {output_file} ({format_size_mb(size)})")
        return ClipResult(
            download_url=f"/downloads/{output_file}",
            filename=output_file,
            size=size,
        )
