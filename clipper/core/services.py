"""
Wiring of the pipeline components for one process.
"""

from groq import AsyncGroq

from clipper.core.analyzer import VideoAnalyzer
from clipper.core.cleanup import FileSweeper
from clipper.core.clip_cutter import ClipCutter
from clipper.core.highlights import HighlightExtractor
from clipper.core.transcriber import AudioTranscriber
from clipper.core.youtube_downloader import YouTubeDownloader
from clipper.models.schemas import HighlightConfig, TranscriptionConfig


class ClipperServices:
    """
    Process-wide component graph.

    Built once at startup from the configuration and kept for the life of the
    process. Holds only filesystem paths and an API client handle, so there is
    nothing to tear down.
    """

    def __init__(self, config, client=None):
        self.config = config
        if client is None and config.ai_enabled():
            client = AsyncGroq(api_key=config.GROQ_API_KEY)
        self.client = client

        self.downloader = YouTubeDownloader(config)
        self.transcriber = None
        self.extractor = None
        if client is not None:
            self.transcriber = AudioTranscriber(client, TranscriptionConfig(model=config.TRANSCRIPTION_MODEL))
            self.extractor = HighlightExtractor(client, HighlightConfig(model=config.HIGHLIGHT_MODEL))
        self.analyzer = VideoAnalyzer(config, self.downloader, self.transcriber, self.extractor)
        self.clip_cutter = ClipCutter(config, self.downloader)
        self.sweeper = FileSweeper(config)
