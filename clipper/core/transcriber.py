"""
Module for transcribing audio files using Groq's API.
"""

import asyncio
from pathlib import Path

from clipper.models.schemas import Transcript, TranscriptionConfig
from clipper.utils.logger import logging


class AudioTranscriber:
    """Class to handle audio transcription operations."""

    def __init__(self, client, transcribe_config: TranscriptionConfig = None):
        """
        Initialize the transcriber.

        Args:
            client: An ``AsyncGroq`` client
            transcribe_config: Model and response format settings
        """
        self.client = client
        self.transcribe_config = transcribe_config or TranscriptionConfig()

    async def transcribe(self, audio_path: Path) -> Transcript:
        """
        Transcribe an audio file with segment level timestamps.

        Args:
            audio_path: Path to the extracted audio

        Returns:
            Transcript with full text and ordered segments
        """
        audio_path = Path(audio_path)
        if not await asyncio.to_thread(audio_path.is_file):
            raise FileNotFoundError(f"Audio file not found at {audio_path}")

        logging.info("🎤 Transcribing with Whisper...")
        audio_bytes = await asyncio.to_thread(audio_path.read_bytes)

        kwargs = {}
        if self.transcribe_config.language:
            kwargs["language"] = self.transcribe_config.language

        transcription = await self.client.audio.transcriptions.create(
            file=(audio_path.name, audio_bytes),
            model=self.transcribe_config.model,
            response_format=self.transcribe_config.response_format,
            timestamp_granularities=self.transcribe_config.timestamp_granularities,
            **kwargs,
        )

        if hasattr(transcription, "model_dump"):
            data = transcription.model_dump()
        else:
            data = dict(transcription)

        transcript = Transcript(
            text=data.get("text") or "",
            segments=data.get("segments") or [],
        )
        logging.info(f"Transcription complete: {len(transcript.segments)} segments")
        return transcript
