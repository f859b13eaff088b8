"""
Configuration for pytest tests.
"""

import json
import pytest
from unittest.mock import AsyncMock, MagicMock

from clipper.config import DevelopmentConfig
from clipper.core.process import CommandResult


@pytest.fixture
def test_config(tmp_path):
    """Configuration with working directories under a temporary path."""

    class TestConfig(DevelopmentConfig):
        BASE_DIR = tmp_path
        TEMP_DIR = tmp_path / "temp"
        DOWNLOADS_DIR = tmp_path / "downloads"
        STATIC_DIR = tmp_path / "public"
        GROQ_API_KEY = "test_api_key"
        YTDLP_BIN = "yt-dlp"
        FFMPEG_BIN = "ffmpeg"

    TestConfig.initialize()
    return TestConfig


@pytest.fixture
def no_ai_config(test_config):
    """Configuration without a Groq key."""

    class NoAIConfig(test_config):
        GROQ_API_KEY = None

    return NoAIConfig


@pytest.fixture
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R"


@pytest.fixture
def video_json():
    """yt-dlp --dump-json output for a test video."""
    return {
        "id": "V3TUEeB0kW0",
        "title": "Test Video",
        "duration": 212,
        "thumbnail": "https://i.ytimg.com/vi/V3TUEeB0kW0/maxresdefault.jpg",
        "uploader": "Test Author",
        "channel": "Test Channel",
    }


@pytest.fixture
def transcription_payload():
    """Verbose JSON transcription as returned by the Groq API."""
    return {
        "text": "Welcome back. Today we try something crazy. It actually worked!",
        "segments": [
            {"id": 0, "start": 0.0, "end": 4.2, "text": "Welcome back."},
            {"id": 1, "start": 4.2, "end": 31.5, "text": "Today we try something crazy."},
            {"id": 2, "start": 31.5, "end": 65.0, "text": "It actually worked!"},
        ],
        "language": "en",
    }


@pytest.fixture
def make_completion():
    """Factory for chat completion responses carrying ``content``."""

    def _make(content):
        completion = MagicMock()
        completion.choices = [MagicMock(message=MagicMock(content=content))]
        return completion

    return _make


@pytest.fixture
def mock_groq_client(transcription_payload, make_completion):
    """Fixture to mock the AsyncGroq client."""
    client = MagicMock()

    transcription = MagicMock()
    transcription.model_dump.return_value = transcription_payload
    client.audio.transcriptions.create = AsyncMock(return_value=transcription)

    client.chat.completions.create = AsyncMock(return_value=make_completion(json.dumps([
        {"start": 0, "end": 30, "title": "Intro", "reason": "Sets up the video", "score": 40},
        {"start": 30, "end": 65, "title": "It worked", "reason": "Payoff", "score": 92},
    ])))

    return client


@pytest.fixture
def command_result():
    """Factory for successful CommandResult objects."""

    def _make(stdout=b"", args=None):
        return CommandResult(args or [], 0, stdout, b"")

    return _make
