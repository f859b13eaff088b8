"""
Configuration settings for the YouTube clipper application.
"""

import os
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _env_path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    return Path(value).resolve() if value else default


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Clipper AI"
    APP_VERSION = "0.2.0"

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))
    MAX_BODY_SIZE = 50 * 1024 * 1024

    # Working directories
    BASE_DIR = _env_path("BASE_DIR", Path(__file__).resolve().parent.parent.absolute())
    TEMP_DIR = _env_path("TEMP_DIR", BASE_DIR / "temp")
    DOWNLOADS_DIR = _env_path("DOWNLOADS_DIR", BASE_DIR / "downloads")
    STATIC_DIR = _env_path("STATIC_DIR", BASE_DIR / "public")

    # API keys
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")

    # Models
    TRANSCRIPTION_MODEL = os.getenv("TRANSCRIPTION_MODEL", "whisper-large-v3")
    HIGHLIGHT_MODEL = os.getenv("HIGHLIGHT_MODEL", "llama-3.1-70b-versatile")

    # External tools
    YTDLP_BIN = os.getenv("YTDLP_BIN", "yt-dlp")
    FFMPEG_BIN = os.getenv("FFMPEG_BIN", "ffmpeg")

    # Timeouts in seconds
    INFO_TIMEOUT = 60
    AUDIO_TIMEOUT = 300
    CLIP_TIMEOUT = 300

    # Audio extraction (first 10 minutes only to stay inside free API limits)
    AUDIO_FORMAT = "mp3"
    AUDIO_QUALITY = "5"
    AUDIO_SECTION = "*0:00-10:00"

    # Clip rendering
    CLIP_FORMAT = "best[height<=720]/best"
    CLIP_MAX_BUFFER = 200 * 1024 * 1024

    # Cleanup sweep
    CLEANUP_INTERVAL = 30 * 60
    FILE_MAX_AGE = 60 * 60

    DEBUG = False
    LOG_LEVEL = "INFO"

    @classmethod
    def initialize(cls):
        """Create the working directories and report missing credentials."""
        cls.TEMP_DIR.mkdir(parents=True, exist_ok=True)
        cls.DOWNLOADS_DIR.mkdir(parents=True, exist_ok=True)

        if not cls.GROQ_API_KEY:
            print("WARNING: GROQ_API_KEY environment variable not set.")
            print("AI analysis is disabled until it is set in .env or the environment.")

    @classmethod
    def ai_enabled(cls) -> bool:
        return bool(cls.GROQ_API_KEY)


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig


config = get_config()
