"""
YouTube Clipper AI.

This application looks up video metadata, transcribes the opening minutes of
a video to suggest highlight clips with an LLM, and cuts downloadable clips.
"""

from clipper.config import config

__version__ = config.APP_VERSION
