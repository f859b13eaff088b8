"""
API client for communicating with a running YouTube Clipper AI server.
"""

import requests
from pathlib import Path
from typing import Dict, Any, Optional
from urllib.parse import urljoin

from clipper.config import config


class ApiClient:
    """Client for interacting with the YouTube Clipper AI API."""

    def __init__(self, base_url: str = f"http://localhost:{config.PORT}", timeout: float = 600):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the server
            timeout: Seconds to wait for a response, analysis and clipping are slow
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/")
        self.timeout = timeout

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    def _check(self, response: requests.Response) -> Dict[str, Any]:
        """Raise with the server's error message on failure, else return the JSON body."""
        if response.status_code >= 400:
            try:
                message = response.json().get("error", response.reason)
            except ValueError:
                message = response.reason
            raise requests.HTTPError(f"{response.status_code}: {message}", response=response)
        return response.json()

    def health(self) -> Dict[str, Any]:
        return self._check(requests.get(self._url("health"), timeout=self.timeout))

    def video_info(self, url: str) -> Dict[str, Any]:
        """
        Get metadata for a video.

        Args:
            url: Video URL

        Returns:
            Dictionary with title, duration, thumbnail, author and videoId
        """
        response = requests.post(self._url("video-info"), json={"url": url}, timeout=self.timeout)
        return self._check(response)

    def analyze_video(self, url: str) -> Dict[str, Any]:
        """
        Request transcription and highlight suggestions.

        Args:
            url: Video URL

        Returns:
            Dictionary with transcription, segments and highlights
        """
        response = requests.post(self._url("analyze-video"), json={"url": url}, timeout=self.timeout)
        return self._check(response)

    def create_clip(
        self, url: str, start_time: float, duration: float, clip_name: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Request a clip.

        Returns:
            Dictionary with downloadUrl, filename and size
        """
        payload = {"url": url, "startTime": start_time, "duration": duration}
        if clip_name:
            payload["clipName"] = clip_name

        response = requests.post(self._url("create-clip"), json=payload, timeout=self.timeout)
        return self._check(response)

    def download_clip(self, download_url: str, destination: str) -> Path:
        """Stream a rendered clip to ``destination`` and return its path."""
        destination = Path(destination)
        with requests.get(urljoin(self.base_url, download_url), stream=True, timeout=self.timeout) as response:
            response.raise_for_status()
            with open(destination, "wb") as f:
                for chunk in response.iter_content(chunk_size=1024 * 1024):
                    f.write(chunk)
        return destination
