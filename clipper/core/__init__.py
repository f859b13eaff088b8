"""
Core functionality for the YouTube clipper application.

This package contains modules for calling yt-dlp and ffmpeg, transcribing
audio, finding highlights and sweeping aged working files.
"""
