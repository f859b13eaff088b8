"""
Periodic removal of aged files from the working directories.
"""

import asyncio
import time
from pathlib import Path
from typing import List, Optional

from clipper.utils.logger import logging


class FileSweeper:
    """Deletes files older than ``FILE_MAX_AGE`` from the temp and downloads areas."""

    def __init__(self, config):
        self.config = config
        self.directories = [Path(config.DOWNLOADS_DIR), Path(config.TEMP_DIR)]
        self.max_age = config.FILE_MAX_AGE
        self.interval = config.CLEANUP_INTERVAL

    def sweep_once(self, now: Optional[float] = None) -> List[Path]:
        """
        Remove every entry whose modification time is older than the age threshold.

        Args:
            now: Reference time in epoch seconds, defaults to the current time

        Returns:
            Paths that were deleted
        """
        cutoff = (now if now is not None else time.time()) - self.max_age
        removed = []

        for directory in self.directories:
            if not directory.is_dir():
                continue
            for path in directory.iterdir():
                try:
                    if path.stat().st_mtime < cutoff:
                        path.unlink()
                        removed.append(path)
                        logging.info(f"🗑️ Deleted: {path.name}")
                except FileNotFoundError:
                    continue
                except OSError as e:
                    logging.warning(f"Could not delete {path}: {str(e)}")

        return removed

    async def run(self) -> None:
        """Sweep forever on a fixed interval; cancel the task to stop."""
        logging.info(f"🧹 Cleanup task started (every {self.interval}s, max age {self.max_age}s)")
        while True:
            await asyncio.sleep(self.interval)
            try:
                await asyncio.to_thread(self.sweep_once)
            except Exception as e:
                logging.error(f"⚠️ Cleanup error: {str(e)}")
