"""
Tests for the periodic file sweeper.
"""

import os
import time
import asyncio
import pytest
from unittest.mock import patch

from clipper.core.cleanup import FileSweeper


def make_file(path, age_seconds):
    path.write_bytes(b"data")
    mtime = time.time() - age_seconds
    os.utime(path, (mtime, mtime))
    return path


def test_sweep_removes_only_aged_files(test_config):
    old_clip = make_file(test_config.DOWNLOADS_DIR / "old-clip.mp4", 2 * 3600)
    new_clip = make_file(test_config.DOWNLOADS_DIR / "new-clip.mp4", 10 * 60)
    old_audio = make_file(test_config.TEMP_DIR / "audio-1.mp3", 3601)

    removed = FileSweeper(test_config).sweep_once()

    assert set(removed) == {old_clip, old_audio}
    assert not old_clip.exists()
    assert not old_audio.exists()
    assert new_clip.exists()


def test_sweep_with_reference_time(test_config):
    clip = make_file(test_config.DOWNLOADS_DIR / "clip.mp4", 0)

    assert FileSweeper(test_config).sweep_once(now=time.time() + 1800) == []
    assert clip.exists()

    FileSweeper(test_config).sweep_once(now=time.time() + 3700)
    assert not clip.exists()


def test_sweep_continues_after_failed_delete(test_config):
    first = make_file(test_config.DOWNLOADS_DIR / "a.mp4", 7200)
    second = make_file(test_config.DOWNLOADS_DIR / "b.mp4", 7200)
    original_unlink = type(first).unlink

    def flaky_unlink(self, *args, **kwargs):
        if self.name == "a.mp4":
            raise PermissionError("locked")
        return original_unlink(self, *args, **kwargs)

    with patch.object(type(first), "unlink", flaky_unlink):
        removed = FileSweeper(test_config).sweep_once()

    assert removed == [second]
    assert first.exists()
    assert not second.exists()


def test_sweep_missing_directory(test_config, tmp_path):
    class MissingDirs(test_config):
        DOWNLOADS_DIR = tmp_path / "gone"
        TEMP_DIR = tmp_path / "also-gone"

    assert FileSweeper(MissingDirs).sweep_once() == []


def test_run_sweeps_on_interval(test_config):
    class FastConfig(test_config):
        CLEANUP_INTERVAL = 0.01

    old_clip = make_file(test_config.DOWNLOADS_DIR / "old.mp4", 7200)
    sweeper = FileSweeper(FastConfig)

    async def run_briefly():
        task = asyncio.create_task(sweeper.run())
        await asyncio.sleep(0.3)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(run_briefly())

    assert not old_clip.exists()
