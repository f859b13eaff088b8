"""
Tests for the helper utilities.
"""

import re

from clipper.utils.helpers import (
    format_time,
    sanitize_clip_name,
    unique_suffix,
    format_size_mb,
    utc_timestamp,
    seconds_arg,
)


def test_format_time():
    assert format_time(0) == "0:00"
    assert format_time(65) == "1:05"
    assert format_time(3599) == "59:59"


def test_format_time_floors_fractions():
    assert format_time(4.2) == "0:04"
    assert format_time(59.999) == "0:59"
    assert format_time(600) == "10:00"


def test_sanitize_clip_name():
    assert sanitize_clip_name("My Clip!") == "My_Clip_"
    assert sanitize_clip_name("ok-name_1") == "ok-name_1"
    assert sanitize_clip_name("../../etc/passwd") == "______etc_passwd"


def test_sanitize_clip_name_defaults_and_truncates():
    assert sanitize_clip_name(None) == "clip"
    assert sanitize_clip_name("") == "clip"
    assert len(sanitize_clip_name("x" * 80)) == 50


def test_unique_suffix_is_unique():
    suffixes = {unique_suffix() for _ in range(100)}
    assert len(suffixes) == 100
    assert re.fullmatch(r"\d+-[0-9a-f]{6}", suffixes.pop())


def test_format_size_mb():
    assert format_size_mb(1024 * 1024) == "1.00 MB"
    assert format_size_mb(0) == "0.00 MB"


def test_utc_timestamp_is_iso8601():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())


def test_seconds_arg():
    assert seconds_arg(0) == "0"
    assert seconds_arg(12.0) == "12"
    assert seconds_arg(12.5) == "12.5"
