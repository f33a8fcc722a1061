"""Core adapters and shared utilities."""

from fed_speeches.core.feed_client import fetch_feed_text
from fed_speeches.core.parsing import eastern_to_utc, parse_video_flag

__all__ = [
    "eastern_to_utc",
    "fetch_feed_text",
    "parse_video_flag",
]
