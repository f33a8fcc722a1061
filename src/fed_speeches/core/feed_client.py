"""HTTP transport for the speeches feed."""

from __future__ import annotations

import requests

from fed_speeches.config import AppConfig
from fed_speeches.errors import FeedNetworkError


def fetch_feed_text(config: AppConfig) -> str:
    """GET the feed URL once and return the response body text."""
    headers = {"User-Agent": config.user_agent}
    try:
        response = requests.get(config.feed_url, headers=headers, timeout=config.timeout)
        response.raise_for_status()
        return response.text
    except requests.RequestException as exc:
        raise FeedNetworkError(f"Failed to fetch {config.feed_url}: {exc}") from exc
