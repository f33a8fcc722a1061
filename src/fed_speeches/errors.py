"""Exceptions raised while fetching or decoding the speeches feed."""


class FeedError(RuntimeError):
    """Base error for feed fetch failures."""


class FeedNetworkError(FeedError):
    """Raised when the feed request or body read fails."""


class FeedDecodeError(FeedError):
    """Raised when the feed body cannot be decoded into speeches."""
