"""Fetch and normalize the Federal Reserve speeches feed."""

__version__ = "0.1.0"
