"""Feed fetch pipeline."""
