"""Top-level orchestration for fetching Federal Reserve speeches."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from pydantic import TypeAdapter, ValidationError

from fed_speeches.config import AppConfig
from fed_speeches.core.feed_client import fetch_feed_text
from fed_speeches.errors import FeedDecodeError
from fed_speeches.models import FeedRecord, FilterOption, Speech, UpdateMarker

_FEED_ADAPTER = TypeAdapter(list[FeedRecord])


def decode_feed(body: str) -> list[Speech | UpdateMarker]:
    """Decode the raw feed body into speech and update-marker records."""
    try:
        return _FEED_ADAPTER.validate_json(body)
    except ValidationError as exc:
        raise FeedDecodeError(f"Could not decode speeches feed: {exc}") from exc


def filter_speeches(speeches: Iterable[Speech], filter_option: FilterOption | None) -> list[Speech]:
    """Keep speeches accepted by the filter, preserving order."""
    if filter_option is None:
        return list(speeches)
    return [speech for speech in speeches if filter_option.matches(speech)]


def absolutize_link(link: str, origin: str) -> str:
    """Prefix a site-relative feed link with the site origin."""
    return f"{origin}{link}"


def fetch_fed_speech(
    filter_option: FilterOption | None = None,
    *,
    config: AppConfig | None = None,
    on_status: Callable[[str], None] | None = None,
) -> list[Speech]:
    """Fetch the speeches feed once and return decoded, filtered speeches."""

    def emit(message: str) -> None:
        if on_status:
            on_status(message)

    config = config or AppConfig()

    emit(f"Fetching {config.feed_url}")
    body = fetch_feed_text(config)

    records = decode_feed(body)
    speeches = [record for record in records if isinstance(record, Speech)]
    emit(f"Decoded {len(speeches)} speeches, dropped {len(records) - len(speeches)} update markers.")

    speeches = filter_speeches(speeches, filter_option)
    if filter_option is not None and filter_option.speaker is not None:
        emit(f"{len(speeches)} speeches matched speaker {filter_option.speaker!r}")

    return [
        speech.model_copy(update={"link": absolutize_link(speech.link, config.site_origin)})
        for speech in speeches
    ]
