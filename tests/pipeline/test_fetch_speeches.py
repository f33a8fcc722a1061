from __future__ import annotations

import json

import pytest

from fed_speeches.config import AppConfig
from fed_speeches.errors import FeedDecodeError, FeedNetworkError
from fed_speeches.models import FilterOption, Speech
from fed_speeches.pipeline.fetch_speeches import (
    absolutize_link,
    decode_feed,
    fetch_fed_speech,
    filter_speeches,
)


def _raw_speech(speaker: str = "Jerome H. Powell", link: str = "/a.htm", video: str = "No") -> dict[str, str]:
    return {
        "d": "01/01/2024 09:00:00 AM",
        "t": "Talk",
        "s": speaker,
        "lo": "DC",
        "l": link,
        "a": "",
        "o": "",
        "v": "",
        "video": video,
    }


def _patch_feed(monkeypatch, body: str) -> list[AppConfig]:
    calls: list[AppConfig] = []

    def fake_fetch_feed_text(config: AppConfig) -> str:
        calls.append(config)
        return body

    monkeypatch.setattr("fed_speeches.pipeline.fetch_speeches.fetch_feed_text", fake_fetch_feed_text)
    return calls


def test_fetch_fed_speech_drops_update_markers(monkeypatch) -> None:
    body = json.dumps([_raw_speech(), {"updateDate": "01/02/2024"}])
    calls = _patch_feed(monkeypatch, body)

    speeches = fetch_fed_speech(None)

    assert len(calls) == 1
    assert len(speeches) == 1
    assert speeches[0].has_inline_video is False
    assert speeches[0].link == "https://www.federalreserve.gov/a.htm"


def test_fetch_fed_speech_filters_in_order(monkeypatch) -> None:
    body = json.dumps(
        [
            _raw_speech("Jerome H. Powell", "/p1.htm"),
            _raw_speech("Lael Brainard", "/b.htm"),
            _raw_speech("Jerome H. Powell", "/p2.htm"),
        ]
    )
    _patch_feed(monkeypatch, body)

    speeches = fetch_fed_speech(FilterOption(speaker="Powell"))

    assert [speech.link for speech in speeches] == [
        "https://www.federalreserve.gov/p1.htm",
        "https://www.federalreserve.gov/p2.htm",
    ]


def test_fetch_fed_speech_without_filter_keeps_everything(monkeypatch) -> None:
    _patch_feed(monkeypatch, json.dumps([_raw_speech("Jerome H. Powell"), _raw_speech("Lael Brainard")]))

    speeches = fetch_fed_speech(FilterOption())

    assert [speech.speaker for speech in speeches] == ["Jerome H. Powell", "Lael Brainard"]


def test_fetch_fed_speech_fails_whole_batch_on_bad_record(monkeypatch) -> None:
    body = json.dumps([_raw_speech(), _raw_speech(video="maybe"), {"updateDate": "01/02/2024"}])
    _patch_feed(monkeypatch, body)

    with pytest.raises(FeedDecodeError):
        fetch_fed_speech(None)


@pytest.mark.parametrize(("field", "value"), [("t", 5), ("d", 20240101), ("l", None)])
def test_fetch_fed_speech_rejects_non_string_values(monkeypatch, field: str, value: object) -> None:
    bad = _raw_speech("Lael Brainard")
    bad[field] = value
    _patch_feed(monkeypatch, json.dumps([_raw_speech(), bad, {"updateDate": "01/02/2024"}]))

    with pytest.raises(FeedDecodeError):
        fetch_fed_speech(None)


def test_fetch_fed_speech_propagates_network_errors(monkeypatch) -> None:
    def fake_fetch_feed_text(config: AppConfig) -> str:
        raise FeedNetworkError("boom")

    monkeypatch.setattr("fed_speeches.pipeline.fetch_speeches.fetch_feed_text", fake_fetch_feed_text)

    with pytest.raises(FeedNetworkError, match="boom"):
        fetch_fed_speech(None)


def test_fetch_fed_speech_uses_configured_origin_and_reports_status(monkeypatch) -> None:
    _patch_feed(monkeypatch, json.dumps([_raw_speech(link="/x.htm"), {"updateDate": "01/02/2024"}]))
    messages: list[str] = []

    speeches = fetch_fed_speech(
        FilterOption(speaker="Powell"),
        config=AppConfig(site_origin="https://mirror.test"),
        on_status=messages.append,
    )

    assert speeches[0].link == "https://mirror.test/x.htm"
    assert messages[0].startswith("Fetching ")
    assert "Decoded 1 speeches, dropped 1 update markers." in messages
    assert "1 speeches matched speaker 'Powell'" in messages


@pytest.mark.parametrize("body", ["not json", '{"d": "01/01/2024"}', '[{"title": "x"}]'])
def test_decode_feed_rejects_malformed_bodies(body: str) -> None:
    with pytest.raises(FeedDecodeError):
        decode_feed(body)


def test_filter_speeches_handles_missing_filter() -> None:
    speeches = [Speech.model_validate(_raw_speech("Jerome H. Powell")), Speech.model_validate(_raw_speech("Lael Brainard"))]

    assert filter_speeches(speeches, None) == speeches
    assert filter_speeches(speeches, FilterOption(speaker="Powell")) == speeches[:1]


def test_absolutize_link_prefixes_origin() -> None:
    assert (
        absolutize_link("/newsevents/speech/x.htm", "https://www.federalreserve.gov")
        == "https://www.federalreserve.gov/newsevents/speech/x.htm"
    )
