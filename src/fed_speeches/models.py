"""Domain models for the Federal Reserve speeches feed."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict, Field, field_serializer, field_validator

from fed_speeches.core.parsing import eastern_to_utc, parse_video_flag

JEROME_POWELL = "Jerome H. Powell"

# Short keys used by the feed for each speech field.
SPEECH_FIELD_ALIASES: dict[str, str] = {
    "timestamp": "d",
    "talk": "t",
    "speaker": "s",
    "location": "lo",
    "link": "l",
    "a": "a",
    "o": "o",
    "video_link": "v",
    "has_inline_video": "video",
}


def _speech_alias(field_name: str) -> AliasChoices:
    return AliasChoices(field_name, SPEECH_FIELD_ALIASES[field_name])


class Speech(BaseModel):
    """One Federal Reserve speech record."""

    model_config = ConfigDict(alias_generator=AliasGenerator(validation_alias=_speech_alias))

    timestamp: datetime = Field(description="Speech time as a UTC instant.")
    talk: str = Field(description="Speech title.")
    speaker: str = Field(description="Speaker name as published.")
    location: str = Field(description="Event location.")
    link: str = Field(description="Speech page URL, absolute once fetched.")
    a: str = Field(description="Opaque feed field, passed through unchanged.")
    o: str = Field(description="Opaque feed field, passed through unchanged.")
    video_link: str = Field(description="Associated video URL, may be empty.")
    has_inline_video: bool = Field(description="Whether the speech page embeds a video.")

    @field_validator("timestamp", mode="before")
    @classmethod
    def decode_timestamp(cls, value: object) -> datetime:
        return eastern_to_utc(value)

    @field_validator("has_inline_video", mode="before")
    @classmethod
    def decode_video_flag(cls, value: object) -> bool:
        return parse_video_flag(value)

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class UpdateMarker(BaseModel):
    """Feed metadata record carrying only the feed update date."""

    update_date: str = Field(validation_alias=AliasChoices("updateDate", "update_date"))


# Speech is tried first; an element matching neither shape fails validation.
FeedRecord = Annotated[Speech | UpdateMarker, Field(union_mode="left_to_right")]


@dataclass(frozen=True)
class FilterOption:
    """Optional speaker restriction applied to fetched speeches."""

    speaker: str | None = None

    def matches(self, speech: Speech) -> bool:
        """Return True when the speech passes this filter."""
        if self.speaker is None:
            return True
        return self.speaker in speech.speaker
