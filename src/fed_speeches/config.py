"""Feed endpoint and HTTP client settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fed_speeches import __version__

FED_ENTRYPOINT = "https://www.federalreserve.gov"
FED_SPEECH_URL = f"{FED_ENTRYPOINT}/json/ne-speeches.json"


class AppConfig(BaseSettings):
    """Where to fetch the speeches feed and how to reach it.

    Values come from `FS_`-prefixed environment variables or a local `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="FS_",
        env_file=".env",
        extra="ignore",
    )

    feed_url: str = Field(default=FED_SPEECH_URL)
    site_origin: str = Field(default=FED_ENTRYPOINT)
    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default=f"fed-speeches/{__version__}")
