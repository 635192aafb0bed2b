"""Configuration management for YouTube Sentiment Insights."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # YouTube Data API
    youtube_api_key: str = Field("", description="YouTube Data API key")
    YT_API_KEY: str = Field("", description="YouTube Data API key (alternative naming)")

    @property
    def effective_youtube_key(self) -> str:
        """Get the effective YouTube API key from either field."""
        return self.youtube_api_key or self.YT_API_KEY

    # Prediction backend
    api_url: str = Field("", description="Local override for the prediction API base URL")
    default_api_url: str = Field("http://localhost:5000", description="Fallback prediction API base URL")
    remote_config_url: str = Field(
        "https://yt-sentiment-config-baci.s3.amazonaws.com/config.json",
        description="Public JSON document carrying API_URL",
    )

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Pipeline settings
    max_comments: int = Field(1000, description="Comment ceiling per video")
    request_timeout: Optional[float] = Field(None, description="HTTP timeout in seconds, None waits forever")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
