"""Services for YouTube Sentiment Insights."""

from .youtube_client import YouTubeService
from .classifier_client import SentimentClassifier
from .renderer_client import RenderService
from .config_resolver import resolve_config

__all__ = [
    "YouTubeService",
    "SentimentClassifier",
    "RenderService",
    "resolve_config",
]
