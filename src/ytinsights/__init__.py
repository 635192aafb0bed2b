"""YouTube Sentiment Insights - comment sentiment analysis for YouTube videos."""

__version__ = "0.1.0"
__author__ = "YouTube Sentiment Insights Team"

from .core.models import *
from .core.config import settings
from .pipeline import InsightsPipeline, PipelineReport
from .services.youtube_client import YouTubeService
from .services.classifier_client import SentimentClassifier

__all__ = [
    "settings",
    "InsightsPipeline",
    "PipelineReport",
    "YouTubeService",
    "SentimentClassifier",
]
