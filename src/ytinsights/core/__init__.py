"""Core modules for YouTube Sentiment Insights."""

from .models import *
from .config import settings
from .errors import *
from .scoring import aggregate, format_metric
from .video import extract_video_id

__all__ = [
    "settings",
    "Comment",
    "ScoredComment",
    "TrendPoint",
    "SummaryMetrics",
    "Aggregation",
    "AppConfig",
    "format_sentiment_label",
    "InsightsError",
    "ConfigurationError",
    "FetchError",
    "ClassificationError",
    "RenderError",
    "PreconditionError",
    "aggregate",
    "format_metric",
    "extract_video_id",
]
