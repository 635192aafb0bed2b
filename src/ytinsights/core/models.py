"""Data models for YouTube Sentiment Insights."""

from dataclasses import dataclass, field
from typing import Dict, List, Union

from .constants import SentimentConstants


@dataclass(frozen=True)
class Comment:
    """A top-level YouTube comment."""
    text: str
    timestamp: str  # ISO-8601 publish time
    author_id: str

    def to_payload(self) -> Dict[str, str]:
        """Wire form expected by the prediction backend."""
        return {"text": self.text, "timestamp": self.timestamp, "authorId": self.author_id}


@dataclass(frozen=True)
class ScoredComment:
    """A comment with its predicted sentiment."""
    comment: str
    sentiment: Union[str, int]  # -1, 0 or 1, either type
    timestamp: str

    @property
    def sentiment_key(self) -> str:
        """Bucket key; integral floats such as ``1.0`` or ``"-1.0"`` collapse to ``"1"``/``"-1"``."""
        raw = str(self.sentiment).strip()
        try:
            number = float(raw)
        except ValueError:
            return raw
        if number.is_integer():
            return str(int(number))
        return raw

    @property
    def sentiment_value(self) -> int:
        return int(self.sentiment_key)


@dataclass(frozen=True)
class TrendPoint:
    """One sample of the sentiment trend series."""
    timestamp: str
    sentiment: int

    def to_payload(self) -> Dict[str, Union[str, int]]:
        return {"timestamp": self.timestamp, "sentiment": self.sentiment}


@dataclass(frozen=True)
class SummaryMetrics:
    """Headline statistics for one video."""
    total_comments: int
    unique_commenters: int
    avg_word_length: float
    avg_sentiment_score: float
    normalized_sentiment_score: float


@dataclass(frozen=True)
class Aggregation:
    """Everything derived from a scored batch."""
    sentiment_counts: Dict[str, int]
    trend: List[TrendPoint]
    summary: SummaryMetrics


@dataclass(frozen=True)
class AppConfig:
    """Resolved runtime configuration."""
    api_base_url: str
    api_key: str = field(repr=False)
    remote_config_used: bool = False


def format_sentiment_label(value) -> str:
    """Render a sentiment value as e.g. ``Positive (1)``."""
    label = SentimentConstants.LABELS.get(str(value), SentimentConstants.UNKNOWN_LABEL)
    return f"{label} ({value})"
