"""Sentiment aggregation over a scored comment batch."""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Sequence

from .constants import SentimentConstants
from .errors import PreconditionError
from .models import Aggregation, Comment, ScoredComment, SummaryMetrics, TrendPoint

logger = logging.getLogger(__name__)

_QUANTUM = Decimal(1).scaleb(-SentimentConstants.DECIMALS)  # 0.01


def round_metric(value: float) -> float:
    """Round half-up on the exact binary value, as ``Number.toFixed`` does."""
    return float(Decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_UP))


def format_metric(value: float) -> str:
    """Two-decimal display form of a metric."""
    return f"{Decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_UP)}"


def word_count(text: str) -> int:
    """Number of whitespace-delimited non-empty tokens."""
    return len((text or "").split())


def count_sentiments(scored: Sequence[ScoredComment]) -> Dict[str, int]:
    counts = {bucket: 0 for bucket in SentimentConstants.BUCKETS}
    for item in scored:
        key = item.sentiment_key
        if key not in counts:
            raise PreconditionError(f"Unexpected sentiment label {item.sentiment!r}")
        counts[key] += 1
    return counts


def build_trend(scored: Sequence[ScoredComment]) -> List[TrendPoint]:
    """One point per scored comment, in arrival order."""
    return [TrendPoint(timestamp=item.timestamp, sentiment=item.sentiment_value) for item in scored]


def summarize(comments: Sequence[Comment], scored: Sequence[ScoredComment]) -> SummaryMetrics:
    total = len(comments)
    unique_commenters = len({c.author_id for c in comments})
    total_words = sum(word_count(c.text) for c in comments)
    total_sentiment = sum(item.sentiment_value for item in scored)

    avg_word_length = round_metric(total_words / total)
    avg_sentiment = round_metric(total_sentiment / total)
    # rescale the already rounded average
    normalized = round_metric(((avg_sentiment + 1) / 2) * SentimentConstants.SCORE_SCALE)

    return SummaryMetrics(
        total_comments=total,
        unique_commenters=unique_commenters,
        avg_word_length=avg_word_length,
        avg_sentiment_score=avg_sentiment,
        normalized_sentiment_score=normalized,
    )


def aggregate(comments: Sequence[Comment], scored: Sequence[ScoredComment]) -> Aggregation:
    """Derive counts, the trend series and summary metrics.

    Both sequences must be non-empty and index-aligned. Anything else is a
    wiring bug upstream and raises PreconditionError.
    """
    if not comments:
        raise PreconditionError("aggregate() called with an empty comment batch")
    if len(comments) != len(scored):
        raise PreconditionError(
            f"Comment/score length mismatch: {len(comments)} comments, {len(scored)} scores"
        )

    counts = count_sentiments(scored)
    aggregation = Aggregation(
        sentiment_counts=counts,
        trend=build_trend(scored),
        summary=summarize(comments, scored),
    )
    logger.debug(f"Aggregated {len(comments)} comments: {counts}")
    return aggregation
