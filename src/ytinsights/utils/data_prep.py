"""Payload shaping for the renderers and JSON export."""

import json
from typing import Dict, Any, List, Sequence
from ..core.models import Aggregation, Comment, ScoredComment, format_sentiment_label
from ..core.scoring import format_metric
from .. import __version__


def chart_payload(aggregation: Aggregation) -> Dict[str, Any]:
    """Body for the sentiment distribution chart."""
    return {"sentiment_counts": dict(aggregation.sentiment_counts)}


def wordcloud_payload(comments: Sequence[Comment]) -> Dict[str, Any]:
    """Body for the word cloud."""
    return {"comments": [c.text for c in comments]}


def trend_payload(aggregation: Aggregation) -> Dict[str, Any]:
    """Body for the sentiment trend graph."""
    return {"sentiment_data": [point.to_payload() for point in aggregation.trend]}


def build_render_payloads(comments: Sequence[Comment], aggregation: Aggregation) -> Dict[str, Dict[str, Any]]:
    return {
        "chart": chart_payload(aggregation),
        "trend_graph": trend_payload(aggregation),
        "wordcloud": wordcloud_payload(comments),
    }


def prepare_export(
    video_id: str,
    comments: Sequence[Comment],
    scored: Sequence[ScoredComment],
    aggregation: Aggregation,
) -> Dict[str, Any]:
    """Prepare data for JSON export."""

    summary = aggregation.summary

    comments_data: List[Dict[str, Any]] = []
    for comment, item in zip(comments, scored):
        comments_data.append({
            "text": item.comment,
            "author_id": comment.author_id,
            "timestamp": item.timestamp,
            "sentiment": item.sentiment_value,
            "label": format_sentiment_label(item.sentiment_key),
        })

    export_data = {
        "video_id": video_id,
        "summary": {
            "total_comments": summary.total_comments,
            "unique_commenters": summary.unique_commenters,
            "avg_word_length": format_metric(summary.avg_word_length),
            "avg_sentiment_score": format_metric(summary.avg_sentiment_score),
            "normalized_sentiment_score": format_metric(summary.normalized_sentiment_score),
        },
        "sentiment_counts": dict(aggregation.sentiment_counts),
        "sentiment_data": trend_payload(aggregation)["sentiment_data"],
        "comments": comments_data,
        "metadata": {
            "export_timestamp": None,  # Will be set by caller
            "version": __version__
        }
    }

    return export_data


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    import datetime

    # Add timestamp
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
