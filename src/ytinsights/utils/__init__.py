"""Utility modules for YouTube Sentiment Insights."""

from .data_prep import (
    build_render_payloads,
    chart_payload,
    export_to_json,
    prepare_export,
    trend_payload,
    wordcloud_payload,
)

__all__ = [
    "build_render_payloads",
    "chart_payload",
    "export_to_json",
    "prepare_export",
    "trend_payload",
    "wordcloud_payload",
]
