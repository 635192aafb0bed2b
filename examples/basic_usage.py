"""Basic usage examples for YouTube Sentiment Insights."""

from ytinsights import InsightsPipeline, settings
from ytinsights.core.models import Comment, ScoredComment
from ytinsights.core.scoring import aggregate, format_metric
from ytinsights.services import RenderService, resolve_config


def example_video_analysis(url: str):
    """Example: full pipeline for one video."""
    print(f"🔍 Analyzing {url}")

    config = resolve_config(settings)
    pipeline = InsightsPipeline(config, renderer=RenderService(config.api_base_url))
    report = pipeline.run(url)

    for message in report.messages:
        print(message)
    if not report.ok:
        return

    summary = report.aggregation.summary
    print(f"📊 {summary.total_comments} comments from {summary.unique_commenters} commenters")
    print(f"🎯 Sentiment score: {format_metric(summary.normalized_sentiment_score)}/10")
    print(f"🖼️ Rendered: {', '.join(report.images) or 'nothing'}")


def example_offline_aggregation():
    """Example: aggregate an already scored batch without any network calls."""
    print("\n🔍 Aggregating a scored batch")

    comments = [
        Comment("good video", "2024-01-01T00:00:00Z", "UC1"),
        Comment("bad", "2024-01-02T00:00:00Z", "UC2"),
        Comment("ok fine here", "2024-01-03T00:00:00Z", "UC3"),
    ]
    scored = [
        ScoredComment("good video", 1, "2024-01-01T00:00:00Z"),
        ScoredComment("bad", -1, "2024-01-02T00:00:00Z"),
        ScoredComment("ok fine here", 0, "2024-01-03T00:00:00Z"),
    ]

    result = aggregate(comments, scored)
    print(f"📋 Counts: {result.sentiment_counts}")
    print(f"📏 Avg words: {format_metric(result.summary.avg_word_length)}")
    print(f"🎯 Score: {format_metric(result.summary.normalized_sentiment_score)}/10")


if __name__ == "__main__":
    example_offline_aggregation()
    if settings.effective_youtube_key:
        example_video_analysis("https://www.youtube.com/watch?v=dQw4w9WgXcQ")
