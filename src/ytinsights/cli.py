"""Command-line interface for YouTube Sentiment Insights."""

import argparse
import logging
import sys
from pathlib import Path

from .core.config import settings
from .core.constants import FileConstants, MessageConstants
from .core.errors import ConfigurationError
from .core.models import format_sentiment_label
from .core.scoring import format_metric
from .pipeline import InsightsPipeline, PipelineReport
from .services.classifier_client import SentimentClassifier
from .services.config_resolver import resolve_config
from .services.renderer_client import RenderService
from .services.youtube_client import YouTubeService
from .utils.data_prep import export_to_json, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def print_report(report: PipelineReport):
    """Print summary, distribution and the comment list."""
    summary = report.aggregation.summary
    counts = report.aggregation.sentiment_counts

    print("\nComment Analysis Summary")
    print(f"  Total Comments:     {summary.total_comments}")
    print(f"  Unique Commenters:  {summary.unique_commenters}")
    print(f"  Avg Comment Length: {format_metric(summary.avg_word_length)} words")
    print(f"  Avg Sentiment Score: {format_metric(summary.normalized_sentiment_score)}/10")

    print("\nSentiment Distribution")
    for key, count in counts.items():
        print(f"  {format_sentiment_label(key)}: {count}")

    print("\nAll Comments with ML-Predicted Sentiment")
    for index, item in enumerate(report.scored, 1):
        print(f"  {index}. {item.comment}")
        print(f"     Sentiment: {format_sentiment_label(item.sentiment_key)}")


def save_images(report: PipelineReport, images_dir: str):
    out_dir = Path(images_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    for name, data in report.images.items():
        path = out_dir / FileConstants.IMAGE_NAMES[name]
        path.write_bytes(data)
        print(f"Saved {name} to {path}")


def cmd_analyze(args):
    """Analyze command."""
    try:
        config = resolve_config(settings)
    except ConfigurationError as e:
        print(str(e))
        return 1

    if not config.remote_config_used:
        print(MessageConstants.REMOTE_CONFIG_UNAVAILABLE)

    timeout = settings.request_timeout
    pipeline = InsightsPipeline(
        config,
        fetcher=YouTubeService(config.api_key),
        classifier=SentimentClassifier(config.api_base_url, timeout=timeout),
        renderer=RenderService(config.api_base_url, timeout=timeout),
        max_comments=args.max_comments,
    )

    render = not args.no_render and bool(args.images_dir)
    report = pipeline.run(args.url, render=render)

    if report.video_id:
        print(f"YouTube Video ID: {report.video_id}")
    for message in report.messages:
        print(message)

    if not report.ok:
        return 1

    print_report(report)

    if args.images_dir:
        save_images(report, args.images_dir)

    if args.out:
        payload = prepare_export(report.video_id, report.comments, report.scored, report.aggregation)
        export_to_json(payload, args.out)
        print(f"Results exported to {args.out}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="YouTube Sentiment Insights - comment sentiment for a video")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Analyze the comments of a video')
    analyze_parser.add_argument('url', help='YouTube watch URL')
    analyze_parser.add_argument('--max-comments', type=int, default=settings.max_comments,
                                help='Comment ceiling (checked before each page of 100)')
    analyze_parser.add_argument('--out', help='Output JSON file')
    analyze_parser.add_argument('--images-dir', help='Directory for rendered chart images')
    analyze_parser.add_argument('--no-render', action='store_true', help='Skip the rendering endpoints')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    try:
        if args.command == 'analyze':
            status = cmd_analyze(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
