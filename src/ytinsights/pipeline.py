"""Sequential fetch, classify, aggregate and render pipeline."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .core.constants import MessageConstants, YouTubeConstants
from .core.errors import ClassificationError, FetchError, PreconditionError, RenderError
from .core.models import Aggregation, AppConfig, Comment, ScoredComment
from .core.scoring import aggregate
from .core.video import extract_video_id
from .services.classifier_client import SentimentClassifier
from .services.renderer_client import RenderService
from .services.youtube_client import YouTubeService
from .utils.data_prep import build_render_payloads

logger = logging.getLogger(__name__)

# (payload key, RenderService method, failure message), in display order
RENDER_STEPS = (
    ("chart", "render_chart", MessageConstants.CHART_FAILED),
    ("trend_graph", "render_trend_graph", MessageConstants.TREND_GRAPH_FAILED),
    ("wordcloud", "render_wordcloud", MessageConstants.WORDCLOUD_FAILED),
)


@dataclass
class PipelineReport:
    """Outcome of one pipeline run."""
    video_id: Optional[str] = None
    comments: List[Comment] = field(default_factory=list)
    scored: List[ScoredComment] = field(default_factory=list)
    aggregation: Optional[Aggregation] = None
    payloads: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    images: Dict[str, bytes] = field(default_factory=dict)
    messages: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.aggregation is not None

    def add(self, message: str) -> None:
        self.messages.append(message)


class InsightsPipeline:
    """Runs the stages for one video, each after the previous one finishes.

    Stage failures become status messages on the report. A scored batch
    that does not line up with the comments is logged and reported as a
    prediction failure.
    """

    def __init__(
        self,
        config: AppConfig,
        fetcher: Optional[YouTubeService] = None,
        classifier: Optional[SentimentClassifier] = None,
        renderer: Optional[RenderService] = None,
        max_comments: int = YouTubeConstants.MAX_COMMENTS,
    ):
        self.config = config
        self.fetcher = fetcher or YouTubeService(config.api_key)
        self.classifier = classifier or SentimentClassifier(config.api_base_url)
        self.renderer = renderer
        self.max_comments = max_comments

    def _fetch(self, report: PipelineReport) -> List[Comment]:
        try:
            return self.fetcher.fetch_comments(report.video_id, self.max_comments)
        except FetchError as e:
            logger.warning(f"Comment fetch interrupted with {len(e.comments)} comments collected: {e}")
            report.add(MessageConstants.FETCH_FAILED)
            return e.comments

    def _render(self, report: PipelineReport) -> None:
        for name, method, failure_message in RENDER_STEPS:
            try:
                report.images[name] = getattr(self.renderer, method)(report.payloads[name])
            except RenderError as e:
                logger.warning(f"Renderer {name} failed: {e}")
                report.add(failure_message)

    def run(self, url: str, render: bool = True) -> PipelineReport:
        report = PipelineReport()

        report.video_id = extract_video_id(url)
        if not report.video_id:
            report.add(MessageConstants.INVALID_URL)
            return report
        logger.info(f"Analyzing video {report.video_id}")

        report.comments = self._fetch(report)
        if not report.comments:
            report.add(MessageConstants.NO_COMMENTS)
            return report
        report.add(f"Fetched {len(report.comments)} comments. Running ML prediction...")

        try:
            report.scored = self.classifier.classify(report.comments)
        except ClassificationError as e:
            report.add(str(e))
            return report

        try:
            report.aggregation = aggregate(report.comments, report.scored)
        except PreconditionError:
            logger.exception("Scored batch does not match the fetched comments")
            report.add(MessageConstants.PREDICTION_FAILED)
            return report

        report.payloads = build_render_payloads(report.comments, report.aggregation)

        if render and self.renderer is not None:
            self._render(report)

        return report
