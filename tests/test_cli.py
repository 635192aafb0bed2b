"""Test CLI commands."""

import json

import pytest
from unittest.mock import patch

from ytinsights.cli import main
from ytinsights.core.errors import ClassificationError, ConfigurationError
from ytinsights.core.models import AppConfig, Comment, ScoredComment

URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


@pytest.fixture
def services():
    with patch('ytinsights.cli.resolve_config') as resolve, \
            patch('ytinsights.cli.YouTubeService') as fetcher_cls, \
            patch('ytinsights.cli.SentimentClassifier') as classifier_cls, \
            patch('ytinsights.cli.RenderService') as renderer_cls:
        resolve.return_value = AppConfig("http://backend", "k", remote_config_used=True)
        fetcher_cls.return_value.fetch_comments.return_value = [
            Comment("good video", "t1", "UC1"),
            Comment("bad", "t2", "UC2"),
        ]
        classifier_cls.return_value.classify.return_value = [
            ScoredComment("good video", 1, "t1"),
            ScoredComment("bad", -1, "t2"),
        ]
        renderer_cls.return_value.render_chart.return_value = b"chart"
        renderer_cls.return_value.render_trend_graph.return_value = b"trend"
        renderer_cls.return_value.render_wordcloud.return_value = b"cloud"
        yield resolve, fetcher_cls, classifier_cls, renderer_cls


class TestAnalyzeCommand:
    """Test the analyze subcommand."""

    def test_prints_summary_and_exports(self, services, tmp_path, capsys):
        out = tmp_path / "report.json"

        main(["analyze", URL, "--out", str(out), "--images-dir", str(tmp_path / "img")])

        printed = capsys.readouterr().out
        assert "YouTube Video ID: dQw4w9WgXcQ" in printed
        assert "Total Comments:     2" in printed
        assert "Avg Sentiment Score: 5.00/10" in printed
        assert "Sentiment: Negative (-1)" in printed
        assert json.loads(out.read_text(encoding="utf-8"))["sentiment_counts"] == {"1": 1, "0": 0, "-1": 1}
        assert (tmp_path / "img" / "sentiment_chart.png").read_bytes() == b"chart"

    def test_classification_failure_exits_nonzero(self, services, capsys):
        _, _, classifier_cls, renderer_cls = services
        classifier_cls.return_value.classify.side_effect = ClassificationError("model unavailable")

        with pytest.raises(SystemExit) as excinfo:
            main(["analyze", URL])

        assert excinfo.value.code == 1
        assert "model unavailable" in capsys.readouterr().out
        renderer_cls.return_value.render_chart.assert_not_called()

    def test_float_labels_printed_as_buckets(self, services, capsys):
        classifier_cls = services[2]
        classifier_cls.return_value.classify.return_value = [
            ScoredComment("good video", 1.0, "t1"),
            ScoredComment("bad", "-1.0", "t2"),
        ]

        main(["analyze", URL])

        printed = capsys.readouterr().out
        assert "Sentiment: Positive (1)" in printed
        assert "Sentiment: Negative (-1)" in printed

    def test_missing_key(self, services, capsys):
        resolve = services[0]
        resolve.side_effect = ConfigurationError("Missing YouTube API key.")

        with pytest.raises(SystemExit):
            main(["analyze", URL])

        assert "Missing YouTube API key." in capsys.readouterr().out


class TestParser:
    """Test argument parsing."""

    def test_only_analyze_is_available(self, tmp_path):
        report = tmp_path / "report"
        report.write_text("{}", encoding="utf-8")

        with pytest.raises(SystemExit) as excinfo:
            main(["export", "--in", str(report)])

        assert excinfo.value.code == 2
        assert report.read_text(encoding="utf-8") == "{}"


if __name__ == "__main__":
    pytest.main([__file__])
