"""Test the rendering client and export helpers."""

import json

import pytest
import requests
from unittest.mock import Mock

from ytinsights import __version__
from ytinsights.core.errors import RenderError
from ytinsights.core.models import Comment, ScoredComment, format_sentiment_label
from ytinsights.core.scoring import aggregate
from ytinsights.services.renderer_client import RenderService
from ytinsights.utils.data_prep import export_to_json, prepare_export


class TestRenderService:
    """Test RenderService endpoints."""

    def setup_method(self):
        self.session = Mock()
        self.service = RenderService("http://backend/", session=self.session)

    def test_returns_image_bytes(self):
        self.session.post.return_value = Mock(status_code=200, content=b"\x89PNG")

        data = self.service.render_chart({"sentiment_counts": {"1": 1, "0": 0, "-1": 0}})

        assert data == b"\x89PNG"
        self.session.post.assert_called_once_with(
            "http://backend/generate_chart",
            json={"sentiment_counts": {"1": 1, "0": 0, "-1": 0}},
            timeout=None,
        )

    def test_endpoints(self):
        self.session.post.return_value = Mock(status_code=200, content=b"img")

        self.service.render_wordcloud({"comments": []})
        self.service.render_trend_graph({"sentiment_data": []})

        urls = [call.args[0] for call in self.session.post.call_args_list]
        assert urls == ["http://backend/generate_wordcloud", "http://backend/generate_trend_graph"]

    def test_non_success_status(self):
        self.session.post.return_value = Mock(status_code=500, content=b"")

        with pytest.raises(RenderError):
            self.service.render_wordcloud({"comments": ["x"]})

    def test_transport_error(self):
        self.session.post.side_effect = requests.Timeout("slow")

        with pytest.raises(RenderError):
            self.service.render_trend_graph({"sentiment_data": []})


class TestExport:
    """Test export payload preparation."""

    def test_prepare_and_write(self, tmp_path):
        comments = [Comment("good video", "t1", "UC1"), Comment("meh", "t2", "Unknown")]
        scored = [ScoredComment("good video", "1", "t1"), ScoredComment("meh", "0", "t2")]
        data = prepare_export("dQw4w9WgXcQ", comments, scored, aggregate(comments, scored))

        assert data["summary"]["normalized_sentiment_score"] == "7.50"
        assert data["summary"]["avg_word_length"] == "1.50"
        assert data["comments"][0]["label"] == "Positive (1)"
        assert data["comments"][1]["author_id"] == "Unknown"

        out = tmp_path / "report.json"
        export_to_json(data, str(out))
        saved = json.loads(out.read_text(encoding="utf-8"))
        assert saved["video_id"] == "dQw4w9WgXcQ"
        assert saved["metadata"]["export_timestamp"]
        assert saved["metadata"]["version"] == __version__

    def test_sentiment_labels(self):
        assert format_sentiment_label(-1) == "Negative (-1)"
        assert format_sentiment_label("0") == "Neutral (0)"
        assert format_sentiment_label(7) == "Unknown (7)"


if __name__ == "__main__":
    pytest.main([__file__])
