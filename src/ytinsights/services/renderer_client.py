"""Client for the chart, word cloud and trend graph endpoints."""

import logging
from typing import Any, Dict, Optional

import requests

from ..core.constants import EndpointConstants
from ..core.errors import RenderError

logger = logging.getLogger(__name__)


class RenderService:
    """Posts pre-shaped payloads and returns the rendered image bytes."""

    def __init__(self, api_base_url: str, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        self.base_url = api_base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _render(self, endpoint: str, payload: Dict[str, Any]) -> bytes:
        try:
            response = self.session.post(f"{self.base_url}{endpoint}", json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Render request to {endpoint} failed: {e}")
            raise RenderError(endpoint, str(e)) from e

        if not 200 <= response.status_code < 300:
            logger.error(f"Render endpoint {endpoint} returned {response.status_code}")
            raise RenderError(endpoint, f"HTTP {response.status_code}")

        return response.content

    def render_chart(self, payload: Dict[str, Any]) -> bytes:
        return self._render(EndpointConstants.CHART, payload)

    def render_wordcloud(self, payload: Dict[str, Any]) -> bytes:
        return self._render(EndpointConstants.WORDCLOUD, payload)

    def render_trend_graph(self, payload: Dict[str, Any]) -> bytes:
        return self._render(EndpointConstants.TREND_GRAPH, payload)
