"""Client for the remote sentiment prediction service."""

import logging
from typing import List, Optional, Sequence

import requests

from ..core.constants import EndpointConstants, MessageConstants
from ..core.errors import ClassificationError
from ..core.models import Comment, ScoredComment

logger = logging.getLogger(__name__)


class SentimentClassifier:
    """Scores a whole comment batch with a single request."""

    def __init__(self, api_base_url: str, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        self.base_url = api_base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return MessageConstants.PREDICTION_FAILED
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return MessageConstants.PREDICTION_FAILED

    def classify(self, comments: Sequence[Comment]) -> List[ScoredComment]:
        """Return one ScoredComment per input comment, in the order the service sent them."""
        url = f"{self.base_url}{EndpointConstants.PREDICT}"
        payload = {"comments": [c.to_payload() for c in comments]}
        logger.info(f"Requesting predictions for {len(comments)} comments")

        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Prediction request failed: {e}")
            raise ClassificationError(MessageConstants.PREDICTION_FAILED) from e

        if not 200 <= response.status_code < 300:
            message = self._error_message(response)
            logger.error(f"Prediction service returned {response.status_code}: {message}")
            raise ClassificationError(message, status_code=response.status_code)

        try:
            body = response.json()
            scored = [
                ScoredComment(
                    comment=item["comment"],
                    sentiment=item["sentiment"],
                    timestamp=item["timestamp"],
                )
                for item in body
            ]
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Malformed prediction response: {e}")
            raise ClassificationError(MessageConstants.PREDICTION_FAILED,
                                      status_code=response.status_code) from e

        logger.info(f"Received {len(scored)} predictions")
        return scored
