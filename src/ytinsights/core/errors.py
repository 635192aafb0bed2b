"""Exception types raised by the ingestion and scoring pipeline."""

from typing import List, Optional


class InsightsError(Exception):
    """Base class for pipeline errors."""


class ConfigurationError(InsightsError):
    """No usable configuration could be resolved."""


class FetchError(InsightsError):
    """Comment retrieval stopped early.

    ``comments`` holds everything accumulated before the failure.
    """

    def __init__(self, message: str, comments: Optional[List] = None):
        super().__init__(message)
        self.comments = list(comments or [])


class ClassificationError(InsightsError):
    """The sentiment scoring request failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RenderError(InsightsError):
    """A rendering endpoint did not return an image."""

    def __init__(self, endpoint: str, message: str):
        super().__init__(f"{endpoint}: {message}")
        self.endpoint = endpoint


class PreconditionError(InsightsError):
    """Pipeline wiring invariant violated. Indicates a caller bug."""
