"""Resolve the prediction backend URL and YouTube key into one AppConfig.

Order of precedence, lowest first:

1. ``settings.default_api_url`` (local backend)
2. ``API_URL`` from the remote JSON document at ``settings.remote_config_url``
3. ``settings.api_url``, the developer override

The YouTube key only ever comes from local settings.
"""

import logging
from typing import Optional

import requests

from ..core.config import Settings
from ..core.constants import MessageConstants
from ..core.errors import ConfigurationError
from ..core.models import AppConfig

logger = logging.getLogger(__name__)


def fetch_remote_api_url(url: str, session: Optional[requests.Session] = None,
                         timeout: Optional[float] = None) -> Optional[str]:
    """Return API_URL from the remote config document, or None if unavailable."""
    if not url:
        return None
    http = session or requests
    try:
        response = http.get(url, headers={"Cache-Control": "no-store"}, timeout=timeout)
        if response.status_code != 200:
            logger.warning(f"Failed to fetch remote config: {response.status_code}")
            return None
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"Could not reach remote config, falling back to local settings: {e}")
        return None

    if isinstance(data, dict) and data.get("API_URL"):
        return str(data["API_URL"])
    logger.warning("Remote config has no API_URL; falling back to local settings")
    return None


def resolve_config(settings: Settings, session: Optional[requests.Session] = None) -> AppConfig:
    """Apply the configuration cascade and return an immutable AppConfig."""
    api_base_url = settings.default_api_url
    remote_url = fetch_remote_api_url(settings.remote_config_url, session, settings.request_timeout)
    if remote_url:
        api_base_url = remote_url

    if settings.api_url:
        api_base_url = settings.api_url  # dev override

    api_key = settings.effective_youtube_key
    if not api_key:
        raise ConfigurationError(MessageConstants.MISSING_API_KEY)

    config = AppConfig(api_base_url=api_base_url, api_key=api_key, remote_config_used=bool(remote_url))
    logger.info(f"Using prediction API at {config.api_base_url} (remote config: {config.remote_config_used})")
    return config
