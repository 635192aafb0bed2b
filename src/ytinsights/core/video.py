"""Video URL helpers."""

import re
from typing import Optional

from .constants import YouTubeConstants

_WATCH_URL = re.compile(YouTubeConstants.WATCH_URL_PATTERN)


def extract_video_id(url: str) -> Optional[str]:
    """Return the 11-character video id of a watch URL, or None."""
    match = _WATCH_URL.match(url or "")
    if not match:
        return None
    return match.group(1)
