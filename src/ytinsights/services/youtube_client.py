"""YouTube comment collection service."""

import logging
from typing import Any, Dict, List, Optional

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..core.constants import YouTubeConstants
from ..core.errors import ConfigurationError, FetchError
from ..core.models import Comment

logger = logging.getLogger(__name__)


class YouTubeService:
    """Top-level comment fetcher backed by the YouTube Data API v3."""

    def __init__(self, api_key: str, youtube: Any = None):
        self.api_key = api_key
        self.youtube = youtube

    def _init_youtube(self):
        """Initialize YouTube client."""
        if not self.api_key:
            raise ConfigurationError("YouTube API key not provided")
        self.youtube = build(
            YouTubeConstants.API_SERVICE_NAME,
            YouTubeConstants.API_VERSION,
            developerKey=self.api_key,
            cache_discovery=False,
        )
        logger.info("YouTube client initialized successfully")

    @staticmethod
    def _to_comment(item: Dict[str, Any]) -> Comment:
        top_comment = item["snippet"]["topLevelComment"]["snippet"]
        author = top_comment.get("authorChannelId") or {}
        return Comment(
            text=top_comment["textOriginal"],
            timestamp=top_comment["publishedAt"],
            author_id=author.get("value") or YouTubeConstants.UNKNOWN_AUTHOR,
        )

    def _list_page(self, video_id: str, page_token: Optional[str]) -> Dict[str, Any]:
        request = self.youtube.commentThreads().list(
            part="snippet",
            videoId=video_id,
            maxResults=YouTubeConstants.PAGE_SIZE,
            pageToken=page_token or "",
        )
        return request.execute()

    def fetch_comments(self, video_id: str, max_comments: int = YouTubeConstants.MAX_COMMENTS) -> List[Comment]:
        """Get top-level comments for a video.

        The ceiling is checked before each page is requested, so the result can
        exceed ``max_comments`` by up to one page. Any failure stops pagination
        and raises FetchError carrying what was collected so far.
        """
        comments: List[Comment] = []
        next_page_token = ""
        pages = 0

        try:
            if self.youtube is None:
                self._init_youtube()

            while len(comments) < max_comments:
                response = self._list_page(video_id, next_page_token)
                pages += 1

                for item in response.get("items") or []:
                    comments.append(self._to_comment(item))

                next_page_token = response.get("nextPageToken")
                if not next_page_token:
                    break

        except ConfigurationError as e:
            raise FetchError(str(e), comments) from e
        except HttpError as e:
            logger.error(f"YouTube comments fetch failed after {pages} pages: {e}")
            raise FetchError(f"YouTube API error: {e}", comments) from e
        except Exception as e:
            logger.error(f"Error fetching comments for video {video_id}: {e}")
            raise FetchError(f"Error fetching comments: {e}", comments) from e

        logger.info(f"Retrieved {len(comments)} comments for video {video_id} in {pages} pages")
        return comments
