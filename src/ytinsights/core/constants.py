"""Constants and configuration values for YouTube Sentiment Insights."""

# Comment Source Constants
class YouTubeConstants:
    """Constants related to the YouTube Data API."""

    API_SERVICE_NAME = "youtube"
    API_VERSION = "v3"
    PAGE_SIZE = 100  # maxResults per commentThreads call (API maximum)
    MAX_COMMENTS = 1000  # ceiling checked before each page
    UNKNOWN_AUTHOR = "Unknown"
    WATCH_URL_PATTERN = r"^https://(?:www\.)?youtube\.com/watch\?v=([A-Za-z0-9_-]{11})"

# Backend Endpoint Constants
class EndpointConstants:
    """Paths on the prediction backend."""

    PREDICT = "/predict_with_timestamps"
    CHART = "/generate_chart"
    WORDCLOUD = "/generate_wordcloud"
    TREND_GRAPH = "/generate_trend_graph"

# Sentiment Constants
class SentimentConstants:
    """Sentiment values and their display labels."""

    POSITIVE = "1"
    NEUTRAL = "0"
    NEGATIVE = "-1"
    BUCKETS = (POSITIVE, NEUTRAL, NEGATIVE)

    LABELS = {
        POSITIVE: "Positive",
        NEUTRAL: "Neutral",
        NEGATIVE: "Negative",
    }
    UNKNOWN_LABEL = "Unknown"

    SCORE_SCALE = 10  # normalized score is reported out of 10
    DECIMALS = 2

# User-facing Messages
class MessageConstants:
    """Status lines shown to the user."""

    INVALID_URL = "This is not a valid YouTube video URL."
    MISSING_API_KEY = "Missing YouTube API key."
    REMOTE_CONFIG_UNAVAILABLE = "Using local config settings (remote config.json unavailable)"
    FETCH_FAILED = "Error fetching comments."
    NO_COMMENTS = "No comments found."
    PREDICTION_FAILED = "Error fetching sentiment predictions."
    CHART_FAILED = "Error loading sentiment chart."
    WORDCLOUD_FAILED = "Error loading word cloud."
    TREND_GRAPH_FAILED = "Error loading trend graph."

# File and Path Constants
class FileConstants:
    """Constants for file operations."""

    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    IMAGE_NAMES = {
        "chart": "sentiment_chart.png",
        "wordcloud": "wordcloud.png",
        "trend_graph": "trend_graph.png",
    }
