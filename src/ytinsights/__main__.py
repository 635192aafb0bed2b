"""Main entry point for YouTube Sentiment Insights."""

from .cli import main

if __name__ == "__main__":
    main()
