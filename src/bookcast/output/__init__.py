"""Feed output for bookcast."""

from bookcast.output.writer import DEFAULT_FEED_FILENAME, FeedWriter

__all__ = ["DEFAULT_FEED_FILENAME", "FeedWriter"]
