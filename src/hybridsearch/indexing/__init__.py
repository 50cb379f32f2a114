"""Document ingestion."""

from hybridsearch.indexing.feeder import FeedReport, feed_documents, load_documents

__all__ = [
    "FeedReport",
    "feed_documents",
    "load_documents",
]
