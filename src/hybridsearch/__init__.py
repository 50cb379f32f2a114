"""hybridsearch: keyword, semantic and hybrid retrieval against a Vespa index."""

__version__ = "0.1.0"
