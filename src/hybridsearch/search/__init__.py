"""Keyword, semantic and hybrid search against a Vespa index."""

from .types import QueryDescriptor, QueryRequest, RankedResult, SearchMode
from .query_builder import build_query, validate_request
from .decoder import decode_response, parse_response_body
from .searcher import SearchOrchestrator
from .formatter import (
    format_text_results,
    format_json_results,
    extract_snippet,
    format_summary
)

__all__ = [
    # Types
    "QueryDescriptor",
    "QueryRequest",
    "RankedResult",
    "SearchMode",
    # Query builder
    "build_query",
    "validate_request",
    # Decoder
    "decode_response",
    "parse_response_body",
    # Orchestrator
    "SearchOrchestrator",
    # Formatter
    "format_text_results",
    "format_json_results",
    "extract_snippet",
    "format_summary",
]
