"""Mode-specific YQL construction for keyword, semantic and hybrid search."""

import logging
from typing import Sequence

from ..embeddings.synthesizer import EMBEDDING_DIMENSION
from ..errors import InvalidRequest
from .types import QueryDescriptor, QueryRequest, SearchMode

logger = logging.getLogger(__name__)

EMBEDDING_FIELD = "embedding"
QUERY_TENSOR = "query_embedding"

YQL_PREFIX = "select * from sources * where "
LEXICAL_EXPRESSION = "userQuery()"


def nearest_neighbor_expression(target_hits: int) -> str:
    """Nearest-neighbor term over the embedding field."""
    return (
        f"{{targetHits: {target_hits}}}"
        f"nearestNeighbor({EMBEDDING_FIELD},{QUERY_TENSOR})"
    )


def validate_request(request: QueryRequest, dimensions: int = EMBEDDING_DIMENSION) -> None:
    """Check the request against its mode's preconditions.

    Raises:
        InvalidRequest: If a required field is missing or empty, the limit
            is not a positive integer, or the embedding has the wrong
            dimension
    """
    if not isinstance(request.limit, int) or isinstance(request.limit, bool):
        raise InvalidRequest(f"limit must be an integer, got {request.limit!r}")
    if request.limit <= 0:
        raise InvalidRequest(f"limit must be positive, got {request.limit}")

    if request.mode.needs_text:
        if not request.query:
            raise InvalidRequest(f"{request.mode.value} search requires query text")

    if request.mode.needs_embedding:
        if not request.embedding:
            raise InvalidRequest(f"{request.mode.value} search requires an embedding")

    if request.embedding is not None and len(request.embedding) > 0:
        _check_dimensions(request.embedding, dimensions)


def _check_dimensions(embedding: Sequence[float], dimensions: int) -> None:
    if len(embedding) != dimensions:
        raise InvalidRequest(
            f"embedding must have {dimensions} dimensions, got {len(embedding)}"
        )


def build_query(
    request: QueryRequest,
    target_hits_multiplier: int = 1,
    dimensions: int = EMBEDDING_DIMENSION,
) -> QueryDescriptor:
    """Build the query descriptor for a request.

    Keyword:  lexical match over all indexed text fields.
    Semantic: a single nearest-neighbor term over the embedding field.
    Hybrid:   lexical OR nearest-neighbor, combined by the ranking profile.

    The nearest-neighbor targetHits is limit * target_hits_multiplier
    (1x by default, so it equals the limit).

    Args:
        request: Query request to translate
        target_hits_multiplier: Over-fetch factor for nearest-neighbor candidates
        dimensions: Expected embedding length

    Returns:
        QueryDescriptor ready for the transport

    Raises:
        InvalidRequest: If the request violates its mode's preconditions
    """
    if target_hits_multiplier < 1:
        raise InvalidRequest(
            f"target_hits_multiplier must be >= 1, got {target_hits_multiplier}"
        )
    validate_request(request, dimensions)

    mode = request.mode
    target_hits = request.limit * target_hits_multiplier

    if mode is SearchMode.KEYWORD:
        where = LEXICAL_EXPRESSION
    elif mode is SearchMode.SEMANTIC:
        where = nearest_neighbor_expression(target_hits)
    else:
        where = f"{LEXICAL_EXPRESSION} or ({nearest_neighbor_expression(target_hits)})"

    tensors = {}
    if mode.needs_embedding:
        tensors[QUERY_TENSOR] = tuple(float(v) for v in request.embedding)

    descriptor = QueryDescriptor(
        yql=YQL_PREFIX + where,
        ranking=mode.value,
        hits=request.limit,
        query=request.query if mode.needs_text else None,
        tensors=tensors,
    )
    logger.debug(f"Built {mode.value} query: {descriptor.yql}")
    return descriptor
