"""Search orchestration: build query, send through the transport, decode."""

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from ..errors import BackendError
from .decoder import parse_response_body
from .query_builder import build_query
from .types import QueryRequest, RankedResult, SearchMode

if TYPE_CHECKING:
    from ..transport.client import Transport

logger = logging.getLogger(__name__)


def _as_embedding(embedding: Optional[Sequence[float]]):
    return tuple(embedding) if embedding is not None else None


class SearchOrchestrator:
    """Runs keyword, semantic and hybrid searches over an injected transport.

    Holds no mutable state besides its collaborators, so one instance can
    serve concurrent callers. No retries happen here: a transport failure
    is terminal for that call.
    """

    def __init__(self, transport: "Transport", target_hits_multiplier: int = 1):
        """Initialize orchestrator.

        Args:
            transport: Long-lived transport to the search endpoint
            target_hits_multiplier: Nearest-neighbor over-fetch factor (1 = targetHits equals limit)
        """
        self.transport = transport
        self.target_hits_multiplier = target_hits_multiplier

    def search(self, request: QueryRequest, timeout: Optional[float] = None) -> List[RankedResult]:
        """Execute one request.

        Args:
            request: Query request
            timeout: Caller deadline, passed unchanged to the transport

        Returns:
            Ranked results in backend order (empty list when nothing matched)

        Raises:
            InvalidRequest: If the request violates its mode's preconditions
            BackendError: If the transport reports a non-success status
            MalformedResponse: If the response lacks its root container
        """
        descriptor = build_query(request, self.target_hits_multiplier)

        logger.info(f"Running {request.mode.value} search (limit={request.limit})")
        response = self.transport.search(descriptor, timeout=timeout)

        if not response.ok:
            raise BackendError(response.status_code, response.body)

        results = parse_response_body(response.body)
        logger.info(f"{request.mode.value} search returned {len(results)} results")
        return results

    def keyword_search(
        self,
        query: str,
        limit: int,
        timeout: Optional[float] = None
    ) -> List[RankedResult]:
        """Lexical search over all indexed text fields."""
        request = QueryRequest(mode=SearchMode.KEYWORD, query=query, limit=limit)
        return self.search(request, timeout=timeout)

    def semantic_search(
        self,
        embedding: Sequence[float],
        limit: int,
        timeout: Optional[float] = None
    ) -> List[RankedResult]:
        """Nearest-neighbor search over the embedding field."""
        request = QueryRequest(
            mode=SearchMode.SEMANTIC,
            embedding=_as_embedding(embedding),
            limit=limit,
        )
        return self.search(request, timeout=timeout)

    def hybrid_search(
        self,
        query: str,
        embedding: Sequence[float],
        limit: int,
        timeout: Optional[float] = None
    ) -> List[RankedResult]:
        """Lexical OR nearest-neighbor, combined by the hybrid ranking profile."""
        request = QueryRequest(
            mode=SearchMode.HYBRID,
            query=query,
            embedding=_as_embedding(embedding),
            limit=limit,
        )
        return self.search(request, timeout=timeout)

    def explain(self, request: QueryRequest) -> Dict[str, Any]:
        """Show the request body a search would send, without sending it.

        Raises:
            InvalidRequest: If the request violates its mode's preconditions
        """
        return build_query(request, self.target_hits_multiplier).to_request_body()
