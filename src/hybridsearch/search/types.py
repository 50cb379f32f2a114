"""Value types shared by the query builder, decoder and orchestrator."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class SearchMode(Enum):
    """Retrieval mode. The value doubles as the ranking profile name."""
    KEYWORD = "keyword"
    SEMANTIC = "semantic"
    HYBRID = "hybrid"

    @property
    def needs_text(self) -> bool:
        return self in (SearchMode.KEYWORD, SearchMode.HYBRID)

    @property
    def needs_embedding(self) -> bool:
        return self in (SearchMode.SEMANTIC, SearchMode.HYBRID)


@dataclass(frozen=True)
class QueryRequest:
    """A single retrieval request.

    Attributes:
        mode: Which retrieval mode to run
        query: Free-text query (keyword/hybrid; ignored for semantic)
        embedding: Query vector (semantic/hybrid)
        limit: Maximum number of hits to return
    """
    mode: SearchMode
    query: Optional[str] = None
    embedding: Optional[Tuple[float, ...]] = None
    limit: int = 10


@dataclass(frozen=True)
class QueryDescriptor:
    """Structured query expression plus bound parameters.

    Only the transport reads this, through to_request_body().
    """
    yql: str
    ranking: str
    hits: int
    query: Optional[str] = None
    tensors: Mapping[str, Tuple[float, ...]] = field(default_factory=dict)

    def to_request_body(self) -> Dict[str, Any]:
        """Render the search API request body.

        Tensors are bound as ``input.query(<name>)`` parameters holding
        ordered numeric arrays.
        """
        body: Dict[str, Any] = {
            "yql": self.yql,
            "ranking": self.ranking,
            "hits": self.hits,
        }
        if self.query is not None:
            body["query"] = self.query
        for name, values in self.tensors.items():
            body[f"input.query({name})"] = list(values)
        return body


@dataclass(frozen=True)
class RankedResult:
    """One ranked hit.

    Attributes:
        id: Document identifier
        title: Document title
        content: Body text
        category: Category label
        relevance: Backend relevance score (higher is better, not bounded to [0, 1])
    """
    id: str
    title: str
    content: str
    category: str
    relevance: float = 0.0
