"""Decode search API responses into ranked results."""

import json
import logging
from typing import Any, List, Mapping

from ..errors import MalformedResponse
from .types import RankedResult

logger = logging.getLogger(__name__)

RESULT_FIELDS = ("id", "title", "content", "category")


def decode_response(raw: Mapping[str, Any]) -> List[RankedResult]:
    """Convert a parsed search response into ranked results.

    Expected shape:
        {"root": {"children": [{"fields": {...}, "relevance": 0.87}, ...]}}

    Backend order is preserved; no re-ranking, dedup or filtering.
    A root without children (or with an empty list) is a normal no-match
    outcome and yields an empty list.

    Args:
        raw: Parsed JSON response

    Returns:
        List of RankedResult in backend rank order

    Raises:
        MalformedResponse: If the root container is missing or hits are not objects
    """
    if not isinstance(raw, Mapping):
        raise MalformedResponse(f"Response is not a JSON object: {type(raw).__name__}")

    root = raw.get("root")
    if not isinstance(root, Mapping):
        raise MalformedResponse("Response has no 'root' result container")

    # Degraded coverage and soft timeouts are reported alongside hits
    for error in root.get("errors") or []:
        logger.warning(f"Backend reported: {error}")

    children = root.get("children")
    if children is None:
        return []
    if not isinstance(children, list):
        raise MalformedResponse("'root.children' is not a list")

    return [_decode_hit(i, hit) for i, hit in enumerate(children)]


def _decode_hit(position: int, hit: Any) -> RankedResult:
    if not isinstance(hit, Mapping):
        raise MalformedResponse(f"Hit {position} is not an object")

    fields = hit.get("fields")
    if not isinstance(fields, Mapping):
        fields = {}

    values = {name: _as_text(fields.get(name)) for name in RESULT_FIELDS}

    relevance = hit.get("relevance")
    try:
        relevance = float(relevance) if relevance is not None else 0.0
    except (TypeError, ValueError):
        raise MalformedResponse(f"Hit {position} has non-numeric relevance: {relevance!r}")

    return RankedResult(relevance=relevance, **values)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def parse_response_body(body: str) -> List[RankedResult]:
    """Parse raw JSON response text and decode it.

    Raises:
        MalformedResponse: If the body is not valid JSON or lacks the root container
    """
    try:
        raw = json.loads(body)
    except (TypeError, ValueError) as e:
        raise MalformedResponse(f"Response body is not valid JSON: {e}") from e
    return decode_response(raw)
