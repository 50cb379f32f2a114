"""Result formatters for search output."""

import json
from typing import List, Optional

from .types import RankedResult


def format_text_results(
    query: str,
    mode: str,
    results: List[RankedResult],
    verbose: bool = False
) -> str:
    """Format search results for human-readable terminal display.

    Output format:
        Hybrid search for: "query"
        Found N results

        [1] Relevance: 0.8123 | Category: AI/ML | ID: doc1
            Introduction to Machine Learning

            Machine learning is a subset of artificial intelligence...

    Args:
        query: Original search query
        mode: Search mode name (keyword, semantic, hybrid)
        results: Ranked results
        verbose: If True, show longer snippets

    Returns:
        Formatted string for terminal output
    """
    lines = []

    lines.append(f'{mode.capitalize()} search for: "{query}"')
    lines.append(f"Found {len(results)} result{'s' if len(results) != 1 else ''}")
    lines.append("")

    for i, result in enumerate(results, 1):
        header = f"[{i}] Relevance: {result.relevance:.4f}"
        if result.category:
            header += f" | Category: {result.category}"
        if result.id:
            header += f" | ID: {result.id}"
        lines.append(header)

        if result.title:
            lines.append(f"    {result.title}")
        lines.append("")

        snippet = extract_snippet(result.content, max_length=400 if verbose else 200)
        if snippet:
            lines.append(f"    {snippet}")
            lines.append("")

    return "\n".join(lines)


def format_json_results(
    query: str,
    mode: str,
    results: List[RankedResult],
    verbose: bool = False
) -> str:
    """Format search results as JSON.

    Output structure:
        {
            "query": "search query",
            "mode": "hybrid",
            "total_results": 5,
            "results": [
                {"id": "doc1", "title": "...", "category": "...",
                 "relevance": 0.81, "content": "..."}
            ]
        }

    Content is truncated to 500 characters unless verbose.
    """
    content_length = None if verbose else 500

    output = {
        "query": query,
        "mode": mode,
        "total_results": len(results),
        "results": [
            {
                "id": r.id,
                "title": r.title,
                "category": r.category,
                "relevance": r.relevance,
                "content": r.content[:content_length] if content_length else r.content,
            }
            for r in results
        ]
    }

    return json.dumps(output, indent=2)


def extract_snippet(content: str, max_length: int = 200) -> str:
    """Extract content snippet with word boundary awareness.

    Truncates at word boundaries to avoid cutting off mid-word.

    Args:
        content: Full text content
        max_length: Maximum character length

    Returns:
        Truncated snippet (with "..." if truncated)
    """
    if len(content) <= max_length:
        return content

    snippet = content[:max_length]
    last_space = snippet.rfind(' ')

    # Only truncate at word boundary if we're at least 80% of max_length
    if last_space > max_length * 0.8:
        snippet = snippet[:last_space]

    return snippet + "..."


def format_summary(
    query: str,
    mode: str,
    results: List[RankedResult],
    execution_time_ms: Optional[float] = None
) -> str:
    """Format a summary of search results for verbose mode."""
    lines = [
        "Search Summary",
        "=" * 50,
        f"Query:        {query}",
        f"Mode:         {mode}",
        f"Results:      {len(results)}",
    ]

    if results:
        relevances = [r.relevance for r in results]
        lines.extend([
            f"Max Score:    {max(relevances):.4f}",
            f"Min Score:    {min(relevances):.4f}",
        ])

    if execution_time_ms is not None:
        lines.append(f"Time:         {execution_time_ms:.1f}ms")

    lines.append("=" * 50)

    return "\n".join(lines)
