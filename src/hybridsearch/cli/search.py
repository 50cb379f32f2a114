"""CLI command for keyword, semantic and hybrid search."""

import json
import logging
import time
from typing import Optional

from rich.console import Console

from ..embeddings import VectorSynthesizer
from ..errors import InvalidRequest
from ..search import (
    QueryRequest,
    SearchMode,
    SearchOrchestrator,
    format_json_results,
    format_summary,
    format_text_results,
)
from .logging_config import setup_logging
from .utils import create_transport, load_cli_config

console = Console()
logger = logging.getLogger(__name__)


def search_command(
    mode: str,
    query: str,
    limit: Optional[int],
    target_hits_multiplier: Optional[int],
    timeout: Optional[float],
    config_path: Optional[str],
    explain: bool,
    output_json: bool,
    verbose: bool,
    debug: bool = False
):
    """Run one search and print the results.

    Semantic and hybrid modes embed the query text with the placeholder
    synthesizer.

    Args:
        mode: 'keyword', 'semantic' or 'hybrid'
        query: Search query text
        limit: Maximum number of results (config default if None)
        target_hits_multiplier: Nearest-neighbor over-fetch factor (config default if None)
        timeout: Request timeout in seconds (config default if None)
        config_path: Optional config file path
        explain: If True, print the request body instead of sending it
        output_json: If True, output JSON format
        verbose: If True, show summary and progress logging
        debug: If True, show library logging

    Raises:
        InvalidRequest: For empty queries or non-positive limits
        BackendError: If the backend rejects the request or is unreachable
        MalformedResponse: If the backend response cannot be decoded
    """
    setup_logging(verbose=verbose, debug=debug)

    if not query or not query.strip():
        raise InvalidRequest("Query text must not be empty")

    config = load_cli_config(config_path)
    search_mode = SearchMode(mode)
    limit = limit if limit is not None else config.search.default_limit
    multiplier = (
        target_hits_multiplier
        if target_hits_multiplier is not None
        else config.search.target_hits_multiplier
    )

    embedding = None
    if search_mode.needs_embedding:
        synthesizer = VectorSynthesizer()
        embedding = synthesizer.embed(query)

    request = QueryRequest(
        mode=search_mode,
        query=query if search_mode.needs_text else None,
        embedding=embedding,
        limit=limit,
    )

    with create_transport(config, timeout=timeout) as transport:
        orchestrator = SearchOrchestrator(transport, target_hits_multiplier=multiplier)

        if explain:
            print(json.dumps(orchestrator.explain(request), indent=2))
            return

        logger.info(f"Searching {config.vespa.endpoint} ({mode}) for: \"{query}\"")
        start_time = time.time()
        results = orchestrator.search(request)
        execution_time_ms = (time.time() - start_time) * 1000

    if output_json:
        # Use print() not console.print() for JSON to avoid Rich wrapping
        print(format_json_results(query, mode, results, verbose=verbose))
        return

    if verbose:
        console.print(format_summary(query, mode, results, execution_time_ms=execution_time_ms), markup=False)
        console.print()

    console.print(format_text_results(query, mode, results, verbose=verbose), markup=False)
