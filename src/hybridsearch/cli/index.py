"""CLI command for feeding documents into the index."""

import logging
import sys
from pathlib import Path
from typing import Optional

from ..embeddings import VectorSynthesizer
from ..errors import EXIT_ERROR, InvalidRequest
from ..indexing import feed_documents, load_documents
from .logging_config import setup_logging
from .output import print_error, print_info, print_json, print_success
from .utils import create_transport, load_cli_config

logger = logging.getLogger(__name__)


def index_command(
    file: str,
    timeout: Optional[float],
    config_path: Optional[str],
    output_json: bool,
    verbose: bool
):
    """Feed documents from a JSON file.

    Embeddings are synthesized from each document's title and content
    unless the file already provides them.

    Args:
        file: Path to JSON file with a document array
        timeout: Per-request timeout in seconds
        config_path: Optional config file path
        output_json: If True, output JSON format
        verbose: If True, log each document
    """
    setup_logging(verbose=verbose)

    config = load_cli_config(config_path)
    synthesizer = VectorSynthesizer()

    try:
        documents = load_documents(Path(file), synthesizer)
    except (FileNotFoundError, ValueError) as e:
        raise InvalidRequest(str(e)) from e

    print_info(f"Indexing {len(documents)} documents into {config.vespa.endpoint}", output_json)

    with create_transport(config, timeout=timeout) as transport:
        report = feed_documents(transport, documents)

    data = {
        "indexed": report.indexed,
        "failed": report.failed,
        "total": report.total,
    }

    if report.failed:
        message = f"Indexed {len(report.indexed)}/{report.total} documents"
        if output_json:
            print_json("error", message, data=data, errors=list(report.failed.values()))
        else:
            for doc_id, reason in report.failed.items():
                print_error(f"{doc_id}: {reason}")
            print_error(message)
        sys.exit(EXIT_ERROR)

    print_success(f"Indexed {len(report.indexed)} documents", output_json, data=data)
