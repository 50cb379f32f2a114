"""Feed documents into the index through the document API."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..embeddings.synthesizer import EmbeddingProvider
from ..errors import BackendError
from ..schema.document import Document, document_from_dict
from ..transport.client import VespaTransport

logger = logging.getLogger(__name__)


@dataclass
class FeedReport:
    """Outcome of a feed run."""
    indexed: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.indexed) + len(self.failed)


def load_documents(path: Path, embedder: EmbeddingProvider) -> List[Document]:
    """Read documents from a JSON file.

    The file holds either a JSON array of document objects or an object
    with a 'documents' array. Each object needs an 'id'; 'title',
    'content' and 'category' are optional.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid JSON or has the wrong shape
    """
    if not path.exists():
        raise FileNotFoundError(f"Document file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("documents")
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of documents")

    documents = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"Document {i} in {path} is not an object")
        documents.append(document_from_dict(item, embedder))

    logger.info(f"Loaded {len(documents)} documents from {path}")
    return documents


def feed_documents(
    transport: VespaTransport,
    documents: Iterable[Document],
    timeout: Optional[float] = None
) -> FeedReport:
    """Write documents one by one, collecting per-document failures.

    A failed document does not stop the run; every failure is recorded in
    the report with its status and response body.

    Args:
        transport: Transport with the document API
        documents: Documents to write
        timeout: Per-request timeout in seconds

    Returns:
        FeedReport with indexed ids and failures
    """
    report = FeedReport()

    for doc in documents:
        try:
            response = transport.feed_document(doc, timeout=timeout)
        except BackendError as e:
            logger.error(f"Failed to index {doc.id}: {e}")
            report.failed[doc.id] = str(e)
            continue

        if response.ok:
            logger.info(f"Document indexed successfully: {doc.id}")
            report.indexed.append(doc.id)
        else:
            message = f"Status: {response.status_code}, Response: {response.body}"
            logger.error(f"Failed to index {doc.id}. {message}")
            report.failed[doc.id] = message

    return report
