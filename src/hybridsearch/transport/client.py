"""HTTP transport to a Vespa endpoint.

One long-lived requests session per transport. Connection errors and
timeouts are retried here with exponential backoff. Status codes are
returned to the caller untouched.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import requests
from tenacity import (
    RetryError,
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..config import VespaConfig
from ..errors import BackendError
from ..schema.document import Document
from ..search.types import QueryDescriptor

logger = logging.getLogger(__name__)

RETRYABLE_ERRORS = (requests.ConnectionError, requests.Timeout)


@dataclass
class TransportResponse:
    """Status code and raw body of one HTTP exchange."""
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(ABC):
    """Sends query descriptors to the search endpoint."""

    @abstractmethod
    def search(
        self,
        descriptor: QueryDescriptor,
        timeout: Optional[float] = None
    ) -> TransportResponse:
        """Execute a search request.

        Args:
            descriptor: Query to send
            timeout: Caller deadline in seconds (transport default if None)
        """


class VespaTransport(Transport):
    """Manages a requests session against a Vespa container endpoint."""

    retry_wait = wait_exponential(multiplier=1, min=1, max=10)

    def __init__(
        self,
        config: Optional[VespaConfig] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize transport.

        Args:
            config: Endpoint, timeout and retry settings (defaults if None)
            session: Pre-built session (a new one is created if None)
        """
        self.config = config or VespaConfig()
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self) -> None:
        """Release pooled connections."""
        self.session.close()

    def _send(self, method: str, url: str, timeout: Optional[float], **kwargs) -> TransportResponse:
        """Send one request, retrying connection failures.

        Raises:
            BackendError: With status_code None once retries are exhausted
        """
        effective_timeout = timeout if timeout is not None else self.config.timeout
        retrying = Retrying(
            stop=stop_after_attempt(self.config.max_retries),
            wait=self.retry_wait,
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            before_sleep=before_sleep_log(logger, logging.WARNING),
        )
        try:
            response = retrying(
                self.session.request, method, url, timeout=effective_timeout, **kwargs
            )
        except RetryError as e:
            cause = e.last_attempt.exception()
            raise BackendError(None, str(cause)) from cause
        except requests.RequestException as e:
            raise BackendError(None, str(e)) from e

        return TransportResponse(status_code=response.status_code, body=response.text)

    def search(
        self,
        descriptor: QueryDescriptor,
        timeout: Optional[float] = None
    ) -> TransportResponse:
        """POST the descriptor as a JSON body to the search API."""
        logger.debug(f"POST {self.config.search_url} ranking={descriptor.ranking} hits={descriptor.hits}")
        return self._send(
            "POST",
            self.config.search_url,
            timeout,
            json=descriptor.to_request_body(),
        )

    def feed_document(
        self,
        document: Document,
        timeout: Optional[float] = None
    ) -> TransportResponse:
        """Write a document through the document API.

        Args:
            document: Document with its embedding
            timeout: Request timeout in seconds

        Returns:
            Transport response (caller checks status)
        """
        url = self.config.document_url + quote(document.id, safe="")
        logger.debug(f"POST {url}")
        return self._send("POST", url, timeout, json=document.to_feed_body())

    def health_check(self) -> bool:
        """Check if the Vespa container reports itself up."""
        try:
            response = self.session.get(self.config.health_url, timeout=2)
        except requests.RequestException:
            return False
        if response.status_code != 200:
            return False
        try:
            data = response.json()
        except ValueError:
            return False
        status = data.get("status") if isinstance(data, dict) else None
        return isinstance(status, dict) and status.get("code") == "up"
