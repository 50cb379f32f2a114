"""Exception classes for hybridsearch.

Each exception carries the exit code the CLI uses when it escapes a command.

Exit Codes:
- 0: Success
- 1: General error (backend failures, malformed responses)
- 2: Invalid arguments (bad requests, bad configuration)
"""

from typing import Optional


EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_INVALID_ARGS = 2


class HybridSearchError(Exception):
    """Base exception for hybridsearch errors.

    Default exit code is EXIT_ERROR (1).
    """
    exit_code = EXIT_ERROR


class InvalidRequest(HybridSearchError, ValueError):
    """Caller-supplied request violates a precondition.

    Examples:
    - Missing query text for keyword or hybrid search
    - Missing or empty embedding for semantic or hybrid search
    - Non-integer or non-positive result limit
    - Embedding with the wrong number of dimensions

    Never retried. Exit code: 2
    """
    exit_code = EXIT_INVALID_ARGS


class MalformedResponse(HybridSearchError):
    """Backend response is missing its root result container or is not JSON."""
    pass


class BackendError(HybridSearchError):
    """Transport reported a non-success status.

    Attributes:
        status_code: HTTP status, or None when no response was received
            (connection failure after retries)
        body: Raw response body (or the connection error text)
    """

    def __init__(self, status_code: Optional[int], body: str):
        self.status_code = status_code
        self.body = body
        if status_code is None:
            message = f"Backend unreachable: {body}"
        else:
            message = f"Backend request failed. Status: {status_code}, Response: {body}"
        super().__init__(message)


class ConfigError(HybridSearchError):
    """Configuration file is missing or invalid."""
    exit_code = EXIT_INVALID_ARGS
