"""Output formatting utilities for CLI commands.

Consistent JSON and text output for all commands.
"""

import json
import sys
from typing import Any, Dict, List, Optional


def format_json_response(
    status: str,
    message: str = "",
    data: Optional[Dict[str, Any]] = None,
    errors: Optional[List[str]] = None
) -> str:
    """Format a consistent JSON response.

    Example:
        >>> format_json_response("success", "Indexed 3 documents", {"indexed": 3})
        '{"status": "success", "message": "Indexed 3 documents", "data": {"indexed": 3}, "errors": []}'
    """
    response = {
        "status": status,
        "message": message,
        "data": data or {},
        "errors": errors or []
    }
    return json.dumps(response, indent=2)


def print_json(
    status: str,
    message: str = "",
    data: Optional[Dict[str, Any]] = None,
    errors: Optional[List[str]] = None
):
    """Print JSON response to stdout."""
    print(format_json_response(status, message, data, errors))


def print_error(message: str, json_output: bool = False):
    """Print error message with [ERROR] prefix (stderr in text mode)."""
    if json_output:
        print_json("error", f"[ERROR] {message}", errors=[message])
    else:
        print(f"[ERROR] {message}", file=sys.stderr)


def print_info(message: str, json_output: bool = False):
    """Print info message with [INFO] prefix; skipped in JSON mode."""
    if not json_output:
        print(f"[INFO] {message}")


def print_success(message: str, json_output: bool = False, data: Optional[Dict[str, Any]] = None):
    """Print success message."""
    if json_output:
        print_json("success", message, data=data)
    else:
        print(message)
