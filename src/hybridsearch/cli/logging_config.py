"""Centralized logging configuration for CLI commands.

Provides three logging levels:
- Default: Clean output, only warnings and errors
- Verbose: Show progress and timings, suppress HTTP client chatter
- Debug: Show everything including library internals
"""

import logging


HTTP_LOGGERS = ('urllib3', 'requests')


def setup_logging_default():
    """Default logging: Clean output, only warnings and errors.

    Suppresses:
    - hybridsearch INFO logs
    - HTTP connection pool output

    Shows:
    - Backend warnings (degraded coverage, retries)
    - Errors
    """
    logging.basicConfig(
        level=logging.WARNING,
        format='%(levelname)s: %(message)s'
    )

    logging.getLogger('hybridsearch').setLevel(logging.WARNING)
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(logging.ERROR)


def setup_logging_verbose():
    """Verbose logging: Show search progress and result counts.

    Suppresses:
    - HTTP connection pool DEBUG output
    """
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    logging.getLogger('hybridsearch').setLevel(logging.INFO)
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_logging_debug():
    """Debug logging: Show everything including request bodies and HTTP internals.

    Use for:
    - Inspecting generated YQL
    - Troubleshooting endpoint connectivity
    """
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(name)s - %(levelname)s: %(message)s'
    )

    logging.getLogger('hybridsearch').setLevel(logging.DEBUG)
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG)


def setup_logging(verbose: bool = False, debug: bool = False):
    """Pick the logging level from CLI flags (debug wins over verbose)."""
    if debug:
        setup_logging_debug()
    elif verbose:
        setup_logging_verbose()
    else:
        setup_logging_default()
