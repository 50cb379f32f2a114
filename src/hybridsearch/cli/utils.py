"""CLI utility functions."""

import logging
from pathlib import Path
from typing import Optional

from ..config import HybridSearchConfig, resolve_config
from ..transport.client import VespaTransport

logger = logging.getLogger(__name__)


def load_cli_config(config_path: Optional[str] = None) -> HybridSearchConfig:
    """Resolve configuration for a CLI command.

    Priority: --config path > HYBRIDSEARCH_CONFIG > XDG default; the
    VESPA_ENDPOINT environment variable overrides the endpoint.
    """
    return resolve_config(Path(config_path) if config_path else None)


def create_transport(
    config: HybridSearchConfig,
    timeout: Optional[float] = None
) -> VespaTransport:
    """Create VespaTransport with proper timeout configuration.

    Args:
        config: Effective configuration
        timeout: Timeout in seconds (overrides config)

    Returns:
        Configured VespaTransport instance
    """
    vespa_config = config.vespa
    if timeout is not None:
        vespa_config = vespa_config.model_copy(update={"timeout": timeout})

    logger.debug(f"Creating VespaTransport: endpoint={vespa_config.endpoint}, timeout={vespa_config.timeout}s")

    return VespaTransport(vespa_config)
