"""Configuration management for hybridsearch."""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError
from .paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "http://localhost:8080"
ENDPOINT_ENV_VAR = "VESPA_ENDPOINT"

DOCUMENT_API_PATH = "/document/v1/doc/document/docid/"
SEARCH_API_PATH = "/search/"
HEALTH_API_PATH = "/state/v1/health"


class VespaConfig(BaseModel):
    """Vespa endpoint configuration."""
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = Field(default=10.0, gt=0)  # Per-request timeout in seconds
    max_retries: int = Field(default=3, ge=1)  # Attempts on connection errors

    @property
    def document_url(self) -> str:
        return self.endpoint.rstrip("/") + DOCUMENT_API_PATH

    @property
    def search_url(self) -> str:
        return self.endpoint.rstrip("/") + SEARCH_API_PATH

    @property
    def health_url(self) -> str:
        return self.endpoint.rstrip("/") + HEALTH_API_PATH


class SearchConfig(BaseModel):
    """Search defaults."""
    default_limit: int = Field(default=10, gt=0)
    # Nearest-neighbor targetHits = limit * multiplier
    target_hits_multiplier: int = Field(default=1, ge=1)


class HybridSearchConfig(BaseModel):
    """Root configuration."""
    vespa: VespaConfig = Field(default_factory=VespaConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)


def load_config(config_path: Path) -> HybridSearchConfig:
    """Load and validate configuration file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated HybridSearchConfig instance

    Raises:
        ConfigError: If config file doesn't exist or is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    try:
        return HybridSearchConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {config_path}: {e}") from e


def save_config(config: HybridSearchConfig, config_path: Path):
    """Save configuration to file.

    Args:
        config: Configuration to save
        config_path: Path to save YAML file
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, 'w') as f:
        yaml.dump(config.model_dump(mode='json'), f, default_flow_style=False)


def resolve_config(config_path: Optional[Path] = None) -> HybridSearchConfig:
    """Build the effective configuration.

    Priority for the endpoint: VESPA_ENDPOINT env > config file > default.
    A missing config file is not an error; defaults are used.

    Args:
        config_path: Path to config file (defaults to get_config_path())

    Returns:
        Effective HybridSearchConfig
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists():
        config = load_config(config_path)
        logger.debug(f"Loaded config from {config_path}")
    else:
        config = HybridSearchConfig()

    env_endpoint = os.environ.get(ENDPOINT_ENV_VAR)
    if env_endpoint:
        logger.debug(f"Using {ENDPOINT_ENV_VAR}={env_endpoint}")
        config = config.model_copy(
            update={"vespa": config.vespa.model_copy(update={"endpoint": env_endpoint})}
        )

    return config
