"""hybridsearch directory and path management.

XDG Base Directory Specification compliant:
- Config: ~/.config/hybridsearch/config.yaml
"""

import os
from pathlib import Path


CONFIG_FILENAME = "config.yaml"


def get_config_dir() -> Path:
    """Get the config directory (XDG-compliant: ~/.config/hybridsearch).

    Does not create the directory; a missing config means defaults.

    Returns:
        Path to ~/.config/hybridsearch directory
    """
    config_home = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
    return Path(config_home) / "hybridsearch"


def get_config_path() -> Path:
    """Get the config file path.

    HYBRIDSEARCH_CONFIG takes precedence over the XDG location.
    """
    override = os.environ.get("HYBRIDSEARCH_CONFIG")
    if override:
        return Path(override).expanduser()
    return get_config_dir() / CONFIG_FILENAME
