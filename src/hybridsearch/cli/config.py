"""Configuration and diagnostics commands."""

import sys
from pathlib import Path

import click
import yaml

from ..config import HybridSearchConfig, VespaConfig, save_config
from ..errors import EXIT_ERROR
from ..paths import get_config_path
from .output import print_error, print_info, print_json, print_success
from .utils import create_transport, load_cli_config


def show_config(config_path=None, output_json: bool = False):
    """Show the effective configuration and where it came from."""
    config = load_cli_config(config_path)
    source = config_path or get_config_path()

    if output_json:
        print_json("success", data={"source": str(source), "config": config.model_dump(mode='json')})
        return

    print_info(f"Config file: {source}")
    print(yaml.dump(config.model_dump(mode='json'), default_flow_style=False).rstrip())


def doctor(config_path=None, output_json: bool = False) -> bool:
    """Check that the configured endpoint is reachable and healthy.

    Returns:
        True if the endpoint reports itself up
    """
    config = load_cli_config(config_path)

    with create_transport(config) as transport:
        healthy = transport.health_check()

    if healthy:
        print_success(f"Vespa endpoint is up: {config.vespa.endpoint}", output_json,
                      data={"endpoint": config.vespa.endpoint, "healthy": True})
    else:
        print_error(f"Vespa endpoint is not healthy: {config.vespa.health_url}", output_json)
    return healthy


def init_config(config_path=None, endpoint=None, force: bool = False, output_json: bool = False) -> bool:
    """Write a config file with default settings.

    Returns:
        True if the file was written
    """
    path = Path(config_path) if config_path else get_config_path()

    if path.exists() and not force:
        print_error(f"Config file already exists: {path}", output_json)
        if not output_json:
            print_error("Use --force to overwrite")
        return False

    config = HybridSearchConfig()
    if endpoint:
        config = HybridSearchConfig(vespa=VespaConfig(endpoint=endpoint))

    save_config(config, path)
    print_success(f"Wrote config to {path}", output_json,
                  data={"path": str(path), "config": config.model_dump(mode='json')})
    return True


@click.group(name='config')
def config_group():
    """Show or create configuration"""
    pass


@config_group.command('show')
@click.option('--config', 'config_path', type=click.Path(), help='Config file path')
@click.option('--json', 'output_json', is_flag=True, help='Output JSON format')
def show_command(config_path, output_json):
    """Show the effective configuration"""
    show_config(config_path, output_json)


@config_group.command('init')
@click.option('--config', 'config_path', type=click.Path(), help='Config file path (default: XDG config dir)')
@click.option('--endpoint', help='Vespa endpoint to write (default: http://localhost:8080)')
@click.option('--force', is_flag=True, help='Overwrite an existing config file')
@click.option('--json', 'output_json', is_flag=True, help='Output JSON format')
def init_command(config_path, endpoint, force, output_json):
    """Write a config file with default settings"""
    if not init_config(config_path, endpoint, force, output_json):
        sys.exit(EXIT_ERROR)
