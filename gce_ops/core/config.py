"""
GCE Ops - Configuration Management

This module manages configuration options for GCE Ops commands,
and resolves project / zone / region defaults from gcloud config.
"""

import subprocess
from dataclasses import dataclass
from typing import Optional

from gce_ops.core.exceptions import ConfigurationError

# Version for usage tracking
VERSION = '1.0.0'

# Fixed delay between operation status queries (seconds)
POLL_INTERVAL_SECONDS = 0.15


@dataclass
class ToolConfig:
    """
    Configuration for one command invocation.

    Example:
        config = ToolConfig(
            project='my-project',
            zone='us-central1-a',
            output_format='json'
        )
    """

    # Location settings (None = resolve from gcloud config)
    project: Optional[str] = None
    zone: Optional[str] = None
    region: Optional[str] = None

    # Waiting settings
    poll_interval: float = POLL_INTERVAL_SECONDS
    show_progress: bool = False

    # Output settings
    output_format: str = 'yaml'  # yaml, json or disable

    # Logging settings
    log_level: str = 'INFO'
    log_file: Optional[str] = None


def create_tool_config(**kwargs) -> ToolConfig:
    """
    Create a tool configuration with custom options.

    Args:
        **kwargs: Configuration options (any field from ToolConfig)

    Returns:
        ToolConfig: Configuration object

    Example:
        config = create_tool_config(
            project='my-project',
            log_level='DEBUG'
        )
    """
    return ToolConfig(**kwargs)


def get_gcloud_config(key: str) -> Optional[str]:
    """
    Read configuration from gcloud config.

    Args:
        key: Config key (e.g., 'core/project', 'compute/zone')

    Returns:
        Config value or None
    """
    try:
        result = subprocess.run(
            ['gcloud', 'config', 'get-value', key],
            capture_output=True,
            text=True,
            timeout=5
        )
        value = result.stdout.strip()
        return value if value and value != '(unset)' else None
    except (subprocess.SubprocessError, FileNotFoundError):
        # gcloud not available or error
        return None


def resolve_project(config: ToolConfig, auth=None) -> str:
    """
    Work out which project to use: flag, gcloud config, then credentials.

    Args:
        config: Tool configuration
        auth: Optional AuthManager (its credentials may name a project)

    Raises:
        ConfigurationError: if no project can be found
    """
    project = config.project or get_gcloud_config('core/project')
    if not project and auth is not None:
        project = auth.get_project()
    if not project:
        raise ConfigurationError(
            'project',
            fix="pass --project or run: gcloud config set project PROJECT_ID"
        )
    return project


def resolve_zone(config: ToolConfig) -> str:
    """Zone from --zone or gcloud config 'compute/zone'."""
    zone = config.zone or get_gcloud_config('compute/zone')
    if not zone:
        raise ConfigurationError(
            'zone',
            fix="pass --zone or run: gcloud config set compute/zone ZONE"
        )
    return zone


def resolve_region(config: ToolConfig) -> str:
    """Region from --region or gcloud config 'compute/region'."""
    region = config.region or get_gcloud_config('compute/region')
    if not region:
        raise ConfigurationError(
            'region',
            fix="pass --region or run: gcloud config set compute/region REGION"
        )
    return region
