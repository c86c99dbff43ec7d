"""
Helpers shared by the nexus-tool CLI commands.
"""

import logging
from pathlib import Path
from typing import Any, Optional

import click

from ..api import NexusClient
from ..utils.constants import DEFAULT_CONFIG_PATH


def create_client(ctx: click.Context, **overrides: Any) -> NexusClient:
    """
    Create a NexusClient from the group-level options.

    Precedence: command line flags, then the config file (--config, or the
    default location when it exists), then the NEXUS_URL environment variable.

    Args:
        ctx: Click context carrying the group options in ctx.obj
        **overrides: Extra ClientConfig fields set by the command; None values are ignored
    """
    config: Optional[str] = ctx.obj.get("config")
    settings = {key: value for key, value in overrides.items() if value is not None}
    if ctx.obj.get("base_url"):
        settings["base_url"] = ctx.obj["base_url"]

    if not config and Path(DEFAULT_CONFIG_PATH).expanduser().exists():
        config = DEFAULT_CONFIG_PATH

    if config:
        logging.debug("Loading client configuration from %s", config)
        return NexusClient.create_from_config_file(config, **settings)
    return NexusClient.from_environment(**settings)


__all__ = ["create_client"]
