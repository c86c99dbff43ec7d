"""
Unified CLI entry point for nexus-tool operations using Click.

This module provides the main CLI group and shared options.
"""

import sys
from typing import Optional

import click

from . import download, repositories, search
from .._version import __version__


# ============================================================================
# CLI Group
# ============================================================================


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="nexus-tool")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to nexus-tool config file (default: ~/.config/nexus/cli.toml if present)",
)
@click.option(
    "--base-url",
    help="Nexus base URL (e.g., https://nexus.example.com). Overrides the config file and NEXUS_URL.",
)
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP logs)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], base_url: Optional[str], debug: int) -> None:
    """Nexus Tool - Search and download artifacts from Nexus repositories.

    Credentials are read from NEXUS_TOKEN_NAME and NEXUS_TOKEN_SECRET.
    """
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["base_url"] = base_url
    ctx.obj["debug"] = debug


# Register subcommands
cli.add_command(search.search)
cli.add_command(search.list_packages)
cli.add_command(download.download)
cli.add_command(repositories.list_repositories)


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(130)


__all__ = ["cli", "main"]
