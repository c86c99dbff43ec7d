"""
Search commands for nexus-tool CLI.

This module provides the search and list-packages commands.
"""

import json
from typing import List, Optional

import click

from ..models.nexus_api import SearchItem
from ..utils import setup_logging
from ..utils.error_handling import with_error_handling
from .common import create_client


@with_error_handling("search", exit_on_error=True)
def run_search(ctx: click.Context, repository: str, package: Optional[str], version: Optional[str]) -> List[SearchItem]:
    """Run a paginated search with a client built from the group options."""
    with create_client(ctx) as client:
        return client.search(repository, package, version)


@with_error_handling("list packages", exit_on_error=True)
def run_list_packages(ctx: click.Context, repository: str) -> List[str]:
    """List package names with a client built from the group options."""
    with create_client(ctx) as client:
        return client.list_packages(repository)


@click.command()
@click.argument("repository")
@click.argument("package", required=False)
@click.argument("version", required=False)
@click.option("--json", "as_json", is_flag=True, help="Print the full search items as JSON")
@click.pass_context
def search(
    ctx: click.Context, repository: str, package: Optional[str], version: Optional[str], as_json: bool
) -> None:
    """Search a Nexus repository (e.g. 'pypi-internal document-store 0.2.1').

    PACKAGE and VERSION are optional; leaving them out matches everything.
    """
    setup_logging(ctx.obj["debug"])

    items = run_search(ctx, repository, package, version)

    if as_json:
        click.echo(json.dumps([item.model_dump(mode="json", by_alias=True) for item in items], indent=2))
        return

    if not items:
        click.echo(f"No package found for repository={repository} name={package or ''} version={version or ''}")
        return

    for item in items:
        name = f"{item.group}/{item.name}" if item.group else item.name
        click.echo(f"{name} {item.version} ({item.format}, {len(item.assets)} asset(s))")


@click.command("list-packages")
@click.argument("repository")
@click.pass_context
def list_packages(ctx: click.Context, repository: str) -> None:
    """List the package names in a Nexus repository, one per search item."""
    setup_logging(ctx.obj["debug"])

    for name in run_list_packages(ctx, repository):
        click.echo(name)


__all__ = ["search", "list_packages"]
