"""
Repository commands for nexus-tool CLI.
"""

import json
from typing import List

import click

from ..models.nexus_api import Repository
from ..utils import setup_logging
from ..utils.error_handling import with_error_handling
from .common import create_client


@with_error_handling("list repositories", exit_on_error=True)
def run_list_repositories(ctx: click.Context) -> List[Repository]:
    """List repositories with a client built from the group options."""
    with create_client(ctx) as client:
        return client.list_repositories()


@click.command("list-repositories")
@click.option("--json", "as_json", is_flag=True, help="Print the full repository descriptors as JSON")
@click.pass_context
def list_repositories(ctx: click.Context, as_json: bool) -> None:
    """List the repositories configured on the Nexus server."""
    setup_logging(ctx.obj["debug"])

    repositories = run_list_repositories(ctx)

    if as_json:
        click.echo(json.dumps([repo.model_dump(mode="json") for repo in repositories], indent=2))
        return

    for repo in repositories:
        click.echo(f"{repo.name} {repo.format} {repo.url}")


__all__ = ["list_repositories"]
