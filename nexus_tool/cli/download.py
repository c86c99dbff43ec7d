"""
Download command for nexus-tool CLI.

This module provides the download command, which fetches every asset of the
matching package versions into a local directory.
"""

from typing import Optional

import click

from ..models.results import DownloadReport
from ..utils import setup_logging
from ..utils.error_handling import log_and_exit, with_error_handling
from .common import create_client


def print_download_report(report: DownloadReport) -> None:
    """Print the downloaded files, then the failures, then a summary."""
    for result in report.results:
        if result.succeeded:
            click.echo(f"Downloaded {result.asset_path} -> {result.file_path} ({result.bytes_written} bytes)")

    for result in report.failures:
        click.echo(f"FAILED {result.asset_path} [{result.error_kind}]: {result.message}", err=True)

    click.echo(f"{report.completed}/{report.total_attempted} asset(s) downloaded from {report.items_found} item(s)")
    if report.more_available:
        click.echo("More matches exist beyond the first page of results; use --all-pages to download them", err=True)


@with_error_handling("download", exit_on_error=True)
def run_download(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    ctx: click.Context,
    repository: str,
    package: str,
    version: Optional[str],
    output_dir: Optional[str],
    all_pages: bool,
    verify_checksums: bool,
) -> DownloadReport:
    """Run a download with a client built from the group options."""
    with create_client(ctx, verify_checksums=True if verify_checksums else None) as client:
        return client.download(repository, package, version, output_dir=output_dir, all_pages=all_pages)


@click.command()
@click.argument("repository")
@click.argument("package")
@click.argument("version", required=False)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    help="Directory to write the downloaded files to (default: current directory)",
)
@click.option(
    "--all-pages",
    is_flag=True,
    help="Follow search pagination instead of downloading the first page of matches only",
)
@click.option(
    "--verify-checksums",
    is_flag=True,
    help="Verify each file against the strongest checksum published by Nexus",
)
@click.pass_context
def download(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    ctx: click.Context,
    repository: str,
    package: str,
    version: Optional[str],
    output_dir: Optional[str],
    all_pages: bool,
    verify_checksums: bool,
) -> None:
    """Download Nexus repository artifacts (e.g. 'pypi-internal document-store 0.2.1').

    Every asset of every matching package version is written to a file named
    after the last segment of its path. A failing asset does not stop the
    others; the command exits with status 1 if any asset failed.
    """
    setup_logging(ctx.obj["debug"])

    report = run_download(ctx, repository, package, version, output_dir, all_pages, verify_checksums)

    if report.not_found:
        click.echo(f"No package found for {report.describe_query()}")
        return

    print_download_report(report)

    if report.has_failures:
        log_and_exit(f"Download completed with {report.failed} failed asset(s)")


__all__ = ["download", "print_download_report"]
