"""Run command implementation"""

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...config import load_settings
from ...exception import ConfigurationError
from ...enum import RunStatus
from ...logging import setup_logging
from ...migrator import RunReport, run_migration
from ..util import get_instance_path, is_initialized, use_instance

console = Console()


@click.command(name="run", help="Migrate all legacy images")
@click.argument(
    "path",
    type=click.Path(),
    required=False,
)
@click.option(
    "--page-size",
    type=click.IntRange(min=1),
    default=None,
    help="Legacy rows per page (overrides config)",
)
@click.option(
    "--base-url",
    default=None,
    help="Image host base URL (overrides config)",
)
def run(path: str = None, page_size: int = None, base_url: str = None):
    """Run the migration

    Exits with status 1 only if reading a page failed. Failed downloads
    and inserts are reported in the logs and the summary.

    Args:
        path: Instance directory path (default: ~/.image-migrator)
        page_size: Override for the configured page size
        base_url: Override for the configured base URL
    """
    instance_path = get_instance_path(path)
    if not is_initialized(instance_path):
        console.print(
            f"[yellow]No config.toml at {instance_path}, "
            f"using environment and defaults[/yellow]"
        )
    use_instance(instance_path)

    try:
        settings = load_settings()
    except ConfigurationError as e:
        console.print(f"[red]Error loading config: {escape(e.message)}[/red]")
        raise click.Abort()

    setup_logging(settings.resolved_log_dir(), settings.logging_level)

    console.print(f"[cyan]Migrating from {settings.source_database_url}[/cyan]")
    console.print(f"[cyan]Into {settings.destination_database_url}[/cyan]")

    report = run_migration(settings, page_size=page_size, base_url=base_url)
    print_summary(report)

    if report.status == RunStatus.FATAL_ABORTED:
        raise click.exceptions.Exit(1)


def print_summary(report: RunReport) -> None:
    table = Table(title="Migration Summary")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Status", report.status.value)
    table.add_row("Pages", str(report.pages))
    table.add_row("Succeeded", str(report.succeeded))
    table.add_row("Download failures", str(report.fetch_failed))
    table.add_row("Insert failures", str(report.insert_failed))
    console.print(table)

    if report.error_message is not None:
        console.print(
            f"[red]Aborted at page {report.failed_page}: {escape(report.error_message)}[/red]"
        )
