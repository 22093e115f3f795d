"""Init command implementation"""

from datetime import datetime

import click
from rich.console import Console

from ..util import get_instance_path, is_initialized, use_instance

console = Console()


@click.command(name="init", help="Initialize a migration instance directory")
@click.argument(
    "path",
    type=click.Path(),
    required=False,
)
@click.option(
    "--create-tables",
    is_flag=True,
    help="Create the destination image table",
)
def init(path: str = None, create_tables: bool = False):
    """Initialize a migration instance

    Args:
        path: Instance directory path (default: ~/.image-migrator)
        create_tables: Also create the destination table
    """
    instance_path = get_instance_path(path)

    if is_initialized(instance_path):
        console.print(
            f"[red]Error: Already initialized at {instance_path}[/red]"
        )
        raise click.Abort()

    console.print(f"Initializing instance at {instance_path}")
    instance_path.mkdir(parents=True, exist_ok=True)
    (instance_path / "data").mkdir(exist_ok=True)
    (instance_path / "logs").mkdir(exist_ok=True)

    config_content = f"""# image-migrator configuration
# Generated at: {datetime.now().strftime("%Y-%m-%d %H:%M:%S")}

# Legacy store (read only)
source_database_url = "sqlite:///{instance_path}/data/legacy.db"

# Destination store
destination_database_url = "sqlite:///{instance_path}/data/images.db"

# Image host serving the legacy files: {{base_url}}/{{path}}/{{name}}
base_url = "https://pic.jingyijun.xyz:8443/i"
fetch_timeout = 30.0  # seconds

# Legacy rows read per page
page_size = 10000

# Logging configuration
logging_level = "INFO"  # DEBUG, INFO, WARNING, ERROR
log_dir = "{instance_path}/logs"
"""
    config_file = instance_path / "config.toml"
    config_file.write_text(config_content)

    if create_tables:
        console.print("Creating destination tables...")
        use_instance(instance_path)

        from ...config import load_settings
        from ...database import create_destination_tables, make_engine

        settings = load_settings()
        engine = make_engine(settings.destination_database_url)
        try:
            create_destination_tables(engine)
        finally:
            engine.dispose()

    console.print("")
    console.print("[green]✓ Instance initialized successfully![/green]")
    console.print("")
    console.print("Next steps:")
    console.print("  1. Edit database URLs and base_url in:")
    console.print(f"     {config_file}")
    console.print("  2. Run the migration:")
    if path:
        console.print(f"     image-migrator run {path}")
    else:
        console.print("     image-migrator run")
