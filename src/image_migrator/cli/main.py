"""image-migrator CLI entry point"""

import click

from .command.init import init
from .command.run import run


@click.group(
    name="image-migrator",
    help="Migrate legacy image records into the new image table",
)
def main():
    """Main CLI entry point"""
    pass


main.add_command(init)
main.add_command(run)


if __name__ == "__main__":
    main()
