# cli/main.py
import click
from shelves.config import Settings, configure_logging
from .commands.db import db
from .commands.shelves import shelves

@click.group()
@click.option('--verbose/--no-verbose', default=False, help='Log debug output')
def cli(verbose: bool):
    """Smart Shelves CLI"""
    configure_logging("DEBUG" if verbose else Settings.from_env().log_level)

cli.add_command(db)
cli.add_command(shelves)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
