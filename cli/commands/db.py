# cli/commands/db.py
import click
from shelves.sa.database import Database

@click.group()
def db():
    """Database commands"""
    pass

@db.command()
def init():
    """Create the database schema"""
    database = Database()
    try:
        database.init_db()
    finally:
        database.dispose()
    click.echo(click.style("Database initialized: ", fg='green') +
               click.style(database.connection_string, fg='cyan'))
