# cli/commands/shelves.py
import click
from shelves.errors import InvalidShelfType, StoreUnavailable
from shelves.sa.database import Database
from shelves.smart import SmartShelfService, ShelfType, get_definition
from api.schemas.shelf import ShelfListSchema, ShelfPageSchema
from ..utils import print_shelf_list, print_shelf_page

@click.group()
def shelves():
    """Smart shelf commands"""
    pass

@shelves.command(name='list')
@click.option('--user-id', type=int, required=True, help='User whose shelves to summarize')
@click.option('--json', 'as_json', is_flag=True, help='Print the summary as JSON')
def list_shelves(user_id: int, as_json: bool):
    """Show every smart shelf with its count"""
    db = Database()
    try:
        service = SmartShelfService.from_database(db)
        shelf_list = service.list_shelves(user_id)
    except StoreUnavailable as e:
        raise click.ClickException(f"Could not read shelves: {e}")
    finally:
        db.dispose()

    if as_json:
        click.echo(ShelfListSchema.model_validate(shelf_list).model_dump_json(indent=2))
    else:
        print_shelf_list(shelf_list)

@shelves.command(name='show')
@click.argument('shelf_type')
@click.option('--user-id', type=int, required=True, help='User whose shelf to show')
@click.option('--page', default=None, type=int, help='Page number (default 1)')
@click.option('--limit', default=None, type=int, help='Items per page (default 20, max 100)')
@click.option('--json', 'as_json', is_flag=True, help='Print the page as JSON')
def show_shelf(shelf_type: str, user_id: int, page: int, limit: int, as_json: bool):
    """Show one page of a smart shelf
    
    Example:
        smart-shelves shelves show recent --user-id 1
        smart-shelves shelves show top-rated --user-id 1 --page 2 --limit 10
    """
    try:
        definition = get_definition(shelf_type)
    except InvalidShelfType:
        valid = ", ".join(t.value for t in ShelfType)
        raise click.BadParameter(f"'{shelf_type}' is not a shelf type (choose from {valid})",
                                 param_hint="SHELF_TYPE")

    db = Database()
    try:
        service = SmartShelfService.from_database(db)
        shelf_page = service.get_shelf(user_id, definition.key, page=page, limit=limit)
    except StoreUnavailable as e:
        raise click.ClickException(f"Could not read shelf: {e}")
    finally:
        db.dispose()

    if as_json:
        click.echo(ShelfPageSchema.model_validate(shelf_page).model_dump_json(indent=2))
    else:
        print_shelf_page(definition.title, shelf_page)
