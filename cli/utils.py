import click
from typing import Optional
from shelves.sa.models import Book
from shelves.smart import ShelfItem, ShelfList, ShelfPage

def format_book(book: Optional[Book]) -> str:
    """Format a book as 'Title by Author, Author'"""
    if book is None:
        return "-"
    if book.authors:
        return f"{book.title} by {', '.join(book.authors)}"
    return book.title

def format_item_details(item: ShelfItem) -> str:
    """Source specific details shown after the book title"""
    if item.status is not None:
        return f"{item.status}, {item.progress or 0}%"
    if item.rating is not None:
        return f"rated {item.rating:g}"
    if item.note:
        return item.note
    return ""

def print_shelf_list(shelf_list: ShelfList) -> None:
    """Print the shelf overview"""
    click.echo("\n" + click.style("Smart shelves:", fg='blue'))
    for summary in shelf_list.shelves:
        line = click.style(f"{summary.title:<16}", fg='blue') + click.style(f"{summary.key.value:<12}", fg='cyan')
        if summary.count is not None:
            line += click.style(str(summary.count), fg='green')
        if summary.sample_book is not None:
            line += click.style(f" e.g. {format_book(summary.sample_book)}", fg='yellow')
        click.echo(line)

def print_shelf_page(title: str, shelf_page: ShelfPage) -> None:
    """Print one page of a shelf"""
    first = (shelf_page.page - 1) * shelf_page.limit + 1
    click.echo("\n" + click.style(f"{title}", fg='blue') +
               click.style(f" (page {shelf_page.page}, {shelf_page.total} total)", fg='cyan'))
    if not shelf_page.items:
        click.echo(click.style("No books on this page", fg='yellow'))
        return
    for position, item in enumerate(shelf_page.items, start=first):
        details = format_item_details(item)
        click.echo(click.style(f"{position:>4}. ", fg='cyan') +
                   format_book(item.book) +
                   click.style(f" [{item.source.value}]", fg='blue') +
                   (click.style(f" {details}", fg='green') if details else ""))
