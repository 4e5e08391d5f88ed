import json
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from library_catalog.book import Book
from library_catalog.config import configure_logging, settings
from library_catalog.library import CatalogManager, CatalogRegistry
from library_catalog.seed import load_seed_books, populate, seed_demo_catalog
from library_catalog.services.notification_service import build_notification_channel
from library_catalog.ui_helpers import print_list_result, print_loans_result, set_output_mode

# Notification lines are log-like, keep each on one line
console = Console(soft_wrap=True)

app = typer.Typer(help="Library catalog CLI")


def _seed_books() -> List[Book]:
    try:
        return load_seed_books(settings.seed_file)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Could not read seed file {settings.seed_file}: {e}")
        raise typer.Exit(code=1)


def _get_manager() -> CatalogManager:
    try:
        channel = build_notification_channel(settings.notification_channel, console)
    except ValueError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)
    return CatalogRegistry.get_instance(channel)


def _load_catalog() -> CatalogManager:
    """Shared manager, filled with the seed books on first use."""
    manager = _get_manager()
    if not manager.list_books():
        populate(manager, _seed_books())
    return manager


@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global options for the CLI (e.g. output mode)."""
    configure_logging()
    if output:
        try:
            set_output_mode(output)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--output")


@app.command("demo")
def cli_demo():
    """Register demo members, add books and loan one of them."""
    books = _seed_books()
    manager = _get_manager()
    console.print(Panel.fit(f"[bold]{settings.app_name}[/] demo", border_style="blue"))
    loan = seed_demo_catalog(manager, settings.demo_subscribers, books=books, console=console)
    if loan is None:
        print("Demo loan skipped: book not in catalog.")
    print_list_result(manager.list_books())
    print_loans_result(manager.list_loans())


@app.command("list")
def cli_list():
    """List every book in the seed catalog."""
    print_list_result(_load_catalog().list_books())


@app.command("search")
def cli_search(query: str = typer.Argument(..., help="Title or author fragment, or an exact ISBN")):
    """Search the seed catalog."""
    results = _load_catalog().search(query)
    print_list_result(results, empty_message="No books found.")


@app.command("loan")
def cli_loan(
    isbn: str,
    borrower: str,
    give_back: bool = typer.Option(False, "--return", "-r", help="Return the book right after loaning it"),
):
    """Loan a seed book to a borrower, optionally returning it again."""
    manager = _load_catalog()
    if manager.loan_book(isbn, borrower) is None:
        print(f"Book with ISBN {isbn} not found.")
        return
    if give_back:
        manager.return_book(isbn, borrower)
    print_loans_result(manager.list_loans())


if __name__ == "__main__":
    app()
