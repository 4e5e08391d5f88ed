import json
import os
from typing import List

from rich.console import Console
from rich.table import Table

from library_catalog.book import Book
from library_catalog.loan import Loan

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode not in OUTPUT_MODES:
        raise ValueError(f"Unknown output mode: {mode!r}. Expected plain, json or rich.")
    os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, "plain").lower()
    return mode if mode in OUTPUT_MODES else "plain"


def print_list_result(books: List[Book], empty_message: str = "No books in library.") -> None:
    """Print a list of books in the current output mode.
    - plain: 'ISBN - Title by Author' lines
    - json: JSON array of isbn, title, author
    - rich: Rich table
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
        return

    if not books:
        print(empty_message)
        return

    if mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        for b in books:
            table.add_row(b.isbn, b.title, b.author)
        _console.print(table)
    else:
        for b in books:
            print(f"{b.isbn} - {b.title} by {b.author}")


def print_loans_result(loans: List[Loan]) -> None:
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps([loan.to_dict() for loan in loans], ensure_ascii=False))
        return

    if not loans:
        print("No active loans.")
        return

    if mode == "rich":
        table = Table(title="🔖 Loans", header_style="bold cyan")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Borrower", style="yellow")
        table.add_column("Since", style="dim")
        for loan in loans:
            table.add_row(loan.book.isbn, loan.book.title, loan.borrower_id, loan.loaned_at.strftime("%Y-%m-%d %H:%M"))
        _console.print(table)
    else:
        for loan in loans:
            print(f"{loan.book.isbn} - {loan.book.title} loaned to {loan.borrower_id}")
