import json
import logging
from typing import Iterable, List, Optional

from rich.console import Console

from library_catalog.book import Book
from library_catalog.library import CatalogManager
from library_catalog.loan import Loan
from library_catalog.services.subscribers import Member

logger = logging.getLogger(__name__)

DEMO_BOOKS = [
    Book("El Gran Gatsby", "F. Scott Fitzgerald", "123456789"),
    Book("1984", "George Orwell", "987654321"),
    Book("El Señor de los Anillos", "J.R.R. Tolkien", "555555555"),
]
DEMO_LOAN = ("123456789", "user01")


def load_seed_books(path: Optional[str] = None) -> List[Book]:
    """Read seed books from a JSON array, or return the demo books.

    Entries missing any of isbn/title/author are skipped.
    Raises OSError or json.JSONDecodeError if the file cannot be read.
    """
    if not path:
        return list(DEMO_BOOKS)

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    books = []
    for item in data:
        if isinstance(item, dict) and all(k in item for k in ("isbn", "title", "author")):
            books.append(Book.from_dict(item))
        else:
            logger.warning("Skipping invalid seed entry: %r", item)
    return books


def populate(manager: CatalogManager, books: Iterable[Book]) -> None:
    for book in books:
        manager.add_book(book.title, book.author, book.isbn)


def seed_demo_catalog(
    manager: CatalogManager,
    user_ids: Iterable[str],
    books: Optional[Iterable[Book]] = None,
    console: Optional[Console] = None,
) -> Optional[Loan]:
    """Register members, add the books and make the demo loan."""
    for user_id in user_ids:
        manager.register_observer(Member(user_id, console))
    populate(manager, DEMO_BOOKS if books is None else books)
    isbn, borrower = DEMO_LOAN
    return manager.loan_book(isbn, borrower)
