from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from library_catalog.book import Book


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Loan:
    """An active association between a book and a borrower.

    Attributes:
        book (Book): The loaned book. The catalog keeps ownership of it.
        borrower_id (str): Identifier of the borrower.
        loaned_at (datetime): When the loan was made, UTC.
    """

    book: Book
    borrower_id: str
    loaned_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> dict:
        return {
            "isbn": self.book.isbn,
            "title": self.book.title,
            "borrower_id": self.borrower_id,
            "loaned_at": self.loaned_at.isoformat(),
        }
