import logging
import threading
from typing import List, Optional

from library_catalog.book import Book, BookBuilder
from library_catalog.config import settings
from library_catalog.loan import Loan
from library_catalog.services.notification_service import NotificationChannel, build_notification_channel
from library_catalog.services.subscribers import Subscriber

logger = logging.getLogger(__name__)

LOAN_MESSAGE = "You have borrowed the book {title}"
RETURN_MESSAGE = "You have returned the book with ISBN {isbn}. Thank you!"


class CatalogManager:
    """Owns the book catalog, the active loans and the subscriber list.

    Every operation runs to completion under one re-entrant lock, including
    the notifications it triggers. Lookups that find nothing are no-ops; the
    return values only report what happened.

    ISBN uniqueness is not enforced and a book can be removed while it is on
    loan. Callers that need either guarantee must check with ``search`` or
    ``list_loans`` first.
    """

    def __init__(self, notification_channel: NotificationChannel) -> None:
        self.notification_channel = notification_channel
        self._books: List[Book] = []
        self._loans: List[Loan] = []
        self._observers: List[Subscriber] = []
        self._lock = threading.RLock()

    # ------------------------- Catalog operations ------------------------- #
    def add_book(self, title: str, author: str, isbn: str) -> Book:
        """Catalog a new book and notify every subscriber in registration order."""
        book = BookBuilder().with_title(title).with_author(author).with_isbn(isbn).build()
        with self._lock:
            self._books.append(book)
            logger.info("Added book %s", book)
            self._notify_observers(book)
        return book

    def remove_book(self, isbn: str) -> bool:
        """Remove the first book with this ISBN. Returns False if there was none."""
        with self._lock:
            for index, book in enumerate(self._books):
                if book.isbn == isbn:
                    del self._books[index]
                    logger.info("Removed book %s", book)
                    return True
        logger.debug("remove_book: no book with ISBN %s", isbn)
        return False

    def find_book(self, isbn: str) -> Optional[Book]:
        with self._lock:
            return next((b for b in self._books if b.isbn == isbn), None)

    def search(self, query: str) -> List[Book]:
        """Books whose title or author contains ``query`` or whose ISBN equals it.

        Matching is case-sensitive and the result keeps catalog order.
        """
        with self._lock:
            return [
                b for b in self._books
                if query in b.title or query in b.author or b.isbn == query
            ]

    def list_books(self) -> List[Book]:
        with self._lock:
            return list(self._books)

    # ------------------------- Loan operations ------------------------- #
    def loan_book(self, isbn: str, borrower_id: str) -> Optional[Loan]:
        """Loan the first book with this ISBN to ``borrower_id`` and confirm it."""
        with self._lock:
            book = self.find_book(isbn)
            if book is None:
                logger.debug("loan_book: no book with ISBN %s", isbn)
                return None
            loan = Loan(book=book, borrower_id=borrower_id)
            self._loans.append(loan)
            logger.info("Loaned %s to %s", book, borrower_id)
            self._send(borrower_id, LOAN_MESSAGE.format(title=book.title))
            return loan

    def return_book(self, isbn: str, borrower_id: str) -> Optional[Loan]:
        """Close the first loan matching both ISBN and borrower and confirm it."""
        with self._lock:
            for index, loan in enumerate(self._loans):
                if loan.book.isbn == isbn and loan.borrower_id == borrower_id:
                    del self._loans[index]
                    logger.info("%s returned ISBN %s", borrower_id, isbn)
                    self._send(borrower_id, RETURN_MESSAGE.format(isbn=loan.book.isbn))
                    return loan
        logger.debug("return_book: no loan of ISBN %s by %s", isbn, borrower_id)
        return None

    def list_loans(self) -> List[Loan]:
        with self._lock:
            return list(self._loans)

    # ------------------------- Observers ------------------------- #
    def register_observer(self, subscriber: Subscriber) -> None:
        # Registering the same subscriber twice means it is notified twice
        with self._lock:
            self._observers.append(subscriber)

    def unregister_observer(self, subscriber: Subscriber) -> bool:
        """Drop the first registration of ``subscriber``."""
        with self._lock:
            try:
                self._observers.remove(subscriber)
            except ValueError:
                return False
            return True

    def _notify_observers(self, book: Book) -> None:
        for observer in list(self._observers):
            try:
                observer.update(book)
            except Exception:
                logger.exception("Subscriber %r failed to handle new book %s", observer, book.isbn)

    def _send(self, recipient_id: str, message: str) -> None:
        try:
            self.notification_channel.send_notification(recipient_id, message)
        except Exception:
            logger.exception("Notification to %s could not be delivered", recipient_id)


class CatalogRegistry:
    """Hands out one shared CatalogManager by convention.

    The first ``get_instance`` call creates the manager, using the given
    channel or the configured default. ``reset`` forgets it so the next call
    starts from an empty catalog.
    """

    _instance: Optional[CatalogManager] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls, channel: Optional[NotificationChannel] = None) -> CatalogManager:
        with cls._lock:
            if cls._instance is None:
                if channel is None:
                    channel = build_notification_channel(settings.notification_channel)
                cls._instance = CatalogManager(channel)
                logger.debug("Catalog manager created with %s", type(channel).__name__)
            elif channel is not None and channel is not cls._instance.notification_channel:
                logger.warning("Catalog manager already exists; ignoring the new notification channel")
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._instance = None
