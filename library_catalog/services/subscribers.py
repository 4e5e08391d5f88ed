import logging
from abc import ABC, abstractmethod
from typing import Optional

from rich.console import Console
from rich.markup import escape

from library_catalog.book import Book

logger = logging.getLogger(__name__)


class Subscriber(ABC):
    """Receives a callback for every newly cataloged book."""

    @abstractmethod
    def update(self, book: Book) -> None:
        ...


class Member(Subscriber):
    """A library user who wants to hear about new arrivals."""

    def __init__(self, user_id: str, console: Optional[Console] = None) -> None:
        self.user_id = user_id
        self.console = console or Console()

    def update(self, book: Book) -> None:
        self.console.print(
            f"[green]📚 User {escape(self.user_id)} has been notified about the new book:[/] {escape(book.title)}"
        )

    def __repr__(self) -> str:
        return f"Member({self.user_id!r})"


class LoggingSubscriber(Subscriber):
    def update(self, book: Book) -> None:
        logger.info("New book cataloged: %s", book)
