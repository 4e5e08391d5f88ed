from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Book:
    """Represents a single item in the catalog.

    Instances are immutable. No validation is applied, so an empty or
    malformed ISBN is stored as given.
    """

    title: str
    author: str
    isbn: str

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (ISBN: {self.isbn})"

    def to_dict(self) -> dict:
        return {"title": self.title, "author": self.author, "isbn": self.isbn}

    @staticmethod
    def from_dict(data: dict) -> "Book":
        # Missing keys fall back to empty text, the same as BookBuilder
        return Book(
            title=data.get("title", ""),
            author=data.get("author", ""),
            isbn=data.get("isbn", ""),
        )


class BookBuilder:
    """Fluent staging object for a Book.

    Each ``with_*`` call overwrites one field and returns the builder, so
    calls can be chained in any order. Unset fields build as ``""``.
    """

    def __init__(self) -> None:
        self._title = ""
        self._author = ""
        self._isbn = ""

    def with_title(self, title: str) -> "BookBuilder":
        self._title = title
        return self

    def with_author(self, author: str) -> "BookBuilder":
        self._author = author
        return self

    def with_isbn(self, isbn: str) -> "BookBuilder":
        self._isbn = isbn
        return self

    def build(self) -> Book:
        return Book(title=self._title, author=self._author, isbn=self._isbn)
