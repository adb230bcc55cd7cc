"""Ordered, id-keyed collection of books."""

from collections.abc import Iterable, Iterator

from app.domain.errors import BookNotFoundError, DuplicateBookError
from app.domain.models import Book


class Catalog:
    """
    Owns the books of one library instance.

    Insertion order is preserved and used as the catalog order everywhere
    (listing, recommendation input). Ids must be unique.
    """

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._books: dict[int, Book] = {}
        for book in books:
            self.add(book)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._books.values()))

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._books

    def add(self, book: Book) -> None:
        if book.id in self._books:
            raise DuplicateBookError(book.id)
        self._books[book.id] = book

    def get(self, book_id: int) -> Book | None:
        return self._books.get(book_id)

    def replace(self, book: Book) -> Book:
        """
        Swap the stored book with the same id for ``book``.

        The new instance takes the old one's position. Returns the instance
        that was replaced. Raises BookNotFoundError for an unknown id.
        """
        previous = self._books.get(book.id)
        if previous is None:
            raise BookNotFoundError(book.id)
        self._books[book.id] = book
        return previous

    def books(self) -> list[Book]:
        return list(self._books.values())
