"""Catalog service: lookups, copy management, checkout/return and recommendations."""

import logging
import threading
from datetime import date, timedelta

from app.domain.catalog import Catalog
from app.domain.errors import (
    BookNotFoundError,
    NoCopyAvailableError,
    NoMatchingReturnError,
)
from app.domain.models import LOAN_PERIOD, Book
from app.ports.recommender import RecommenderPort

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Entry point for every operation on a catalog.

    Book-level refusals (``None``/``False`` results) are turned into typed
    domain errors here. All catalog access goes through one lock so that
    concurrent request threads cannot interleave a read-modify-write.
    """

    def __init__(
        self,
        catalog: Catalog,
        recommender: RecommenderPort,
        loan_period: timedelta = LOAN_PERIOD,
    ) -> None:
        self._catalog = catalog
        self._recommender = recommender
        self._loan_period = loan_period
        self._lock = threading.RLock()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def _require(self, book_id: int) -> Book:
        book = self._catalog.get(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def get_book(self, book_id: int) -> Book:
        with self._lock:
            return self._require(book_id)

    def list_available(self) -> list[Book]:
        """Books with at least one shelved copy, in catalog order."""
        with self._lock:
            return [b for b in self._catalog if b.has_available_copies()]

    def add_copy(self, book_id: int) -> Book:
        with self._lock:
            book = self._require(book_id)
            book.add_copy()
        logger.info("Added copy of book %d (total=%d)", book_id, book.total_copies)
        return book

    def remove_copy(self, book_id: int) -> Book:
        """Retire one shelved copy. Raises NoCopyAvailableError when none is shelved."""
        with self._lock:
            book = self._require(book_id)
            if not book.remove_copy():
                logger.warning("Refused copy removal for book %d: none shelved", book_id)
                raise NoCopyAvailableError(book_id, action="remove")
        logger.info("Removed copy of book %d (total=%d)", book_id, book.total_copies)
        return book

    def checkout(self, book_id: int, today: date | None = None) -> tuple[Book, str]:
        """Check out one copy. Returns the book and the due date of that copy."""
        with self._lock:
            book = self._require(book_id)
            due_date = book.checkout(today=today, loan_period=self._loan_period)
            if due_date is None:
                logger.warning("Refused checkout for book %d: no copy available", book_id)
                raise NoCopyAvailableError(book_id)
        logger.info("Checked out book %d, due %s", book_id, due_date)
        return book, due_date

    def return_copy(self, book_id: int, due_date: str) -> Book:
        with self._lock:
            book = self._require(book_id)
            if not book.return_copy(due_date):
                logger.warning(
                    "Refused return for book %d: nothing due on %s", book_id, due_date
                )
                raise NoMatchingReturnError(book_id, due_date)
        logger.info("Returned book %d (due %s)", book_id, due_date)
        return book

    def update_book(self, book: Book) -> Book:
        """
        Replace the stored book sharing ``book.id`` with ``book``.

        This is a whole-record replacement, not a field merge: state held
        only by the previous instance is discarded.
        """
        with self._lock:
            self._catalog.replace(book)
        logger.info("Replaced book %d", book.id)
        return book

    def recommend(self) -> list[Book]:
        with self._lock:
            return self._recommender.recommend(self._catalog.books())
